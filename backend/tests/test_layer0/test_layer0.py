"""Tests for Layer 0 — curve validation and argument checks."""

import numpy as np
import pytest

from curvecut.engine.context import CurveContext
from curvecut.engine.errors import InvalidArgument
from curvecut.engine.layer0.t0_01_curve_validation import curve_validation
from curvecut.engine.validation import as_curve, check_angles, check_threshold, check_window


def test_as_curve_accepts_tuples():
    arr = as_curve([(0, 0, 0), (1.5, 2, -3)])
    assert arr.shape == (2, 3)
    assert arr.dtype == np.float64
    assert arr[1].tolist() == [1.5, 2.0, -3.0]


def test_as_curve_accepts_arrays_and_rows():
    assert as_curve(np.arange(9).reshape(3, 3)).shape == (3, 3)
    assert as_curve([np.array([1.0, 2.0, 3.0])]).shape == (1, 3)


def test_as_curve_empty():
    assert as_curve([]).shape == (0, 3)
    assert as_curve(np.array([])).shape == (0, 3)


@pytest.mark.parametrize(
    "bad",
    [
        "1 2 3",
        42,
        [(1, 2)],
        [(1, 2, 3, 4)],
        [(1, 2, 3), (1, 2)],
        [("1", "2", "3")],
        [(1, None, 3)],
        np.zeros((4, 2)),
        np.array([["a", "b", "c"]]),
        [(0.0, float("nan"), 1.0)],
        [(0.0, 1.0, float("inf"))],
        [(10**400, 0, 0)],
    ],
)
def test_as_curve_rejects_malformed(bad):
    with pytest.raises(InvalidArgument):
        as_curve(bad)


def test_as_curve_oversized_integer_is_invalid_argument():
    with pytest.raises(InvalidArgument, match="float"):
        as_curve([(0, 0, 0), (-(10**400), 1, 2)])


def test_as_curve_reports_bad_point_index():
    with pytest.raises(InvalidArgument, match="point 2"):
        as_curve([(0, 0, 0), (1, 1, 1), (2, 2)])


@pytest.mark.parametrize("bad", [0, -3, 2.0, True, "10", None])
def test_check_window_rejects(bad):
    with pytest.raises(InvalidArgument):
        check_window(bad)


def test_check_window_accepts_numpy_int():
    assert check_window(np.int64(5)) == 5


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "125", None, False])
def test_check_threshold_rejects(bad):
    with pytest.raises(InvalidArgument):
        check_threshold(bad)


def test_check_angles_length_mismatch():
    with pytest.raises(InvalidArgument, match="3 entries"):
        check_angles([None, 90.0, None], 4)


def test_check_angles_rejects_nan_and_text():
    with pytest.raises(InvalidArgument):
        check_angles([None, float("nan")], 2)
    with pytest.raises(InvalidArgument):
        check_angles([None, "90"], 2)


def test_curve_validation_transform(square):
    ctx = CurveContext(points=square.tolist())
    curve_validation(ctx)
    assert isinstance(ctx.points, np.ndarray)
    assert ctx.features["num_points"] == 61
    # three sides of a 20x20 square
    assert ctx.features["total_arc_length"] == pytest.approx(60.0)


def test_curve_validation_empty_curve():
    ctx = CurveContext(points=[])
    curve_validation(ctx)
    assert ctx.features["num_points"] == 0
    assert ctx.features["total_arc_length"] == 0.0
