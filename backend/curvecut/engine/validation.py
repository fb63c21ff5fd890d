"""Argument checks shared by the transforms. Everything here raises InvalidArgument."""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from curvecut.engine.errors import InvalidArgument


def as_curve(points: Any) -> NDArray[np.float64]:
    """Coerce an ordered sequence of (x, y, z) triples into an Nx3 float array.

    Accepts numeric numpy arrays of shape (N, 3), or any sequence whose items
    are 3-sequences of real numbers. Non-finite coordinates are rejected.
    """
    if isinstance(points, np.ndarray):
        if points.dtype.kind not in "biuf":
            raise InvalidArgument(f"curve must hold real numbers, got dtype {points.dtype}")
        arr = points.astype(np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 3)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise InvalidArgument(f"curve must have shape (N, 3), got {points.shape}")
    else:
        if isinstance(points, (str, bytes)) or not isinstance(points, Sequence):
            raise InvalidArgument(
                f"curve must be an ordered sequence of (x, y, z) triples, got {type(points).__name__}"
            )
        for i, p in enumerate(points):
            _check_triple(i, p)
        try:
            arr = np.array(points, dtype=np.float64).reshape(-1, 3)
        except (OverflowError, ValueError) as e:
            raise InvalidArgument(f"curve coordinates do not fit in a float: {e}") from e

    if not np.all(np.isfinite(arr)):
        bad = int(np.argmax(~np.all(np.isfinite(arr), axis=1)))
        raise InvalidArgument(f"point {bad} has a non-finite coordinate")
    return arr


def _check_triple(index: int, p: Any) -> None:
    if isinstance(p, np.ndarray):
        if p.shape != (3,) or p.dtype.kind not in "biuf":
            raise InvalidArgument(f"point {index} is not an (x, y, z) triple")
        return
    if isinstance(p, (str, bytes)) or not isinstance(p, Sequence) or len(p) != 3:
        raise InvalidArgument(f"point {index} is not an (x, y, z) triple")
    if not all(isinstance(c, numbers.Real) for c in p):
        raise InvalidArgument(f"point {index} has a non-numeric coordinate")


def check_window(window: Any) -> int:
    if isinstance(window, bool) or not isinstance(window, numbers.Integral):
        raise InvalidArgument(f"window must be a positive integer, got {window!r}")
    if window <= 0:
        raise InvalidArgument(f"window must be a positive integer, got {window}")
    return int(window)


def check_threshold(threshold: Any) -> float:
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
        raise InvalidArgument(f"threshold must be a real number of degrees, got {threshold!r}")
    if not math.isfinite(threshold):
        raise InvalidArgument(f"threshold must be finite, got {threshold}")
    return float(threshold)


def check_angles(angles: Any, expected_len: int) -> list[float | None]:
    """Validate an angle series against its curve. Returns a fresh list."""
    if isinstance(angles, (str, bytes)) or not isinstance(angles, (Sequence, np.ndarray)):
        raise InvalidArgument("angles must be a sequence of degrees or None")
    if len(angles) != expected_len:
        raise InvalidArgument(
            f"angle series has {len(angles)} entries but the curve has {expected_len} points"
        )
    series: list[float | None] = []
    for i, a in enumerate(angles):
        if a is None:
            series.append(None)
            continue
        if isinstance(a, bool) or not isinstance(a, numbers.Real) or not math.isfinite(a):
            raise InvalidArgument(f"angle {i} must be a finite number or None, got {a!r}")
        series.append(float(a))
    return series
