"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


def straight_curve(n: int = 30, step: float = 1.0) -> np.ndarray:
    """Collinear, equally spaced samples along a skew 3D direction."""
    direction = np.array([1.0, 2.0, -0.5])
    direction /= np.linalg.norm(direction)
    return np.outer(np.arange(n) * step, direction) + np.array([3.0, -1.0, 7.0])


def v_curve(arm: int = 10, slope: float = 0.1) -> np.ndarray:
    """Out along +x for ``arm`` steps, then back along a shallow diagonal.

    The reversal sits at index ``arm``; the curve has 2 * arm + 1 points.
    """
    out = [(float(t), 0.0, 0.0) for t in range(arm + 1)]
    back = [(float(arm - t), slope * t, 0.0) for t in range(1, arm + 1)]
    return np.array(out + back)


def square_curve(side: int = 20) -> np.ndarray:
    """Open path tracing three sides of a square, corners at side and 2 * side."""
    a = [(float(t), 0.0, 0.0) for t in range(side)]
    b = [(float(side), float(t), 0.0) for t in range(side)]
    c = [(float(side - t), float(side), 0.0) for t in range(side + 1)]
    return np.array(a + b + c)


def helix_curve(n: int = 200, turns: float = 3.0) -> np.ndarray:
    t = np.linspace(0.0, turns * 2 * np.pi, n)
    return np.column_stack([np.cos(t), np.sin(t), 0.1 * t])


CURVE_TEXT = """ 554.2572093389093 -338.6062325459966 -561.6394251506157 
\t714.7077358417557 -286.02874244378114 -386.06759886106306\t

 800.0 -200.0 -300.0
"""


@pytest.fixture
def straight() -> np.ndarray:
    return straight_curve()


@pytest.fixture
def v_shape() -> np.ndarray:
    return v_curve()


@pytest.fixture
def square() -> np.ndarray:
    return square_curve()


@pytest.fixture
def helix() -> np.ndarray:
    return helix_curve()


@pytest.fixture
def curve_text() -> str:
    return CURVE_TEXT


@pytest.fixture
def curve_file(tmp_path):
    path = tmp_path / "tdata.gpdata"
    lines = [f"{x} {y} {z}" for x, y, z in square_curve()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
