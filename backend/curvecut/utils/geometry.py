"""Leaf-node 3D geometry helpers. No engine imports.

Every helper broadcasts over leading axes, so the same call works for a single
vector of shape (3,) and for a stack of vectors of shape (N, 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# Chords shorter than this are treated as zero-length
ZERO_LENGTH_EPS = 1e-12


def subtract(p: NDArray[np.float64], q: NDArray[np.float64]) -> NDArray[np.float64]:
    """Vector from q to p."""
    return np.asarray(p, dtype=np.float64) - np.asarray(q, dtype=np.float64)


def dot(u: NDArray[np.float64], v: NDArray[np.float64]) -> NDArray[np.float64] | float:
    """Dot product along the last axis."""
    return np.sum(np.asarray(u, dtype=np.float64) * np.asarray(v, dtype=np.float64), axis=-1)


def magnitude(v: NDArray[np.float64]) -> NDArray[np.float64] | float:
    """Euclidean length along the last axis."""
    return np.linalg.norm(np.asarray(v, dtype=np.float64), axis=-1)


def clamped_arccos_degrees(cosine: NDArray[np.float64] | float) -> NDArray[np.float64] | float:
    """arccos in degrees, with the cosine clamped to [-1, 1] against float drift."""
    return np.degrees(np.arccos(np.clip(cosine, -1.0, 1.0)))


def unit_vectors(v: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.bool_]]:
    """Unit vectors and a validity mask along the last axis.

    Each vector is divided by its largest absolute component before the norm is
    taken, so huge finite coordinates cannot overflow. Zero-length and
    non-finite vectors are marked invalid and get a zero unit vector.
    """
    v = np.asarray(v, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        scale = np.max(np.abs(v), axis=-1, keepdims=True)
        ok = np.isfinite(scale) & (scale > 0)
        scaled = np.where(ok, v / np.where(ok, scale, 1.0), 0.0)
        norm = np.linalg.norm(scaled, axis=-1, keepdims=True)
        valid = ok & (scale * norm >= ZERO_LENGTH_EPS)
        unit = np.where(valid, scaled / np.where(valid, norm, 1.0), 0.0)
    return unit, valid[..., 0]


def apex_angles(
    left: NDArray[np.float64],
    apex: NDArray[np.float64],
    right: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.bool_]]:
    """Angle in degrees at ``apex`` between the chords apex→left and apex→right.

    Works on single points or on stacks of triangles. Returns the angles and a
    mask that is False where either chord is zero-length or overflows; the
    angle there is meaningless. 180° = collinear with the apex in between.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        u, u_ok = unit_vectors(subtract(left, apex))
        v, v_ok = unit_vectors(subtract(right, apex))
    return clamped_arccos_degrees(dot(u, v)), u_ok & v_ok


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    if len(points) == 0:
        return np.array([])
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def chord_length(p: NDArray[np.float64], q: NDArray[np.float64]) -> float:
    """Straight-line distance between two points."""
    return float(magnitude(subtract(q, p)))
