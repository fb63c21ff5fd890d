"""T1.01 — Apex Angle Profile. ★★★

For every sample i, the isosceles triangle (i - w, i, i + w) gives the angle
at apex i between the chords to its two arms. 180° = locally straight over
the window span; small values = sharp bend.

Samples closer than w to either end of the curve, and triangles with a
zero-length chord (repeated points), get None.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from curvecut.engine.context import CurveContext
from curvecut.engine.registry import Layer, transform
from curvecut.engine.validation import as_curve, check_window
from curvecut.utils.geometry import apex_angles


def compute_angles(curve: Any, window: int = 10) -> list[float | None]:
    """Apex angle in degrees at every sample of ``curve``.

    The result always has one entry per point. Curves shorter than
    ``2 * window + 1`` come back all None.
    """
    window = check_window(window)
    pts = as_curve(curve)
    n = len(pts)

    angles: list[float | None] = [None] * n
    if n < 2 * window + 1:
        return angles

    degrees, valid = apex_angles(pts[: n - 2 * window], pts[window : n - window], pts[2 * window :])

    for offset in np.flatnonzero(valid):
        angles[window + int(offset)] = float(degrees[offset])
    return angles


@transform(
    id="T1.01",
    layer=Layer.CURVATURE,
    dependencies=["T0.01"],
    description="Compute apex angle profile with a sliding isosceles triangle",
)
def apex_angle_profile(ctx: CurveContext) -> None:
    ctx.angles = compute_angles(ctx.points, ctx.config.window)

    defined = [a for a in ctx.angles if a is not None]
    ctx.features["defined_angle_count"] = len(defined)
    ctx.features["min_angle"] = round(min(defined), 3) if defined else None
    ctx.features["mean_angle"] = round(float(np.mean(defined)), 3) if defined else None
