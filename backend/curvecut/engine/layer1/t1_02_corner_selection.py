"""T1.02 — Corner Selection. ★★

A sample is a corner when its apex angle is at most the threshold AND no
larger than either neighbour. Undefined angles count as 180° (straight).
Ties with equal neighbours still count, so a flat-bottomed dip can yield
adjacent corners; a single monotonic dip yields exactly one.
"""

from __future__ import annotations

from typing import Any

from curvecut.engine.context import Corner, CurveContext
from curvecut.engine.registry import Layer, transform
from curvecut.engine.validation import as_curve, check_angles, check_threshold

STRAIGHT = 180.0


def select_corners(curve: Any, angles: Any, threshold: float = 125.0) -> list[Corner]:
    """Corners of ``curve`` in ascending index order. Never index 0 or N-1."""
    threshold = check_threshold(threshold)
    pts = as_curve(curve)
    series = check_angles(angles, len(pts))

    filled = [STRAIGHT if a is None else a for a in series]

    corners: list[Corner] = []
    for i in range(1, len(filled) - 1):
        a, b, c = filled[i - 1], filled[i], filled[i + 1]
        if b <= threshold and a >= b and c >= b:
            x, y, z = pts[i]
            corners.append(Corner(i, (float(x), float(y), float(z))))
    return corners


@transform(
    id="T1.02",
    layer=Layer.CURVATURE,
    dependencies=["T1.01"],
    description="Select local angle minima below the corner threshold",
)
def corner_selection(ctx: CurveContext) -> None:
    ctx.corners = select_corners(ctx.points, ctx.angles, ctx.config.threshold)

    ctx.features["corner_count"] = len(ctx.corners)
    ctx.features["corner_indices"] = [c.index for c in ctx.corners]
    ctx.features["corner_angles"] = [
        None if (a := ctx.corner_angle(c)) is None else round(a, 1) for c in ctx.corners
    ]
