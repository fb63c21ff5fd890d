"""T0.01 — Curve Validation.

Coerce the raw input into an Nx3 float array and reject malformed curves
before any curvature work starts.
"""

from __future__ import annotations

from curvecut.engine.context import CurveContext
from curvecut.engine.registry import Layer, transform
from curvecut.engine.validation import as_curve
from curvecut.utils.geometry import arc_lengths


@transform(
    id="T0.01",
    layer=Layer.INGESTION,
    description="Validate curve points and measure total arc length",
)
def curve_validation(ctx: CurveContext) -> None:
    ctx.points = as_curve(ctx.points)
    ctx.features["num_points"] = ctx.num_points
    lengths = arc_lengths(ctx.points)
    ctx.features["total_arc_length"] = float(lengths[-1]) if len(lengths) else 0.0
