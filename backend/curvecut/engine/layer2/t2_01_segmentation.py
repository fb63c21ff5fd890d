"""T2.01 — Piecewise-Linear Segmentation.

Cut the curve at every corner. Segments share their boundary sample and
together span index 0 to N-1. Straightness = chord / arc length.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from curvecut.engine.context import Corner, CurveContext, Segment
from curvecut.engine.registry import Layer, transform
from curvecut.engine.validation import as_curve
from curvecut.utils.geometry import arc_lengths, chord_length


def segment_curve(curve: Any, corners: Sequence[Corner]) -> list[Segment]:
    """Split ``curve`` into segments between consecutive cut indices."""
    pts = as_curve(curve)
    n = len(pts)
    if n < 2:
        return []

    cuts = sorted({0, n - 1} | {c.index for c in corners if 0 < c.index < n - 1})
    cumulative = arc_lengths(pts)

    segments: list[Segment] = []
    for start, end in zip(cuts[:-1], cuts[1:]):
        chord = chord_length(pts[start], pts[end])
        arc = float(cumulative[end] - cumulative[start])
        segments.append(
            Segment(
                start=start,
                end=end,
                start_point=_as_point(pts[start]),
                end_point=_as_point(pts[end]),
                chord_length=chord,
                arc_length=arc,
                straightness=chord / arc if arc > 0 else 1.0,
            )
        )
    return segments


def _as_point(p: np.ndarray) -> tuple[float, float, float]:
    return (float(p[0]), float(p[1]), float(p[2]))


@transform(
    id="T2.01",
    layer=Layer.SEGMENTATION,
    dependencies=["T1.02"],
    description="Cut the curve into piecewise-linear segments at corners",
)
def segmentation(ctx: CurveContext) -> None:
    ctx.segments = segment_curve(ctx.points, ctx.corners)

    ctx.features["segment_count"] = len(ctx.segments)
    if ctx.segments:
        ctx.features["mean_straightness"] = round(
            float(np.mean([s.straightness for s in ctx.segments])), 4
        )
        ctx.features["min_straightness"] = round(
            min(s.straightness for s in ctx.segments), 4
        )
    else:
        ctx.features["mean_straightness"] = None
        ctx.features["min_straightness"] = None
