"""CurveCut corner detection engine."""

from curvecut.engine.registry import transform, Layer, get_registry
from curvecut.engine.context import Corner, CurveContext, Segment
from curvecut.engine.errors import InvalidArgument
from curvecut.engine.pipeline import Pipeline, analyze_curve, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "Corner",
    "CurveContext",
    "Segment",
    "InvalidArgument",
    "Pipeline",
    "analyze_curve",
    "create_pipeline",
]
