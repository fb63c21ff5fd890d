"""Pipeline configuration — the tuning knobs of one analysis pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls the curvature window, the corner cut-off and the optional stages."""

    # Samples between the apex and each arm of the sliding triangle.
    # Must match the point spacing: too large misses tight corners,
    # too small turns sampling jitter into corners.
    window: int = 10

    # Largest apex angle (degrees) still accepted as a corner
    threshold: float = 125.0

    # Cut the curve into piecewise-linear segments at the corners
    segment: bool = True
