"""CurveContext — the single mutable state object flowing through all transforms.

Scalar summaries go to CurveContext.features; the per-point and per-corner
results get their own fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np

from curvecut.engine.config import PipelineConfig

Point = tuple[float, float, float]


class Corner(NamedTuple):
    """A selected high-curvature location: index into the curve plus its point."""

    index: int
    point: Point


@dataclass(frozen=True)
class Segment:
    """Stretch of the curve between two cut indices (inclusive on both ends)."""

    start: int
    end: int
    start_point: Point
    end_point: Point
    chord_length: float
    arc_length: float
    # chord / arc; 1.0 means perfectly straight
    straightness: float

    @property
    def num_points(self) -> int:
        return self.end - self.start + 1


@dataclass
class CurveContext:
    """Shared state flowing through the entire pipeline."""

    # Ordered samples: Nx3 array of (x, y, z). Raw input until T0.01 has run.
    points: Any = field(default_factory=lambda: np.empty((0, 3)))
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # Apex angle per point, None where undefined
    angles: list[float | None] = field(default_factory=list)
    corners: list[Corner] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)

    # Scalar summaries keyed by feature name
    features: dict[str, Any] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    skipped_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_points(self) -> int:
        return len(self.points)

    def corner_angle(self, corner: Corner) -> float | None:
        if corner.index < len(self.angles):
            return self.angles[corner.index]
        return None
