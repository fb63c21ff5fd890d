"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class CornerOut(BaseModel):
    index: int
    point: tuple[float, float, float]
    angle: float | None = None


class SegmentOut(BaseModel):
    start: int
    end: int
    num_points: int
    chord_length: float
    arc_length: float
    straightness: float


class AnalyzeResponse(BaseModel):
    num_points: int = 0
    window: int
    threshold: float
    angles: list[float | None] = Field(default_factory=list)
    corners: list[CornerOut] = Field(default_factory=list)
    segments: list[SegmentOut] = Field(default_factory=list)
    features: dict[str, Any] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
