"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class AnalyzeRequest(BaseModel):
    points: list[list[float]] | None = Field(
        default=None,
        description="Ordered curve samples as [x, y, z] triples",
    )
    text: str | None = Field(
        default=None,
        description='Curve as text, one "<x> <y> <z>" sample per line',
    )
    window: int | None = Field(
        default=None,
        description="Samples between the apex and each triangle arm (server default if omitted)",
    )
    threshold: float | None = Field(
        default=None,
        description="Largest apex angle in degrees still counted as a corner",
    )
    segment: bool = Field(default=True, description="Also cut the curve into segments")

    @model_validator(mode="after")
    def _one_source(self) -> "AnalyzeRequest":
        if (self.points is None) == (self.text is None):
            raise ValueError("exactly one of 'points' or 'text' must be given")
        return self
