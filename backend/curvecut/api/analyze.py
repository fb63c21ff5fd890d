"""POST /api/analyze — angle profile, corners and segments for one curve."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from curvecut.config import Settings
from curvecut.dependencies import get_settings
from curvecut.engine.config import PipelineConfig
from curvecut.engine.context import CurveContext
from curvecut.engine.errors import InvalidArgument
from curvecut.engine.pipeline import create_pipeline
from curvecut.ingest.parser import parse_curve
from curvecut.models.requests import AnalyzeRequest
from curvecut.models.responses import AnalyzeResponse, CornerOut, SegmentOut

logger = logging.getLogger(__name__)

router = APIRouter()


# Plain def: the pipeline is CPU-bound, FastAPI runs it in the threadpool
@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest, settings: Settings = Depends(get_settings)) -> AnalyzeResponse:
    start = time.perf_counter()

    config = PipelineConfig(
        window=req.window if req.window is not None else settings.default_window,
        threshold=req.threshold if req.threshold is not None else settings.default_threshold,
        segment=req.segment,
    )

    try:
        points = parse_curve(req.text) if req.text is not None else req.points
        if len(points) > settings.max_points:
            raise HTTPException(
                status_code=413,
                detail=f"curve has {len(points)} points, limit is {settings.max_points}",
            )
        ctx = create_pipeline(config).run(CurveContext(points=points))
    except InvalidArgument as e:
        logger.info("Rejected analyze request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return _to_response(ctx, elapsed)


def _to_response(ctx: CurveContext, elapsed_ms: float) -> AnalyzeResponse:
    return AnalyzeResponse(
        num_points=ctx.num_points,
        window=ctx.config.window,
        threshold=ctx.config.threshold,
        angles=[None if a is None else round(a, 4) for a in ctx.angles],
        corners=[
            CornerOut(index=c.index, point=c.point, angle=ctx.corner_angle(c))
            for c in ctx.corners
        ],
        segments=[
            SegmentOut(
                start=s.start,
                end=s.end,
                num_points=s.num_points,
                chord_length=round(s.chord_length, 6),
                arc_length=round(s.arc_length, 6),
                straightness=round(s.straightness, 6),
            )
            for s in ctx.segments
        ],
        features=ctx.features,
        processing_time_ms=round(elapsed_ms, 1),
        transforms_completed=len(ctx.completed_transforms),
        errors=ctx.errors,
    )
