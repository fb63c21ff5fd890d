"""Pipeline orchestrator — runs transforms in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from typing import Any

from curvecut.engine.config import PipelineConfig
from curvecut.engine.context import CurveContext
from curvecut.engine.errors import InvalidArgument
from curvecut.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry
from curvecut.engine.validation import check_threshold, check_window

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2"]


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: CurveContext) -> CurveContext:
        """Run the full pipeline on the given context.

        InvalidArgument propagates to the caller. Any other failure is recorded
        in ``ctx.errors`` and every transform depending on it is skipped.
        """
        start = time.perf_counter()

        self._apply_config(ctx)

        skip_ids = self._gate()
        all_specs = self.registry.all()
        requested = {s.id for s in all_specs} - skip_ids
        ordered = self.registry.resolve_order(requested)

        logger.info(
            "Pipeline: %d transforms queued (%d skipped) for %d points",
            len(ordered),
            len(skip_ids),
            ctx.num_points,
        )

        for spec in ordered:
            self._run_spec(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: CurveContext, layer: Layer) -> CurveContext:
        """Run only transforms in a specific layer."""
        self._apply_config(ctx)
        for spec in self.registry.get_layer(layer):
            self._run_spec(spec, ctx)
        return ctx

    def _apply_config(self, ctx: CurveContext) -> None:
        check_window(self.config.window)
        check_threshold(self.config.threshold)
        ctx.config = self.config

    def _run_spec(self, spec: TransformSpec, ctx: CurveContext) -> None:
        blocked = [d for d in spec.dependencies if d in ctx.errors or d in ctx.skipped_transforms]
        if blocked:
            ctx.skipped_transforms.add(spec.id)
            logger.warning("  %s SKIPPED: dependency %s did not complete", spec.id, blocked[0])
            return

        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except InvalidArgument:
            raise
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            return
        ctx.completed_transforms.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)

    def _gate(self) -> set[str]:
        """Transforms switched off by the config."""
        skip: set[str] = set()
        if not self.config.segment:
            skip.update(s.id for s in self.registry.get_layer(Layer.SEGMENTATION))
        return skip


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"curvecut.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    register_transforms()
    return Pipeline(config=config)


def analyze_curve(points: Any, config: PipelineConfig | None = None) -> CurveContext:
    """Run every stage on ``points`` and return the populated context."""
    ctx = CurveContext(points=points)
    return create_pipeline(config).run(ctx)
