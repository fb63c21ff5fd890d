"""Transform registry.

Each analysis step is a plain function over a CurveContext, registered with
the ``@transform`` decorator:

    @transform(id="T1.01", layer=Layer.CURVATURE, dependencies=["T0.01"])
    def apex_angle_profile(ctx: CurveContext) -> None:
        ctx.angles = compute_angles(ctx.points, ctx.config.window)

A transform may only depend on transforms of its own layer or an earlier one.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from curvecut.engine.context import CurveContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    INGESTION = 0
    CURVATURE = 1
    SEGMENTATION = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["CurveContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def __len__(self) -> int:
        return len(self._transforms)

    def __contains__(self, transform_id: object) -> bool:
        return transform_id in self._transforms

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return [s for s in self.all() if s.layer == layer]

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: Iterable[str] | None = None) -> list[TransformSpec]:
        """Execution order for ``requested_ids`` and everything they depend on.

        ``None`` means every registered transform. Transforms that become
        runnable together are ordered by (layer, id), so the result is stable.
        Raises ValueError for unknown IDs, unregistered or later-layer
        dependencies, and cycles.
        """
        ids = set(self._transforms) if requested_ids is None else self._closure(requested_ids)
        sorter: TopologicalSorter[str] = TopologicalSorter()
        for tid in ids:
            spec = self._transforms[tid]
            self._check_dependencies(spec)
            sorter.add(tid, *spec.dependencies)

        try:
            sorter.prepare()
        except CycleError as e:
            raise ValueError(f"Circular dependency detected among: {sorted(set(e.args[1]))}") from e

        ordered: list[TransformSpec] = []
        while sorter.is_active():
            ready = sorted((self._transforms[t] for t in sorter.get_ready()), key=lambda s: (s.layer, s.id))
            ordered.extend(ready)
            sorter.done(*(s.id for s in ready))
        return ordered

    def _closure(self, requested_ids: Iterable[str]) -> set[str]:
        seen: set[str] = set()
        stack = list(requested_ids)
        while stack:
            tid = stack.pop()
            if tid in seen:
                continue
            if tid not in self._transforms:
                raise ValueError(f"Unknown transform ID: {tid}")
            seen.add(tid)
            stack.extend(self._transforms[tid].dependencies)
        return seen

    def _check_dependencies(self, spec: TransformSpec) -> None:
        for dep in spec.dependencies:
            upstream = self._transforms.get(dep)
            if upstream is None:
                raise ValueError(f"{spec.id} depends on unregistered transform {dep}")
            if upstream.layer > spec.layer:
                raise ValueError(
                    f"{spec.id} ({spec.layer.name}) depends on {dep} from later layer {upstream.layer.name}"
                )


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a transform in the shared registry."""

    def decorator(fn: Callable[["CurveContext"], None]):
        _registry.register(
            TransformSpec(id=id, layer=layer, fn=fn, dependencies=list(dependencies or []), description=description)
        )
        return fn

    return decorator
