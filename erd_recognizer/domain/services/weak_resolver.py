"""Weak-type resolution - pure geometry operations."""

from __future__ import annotations

import logging
from typing import Iterable

from ...domain.entities.shape import Shape
from ...domain.value_objects.category import Category
from ...domain.value_objects.geometry import Contour

logger = logging.getLogger(__name__)


def is_nested(inner: Contour, outer: Contour) -> bool:
    """Check if ``inner``'s bounding box sits strictly inside ``outer``'s.

    Only rectangular bounds are compared, not the polygons themselves, so
    overlapping silhouettes whose boxes nest also count as nested.
    """
    if inner == outer:
        return False
    return outer.bounding_box.strictly_contains(inner.bounding_box)


def resolve_weak(
    shapes: Iterable[Shape],
    weak_shapes: Iterable[Shape] = ()
) -> tuple[list[Shape], list[Shape]]:
    """Promote containers to the weak variant of their category.

    A double-bordered symbol shows up as two same-category contours, one
    inside the other. The outer one becomes the weak symbol and the inner
    one is dropped as decoration.

    Algorithm:
        1. Read-only scan: for every shape find all same-category shapes
           whose bounding box strictly contains it
        2. Mark the shape for removal and record its container as weak;
           with several containers the smallest by area wins, then the
           lowest contour id
        3. Compaction: rebuild strong and weak lists from the marks

    Args:
        shapes: Shapes of one base category
        weak_shapes: Shapes already tagged with that category's weak variant

    Returns:
        ``(strong, weak)`` in input order; weak shapes carry the weak tag

    Raises:
        ValueError: If the shapes span more than one base category

    Complexity: O(n^2) bounding-box comparisons
    """
    candidates = _unique(list(shapes) + list(weak_shapes))
    if not candidates:
        return [], []

    base = candidates[0].category.base
    for shape in candidates:
        if shape.category.base is not base:
            raise ValueError(
                f"Cannot resolve {shape.category.value} together with {base.value}"
            )
    weak_category = base.weak

    boxes = [shape.bounding_box for shape in candidates]

    removed: set[int] = set()
    containers: set[int] = set()

    for i, inner in enumerate(candidates):
        best: int | None = None
        for j, outer in enumerate(candidates):
            if i == j or not boxes[j].strictly_contains(boxes[i]):
                continue
            if best is None or _container_key(outer) < _container_key(candidates[best]):
                best = j

        if best is not None:
            removed.add(inner.id)
            containers.add(candidates[best].id)
            logger.debug(
                f"{base.value} {inner.id} nested in {candidates[best].id}"
            )

    strong: list[Shape] = []
    weak: list[Shape] = []
    for shape in candidates:
        if shape.id in removed:
            continue
        if shape.category.is_weak:
            weak.append(shape)
        elif shape.id in containers:
            weak.append(shape.with_category(weak_category))
        else:
            strong.append(shape)

    if removed:
        logger.debug(
            f"Resolved {base.value}: {len(strong)} strong, {len(weak)} weak, "
            f"{len(removed)} nested removed"
        )
    return strong, weak


def resolve_all(
    shapes: Iterable[Shape],
    categories: Iterable[Category] = Category.base_categories()
) -> list[Shape]:
    """Run weak resolution independently for each listed base category.

    Shapes whose base category is not listed pass through unchanged.

    Returns:
        All shapes after resolution, grouped by base category
    """
    targets = tuple(categories)
    grouped: dict[Category, tuple[list[Shape], list[Shape]]] = {}
    passthrough: list[Shape] = []

    for shape in shapes:
        base = shape.category.base
        if base not in targets:
            passthrough.append(shape)
            continue
        strong, weak = grouped.setdefault(base, ([], []))
        (weak if shape.category.is_weak else strong).append(shape)

    resolved: list[Shape] = []
    for base in targets:
        if base not in grouped:
            continue
        strong, weak = resolve_weak(*grouped[base])
        resolved.extend(strong)
        resolved.extend(weak)

    return resolved + passthrough


def _container_key(shape: Shape) -> tuple[float, int]:
    return (shape.area, shape.id)


def _unique(shapes: list[Shape]) -> list[Shape]:
    """Drop repeated contours, keeping the first occurrence."""
    seen: set[int] = set()
    unique: list[Shape] = []
    for shape in shapes:
        if shape.id not in seen:
            seen.add(shape.id)
            unique.append(shape)
    return unique
