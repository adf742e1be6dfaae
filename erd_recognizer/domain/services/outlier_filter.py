"""Outlier correction for attribute shapes."""

from __future__ import annotations

from typing import Iterable

from ...domain.entities.shape import Shape
from ...domain.value_objects.category import Category


def remove_oversized_attributes(
    shapes: Iterable[Shape],
    max_attribute_area: float
) -> tuple[list[Shape], list[Shape]]:
    """Drop attribute shapes larger than ``max_attribute_area``.

    A diagram's page frame tends to simplify to many vertices and gets
    tagged as an attribute. It must be gone before weak resolution, or it
    would swallow every attribute as a nested shape.

    Returns:
        ``(kept, removed)``; non-attribute shapes are always kept
    """
    kept: list[Shape] = []
    removed: list[Shape] = []
    for shape in shapes:
        if shape.category is Category.ATTRIBUTE and shape.area > max_attribute_area:
            removed.append(shape)
        else:
            kept.append(shape)
    return kept, removed
