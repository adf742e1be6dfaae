"""Classified shape entity."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..value_objects.category import Category
    from ..value_objects.geometry import BoundingBox, Contour, Point


@dataclass(frozen=True, slots=True)
class Shape:
    """A contour tagged with the category it was recognized as.

    Two shapes are the same shape when they wrap the same contour; the
    category and derived polygon data do not take part in equality.
    """
    contour: 'Contour'
    category: 'Category' = field(compare=False)
    polygon: tuple['Point', ...] = field(default=(), compare=False)
    area: float = field(default=0.0, compare=False)

    @property
    def id(self) -> int:
        return self.contour.id

    @property
    def bounding_box(self) -> 'BoundingBox':
        return self.contour.bounding_box

    @property
    def vertex_count(self) -> int:
        return len(self.polygon)

    def with_category(self, category: 'Category') -> Shape:
        """Return a copy re-tagged with another category."""
        return replace(self, category=category)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category.value,
            "bounding_box": self.bounding_box.to_dict(),
            "area": round(self.area, 2),
            "vertices": self.vertex_count,
            "parent": self.contour.parent,
        }
