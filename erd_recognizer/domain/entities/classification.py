"""Classification result entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pydantic import BaseModel, Field, field_validator

from ...exceptions import ValidationError
from ..value_objects.category import Category
from .shape import Shape

# Field name on ClassificationResult for each category
_FIELDS: dict[Category, str] = {
    Category.ENTITY: "entities",
    Category.RELATIONSHIP: "relationships",
    Category.ATTRIBUTE: "attributes",
    Category.WEAK_ENTITY: "weak_entities",
    Category.WEAK_RELATIONSHIP: "weak_relationships",
    Category.WEAK_ATTRIBUTE: "weak_attributes",
}


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """The six disjoint symbol collections recognized in one diagram.

    Contours that were discarded at any stage appear in no collection.
    Construction checks that every shape sits in the collection of its own
    category and that no contour appears twice.
    """
    entities: tuple[Shape, ...] = ()
    relationships: tuple[Shape, ...] = ()
    attributes: tuple[Shape, ...] = ()
    weak_entities: tuple[Shape, ...] = ()
    weak_relationships: tuple[Shape, ...] = ()
    weak_attributes: tuple[Shape, ...] = ()

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for category, name in _FIELDS.items():
            for shape in getattr(self, name):
                if shape.category is not category:
                    raise ValidationError(
                        f"Shape {shape.id} tagged {shape.category.value} "
                        f"placed in {name}",
                        field=name,
                    )
                if shape.id in seen:
                    raise ValidationError(
                        f"Contour {shape.id} appears in more than one category",
                        field=name,
                    )
                seen.add(shape.id)

    def get(self, category: Category) -> tuple[Shape, ...]:
        """Shapes recognized as ``category``."""
        return getattr(self, _FIELDS[category])

    def count(self, category: Category) -> int:
        return len(self.get(category))

    def counts(self) -> dict[Category, int]:
        return {category: self.count(category) for category in Category}

    @property
    def total(self) -> int:
        return sum(self.counts().values())

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def all_shapes(self) -> list[Shape]:
        """Every retained shape, grouped in category order."""
        shapes: list[Shape] = []
        for category in Category:
            shapes.extend(self.get(category))
        return shapes

    def category_of(self, contour_id: int) -> Optional[Category]:
        """Category a contour ended up in, or None if it was discarded."""
        for shape in self.all_shapes():
            if shape.id == contour_id:
                return shape.category
        return None

    def to_dict(self) -> dict:
        """JSON-ready summary: counts plus every shape."""
        return {
            "counts": {category.value: n for category, n in self.counts().items()},
            "shapes": [shape.to_dict() for shape in self.all_shapes()],
        }

    @classmethod
    def from_shapes(cls, shapes: Iterable[Shape]) -> ClassificationResult:
        """Group shapes into collections by their category tag."""
        grouped: dict[str, list[Shape]] = {name: [] for name in _FIELDS.values()}
        for shape in shapes:
            grouped[_FIELDS[shape.category]].append(shape)
        return cls(**{name: tuple(items) for name, items in grouped.items()})


@dataclass(frozen=True, slots=True)
class CountComparison:
    """Actual vs expected count for one category."""
    category: Category
    actual: int
    expected: Optional[int] = None

    @property
    def matches(self) -> bool:
        """True when counts agree or nothing was expected."""
        return self.expected is None or self.expected == self.actual


class ExpectedCounts(BaseModel):
    """Ground-truth symbol counts for a diagram.

    A missing value (or ``-1``) means the count is unknown and is not checked.
    """

    entity: Optional[int] = Field(default=None, ge=0)
    relationship: Optional[int] = Field(default=None, ge=0)
    attribute: Optional[int] = Field(default=None, ge=0)
    weak_entity: Optional[int] = Field(default=None, ge=0)
    weak_relationship: Optional[int] = Field(default=None, ge=0)
    weak_attribute: Optional[int] = Field(default=None, ge=0)

    @field_validator('*', mode='before')
    @classmethod
    def unknown_as_none(cls, v: object) -> object:
        if v == -1:
            return None
        return v

    def expected(self, category: Category) -> Optional[int]:
        return getattr(self, category.value)

    def compare(self, result: ClassificationResult) -> list[CountComparison]:
        return [
            CountComparison(category, result.count(category), self.expected(category))
            for category in Category
        ]

    def matches(self, result: ClassificationResult) -> bool:
        return all(c.matches for c in self.compare(result))
