"""Shape categories of ER diagram notation."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Semantic category of a recognized diagram symbol."""
    ENTITY = "entity"
    RELATIONSHIP = "relationship"
    ATTRIBUTE = "attribute"
    WEAK_ENTITY = "weak_entity"
    WEAK_RELATIONSHIP = "weak_relationship"
    WEAK_ATTRIBUTE = "weak_attribute"

    @property
    def is_weak(self) -> bool:
        return self in _BASE_OF

    @property
    def weak(self) -> Category:
        """Weak variant of a base category."""
        if self.is_weak:
            raise ValueError(f"{self.value} is already a weak category")
        return _WEAK_OF[self]

    @property
    def base(self) -> Category:
        """Base category of a weak variant (identity for base categories)."""
        return _BASE_OF.get(self, self)

    @classmethod
    def base_categories(cls) -> tuple[Category, ...]:
        return (cls.ENTITY, cls.RELATIONSHIP, cls.ATTRIBUTE)


_WEAK_OF: dict[Category, Category] = {
    Category.ENTITY: Category.WEAK_ENTITY,
    Category.RELATIONSHIP: Category.WEAK_RELATIONSHIP,
    Category.ATTRIBUTE: Category.WEAK_ATTRIBUTE,
}

_BASE_OF: dict[Category, Category] = {weak: base for base, weak in _WEAK_OF.items()}
