"""Domain services - pure business logic, no external dependencies."""

from .border_filter import is_border_touching, filter_border_contours
from .outlier_filter import remove_oversized_attributes
from .weak_resolver import is_nested, resolve_weak, resolve_all

__all__ = [
    'is_border_touching',
    'filter_border_contours',
    'remove_oversized_attributes',
    'is_nested',
    'resolve_weak',
    'resolve_all',
]
