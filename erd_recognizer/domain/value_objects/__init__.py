"""Value objects - immutable data with validation."""

from .geometry import Point, ImageSize, BoundingBox, Contour
from .category import Category
from .config import ClassifierConfig

__all__ = [
    'Point',
    'ImageSize',
    'BoundingBox',
    'Contour',
    'Category',
    'ClassifierConfig',
]
