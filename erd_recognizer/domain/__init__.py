"""Domain layer - pure business logic."""

from .entities.shape import Shape
from .entities.classification import ClassificationResult, CountComparison, ExpectedCounts
from .entities.report import RecognitionReport
from .value_objects.category import Category
from .value_objects.config import ClassifierConfig
from .value_objects.geometry import Point, ImageSize, BoundingBox, Contour

__all__ = [
    # Entities
    'Shape',
    'ClassificationResult',
    'CountComparison',
    'ExpectedCounts',
    'RecognitionReport',
    # Value Objects
    'Category',
    'ClassifierConfig',
    'Point',
    'ImageSize',
    'BoundingBox',
    'Contour',
]
