"""Domain entities."""

from .shape import Shape
from .classification import ClassificationResult, CountComparison, ExpectedCounts
from .report import RecognitionReport

__all__ = [
    'Shape',
    'ClassificationResult',
    'CountComparison',
    'ExpectedCounts',
    'RecognitionReport',
]
