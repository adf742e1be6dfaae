"""ER Diagram Recognizer - classify hand-drawn ER diagram symbols from contours."""

__version__ = "1.0.0"

from .domain import (
    Category,
    ClassificationResult,
    ClassifierConfig,
    Contour,
    ExpectedCounts,
    ImageSize,
    Point,
    RecognitionReport,
    Shape,
)
from .application import DiagramRecognizer, RecognitionService, BatchRecognizer
from .adapters import OpenCVContourSource
from .exceptions import (
    ErdRecognizerError,
    ConfigurationError,
    ImageProcessingError,
    InvalidContourError,
    ValidationError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'Category',
    'ClassificationResult',
    'ClassifierConfig',
    'Contour',
    'ExpectedCounts',
    'ImageSize',
    'Point',
    'RecognitionReport',
    'Shape',
    'DiagramRecognizer',
    'RecognitionService',
    'BatchRecognizer',
    'OpenCVContourSource',
    'setup_logging',
    # Exceptions
    'ErdRecognizerError',
    'ConfigurationError',
    'ImageProcessingError',
    'InvalidContourError',
    'ValidationError',
]
