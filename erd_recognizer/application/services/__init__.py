"""Application services."""

from .recognition import DiagramRecognizer, RecognitionService
from .batch_processor import BatchRecognizer, BatchResult, BatchItem, RenderStyle

__all__ = [
    'DiagramRecognizer',
    'RecognitionService',
    'BatchRecognizer',
    'BatchResult',
    'BatchItem',
    'RenderStyle',
]
