"""Application layer - use cases and ports."""

from .services import DiagramRecognizer, RecognitionService, BatchRecognizer

__all__ = ['DiagramRecognizer', 'RecognitionService', 'BatchRecognizer']
