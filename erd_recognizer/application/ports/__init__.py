"""Ports - interfaces for external dependencies (Dependency Inversion)."""

from .contour_source import ContourSource, ContourSet
from .event_publisher import (
    STAGE_COMPLETE,
    STAGE_EXTRACT,
    EventPublisher,
    RecognitionEvent,
    SimpleEventPublisher,
)

__all__ = [
    'ContourSource',
    'ContourSet',
    'EventPublisher',
    'RecognitionEvent',
    'SimpleEventPublisher',
    'STAGE_EXTRACT',
    'STAGE_COMPLETE',
]
