"""Event publisher port - progress notifications from recognition runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

# Stages outside the pipeline steps
STAGE_EXTRACT = "extract"
STAGE_COMPLETE = "complete"

EventCallback = Callable[["RecognitionEvent"], None]


@dataclass(frozen=True, slots=True)
class RecognitionEvent:
    """Progress of one image through extraction and the pipeline steps.

    ``stage`` is ``extract``, a pipeline step name, or ``complete``.
    """
    stage: str
    message: str
    progress: float | None = None  # 0.0 to 1.0
    image_path: Path | None = None

    @property
    def is_final(self) -> bool:
        return self.stage == STAGE_COMPLETE


@runtime_checkable
class EventPublisher(Protocol):
    """Port for fanning recognition events out to listeners."""

    def publish(self, event: RecognitionEvent) -> None:
        ...

    def subscribe(self, callback: EventCallback) -> None:
        ...

    def unsubscribe(self, callback: EventCallback) -> None:
        ...


class SimpleEventPublisher:
    """In-process publisher calling listeners in subscription order."""

    def __init__(self):
        self._listeners: list[EventCallback] = []

    def publish(self, event: RecognitionEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def subscribe(self, callback: EventCallback) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: EventCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)
