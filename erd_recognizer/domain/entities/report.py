"""Recognition report entity."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..value_objects.geometry import ImageSize
from .classification import ClassificationResult


@dataclass(frozen=True, slots=True)
class RecognitionReport:
    """Result of recognizing one diagram image."""
    result: ClassificationResult
    image_size: ImageSize
    source_path: Path | None = None
    contours_in: int = 0
    border_rejected: int = 0
    invalid_skipped: int = 0
    outliers_removed: int = 0
    processing_time_ms: float = 0.0

    @property
    def classified(self) -> int:
        return self.result.total

    def to_dict(self) -> dict:
        data = {
            "source": str(self.source_path) if self.source_path else None,
            "image_size": {"width": self.image_size.width, "height": self.image_size.height},
            "contours_in": self.contours_in,
            "border_rejected": self.border_rejected,
            "invalid_skipped": self.invalid_skipped,
            "outliers_removed": self.outliers_removed,
            "processing_time_ms": round(self.processing_time_ms, 2),
        }
        data.update(self.result.to_dict())
        return data
