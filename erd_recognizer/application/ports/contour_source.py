"""Contour Source port - interface for contour extraction."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from ...domain.value_objects.geometry import Contour, ImageSize


@dataclass(frozen=True, slots=True)
class ContourSet:
    """Contours extracted from one image, in extraction order."""
    contours: tuple[Contour, ...]
    image_size: ImageSize
    source_path: Path | None = None

    @property
    def contour_count(self) -> int:
        return len(self.contours)

    @property
    def is_empty(self) -> bool:
        return len(self.contours) == 0


@runtime_checkable
class ContourSource(Protocol):
    """Port for turning a diagram image into closed contours.

    Implementations: OpenCV threshold + findContours.
    """

    @property
    def name(self) -> str:
        """Source name."""
        ...

    def extract(self, image_path: Path | str) -> ContourSet:
        """Extract contours from an image file.

        Args:
            image_path: Image to read

        Returns:
            Contours with ids assigned in extraction order

        Raises:
            ImageProcessingError: If the image cannot be read
        """
        ...
