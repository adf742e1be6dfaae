"""OpenCV contour adapter - implements ContourSource port."""

from __future__ import annotations

import logging
from pathlib import Path

import cv2
import numpy as np
from PIL import Image

from ...application.ports.contour_source import ContourSet, ContourSource
from ...config import IMAGE_CONFIG
from ...domain.value_objects.geometry import Contour, ImageSize
from ...exceptions import ImageProcessingError

logger = logging.getLogger(__name__)


class OpenCVContourSource(ContourSource):
    """Extract the contour tree of a thresholded diagram.

    Dark strokes on a light background are binarized with a fixed
    threshold and the full contour tree is traced. Each stroke separates two
    light regions, so the tree holds one hole border and one outer border
    per stroke; by default only outer borders (even tree depth) are kept,
    giving one contour per enclosed region. Ids are extraction indices
    either way.
    """

    def __init__(
        self,
        threshold: int = IMAGE_CONFIG.threshold_value,
        max_value: int = IMAGE_CONFIG.threshold_max_value,
        outer_borders_only: bool = True
    ):
        self._threshold = threshold
        self._max_value = max_value
        self._outer_borders_only = outer_borders_only

    @property
    def name(self) -> str:
        return "OpenCV findContours"

    def load_image(self, image_path: Path | str) -> np.ndarray:
        """Read an image file as a BGR array.

        Raises:
            ImageProcessingError: If the file is missing or not an image
        """
        path = Path(image_path)
        try:
            with Image.open(path) as pil_image:
                rgb = np.array(pil_image.convert("RGB"))
        except OSError as e:
            raise ImageProcessingError(f"Cannot read image: {e}", image_path=str(path)) from e
        return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)

    def extract(self, image_path: Path | str) -> ContourSet:
        """Extract contours from an image file."""
        path = Path(image_path)
        image = self.load_image(path)
        return self.extract_from_array(image, source_path=path)

    def extract_from_array(
        self,
        image: np.ndarray,
        source_path: Path | None = None
    ) -> ContourSet:
        """Extract contours from an in-memory grayscale or BGR image."""
        if image.ndim == 3:
            gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
        elif image.ndim == 2:
            gray = image
        else:
            raise ImageProcessingError(
                f"Unsupported image shape {image.shape}",
                image_path=str(source_path) if source_path else None
            )

        _, binary = cv2.threshold(gray, self._threshold, self._max_value, cv2.THRESH_BINARY)
        raw_contours, hierarchy = cv2.findContours(binary, cv2.RETR_TREE, cv2.CHAIN_APPROX_NONE)

        parents: list[int | None] = [None] * len(raw_contours)
        if hierarchy is not None:
            for i in range(len(raw_contours)):
                parent_index = int(hierarchy[0][i][3])
                parents[i] = parent_index if parent_index >= 0 else None

        contours = []
        for i, raw in enumerate(raw_contours):
            if self._outer_borders_only and _depth(parents, i) % 2 == 1:
                continue
            contours.append(Contour.from_array(i, raw, parent=parents[i]))

        size = ImageSize.from_shape(gray.shape)
        logger.debug(
            f"Extracted {len(contours)} of {len(raw_contours)} contours "
            f"from {size.width}x{size.height} image"
        )
        return ContourSet(contours=tuple(contours), image_size=size, source_path=source_path)


def _depth(parents: list[int | None], index: int) -> int:
    """Nesting depth of a contour in the extraction tree (0 for roots)."""
    depth = 0
    parent = parents[index]
    while parent is not None:
        depth += 1
        parent = parents[parent]
    return depth
