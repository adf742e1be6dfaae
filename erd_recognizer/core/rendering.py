"""Annotated rendering of recognition results."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import cv2
import numpy as np
import numpy.typing as npt

from ..config import IMAGE_CONFIG
from ..domain.entities.classification import ClassificationResult
from ..domain.value_objects.category import Category
from ..domain.value_objects.geometry import Contour, ImageSize
from ..exceptions import ImageProcessingError

logger = logging.getLogger(__name__)

# Type aliases
ImageArray = npt.NDArray[np.uint8]  # HxW or HxWx3


@dataclass(frozen=True)
class CategoryStyle:
    """How a category is drawn."""
    color: tuple[int, int, int]  # BGR
    label: str
    font_scale: float = 0.5


CATEGORY_STYLES: dict[Category, CategoryStyle] = {
    Category.ENTITY: CategoryStyle((255, 0, 0), "Entity"),
    Category.RELATIONSHIP: CategoryStyle((0, 255, 0), "Relationship", 0.4),
    Category.ATTRIBUTE: CategoryStyle((0, 0, 255), "Attribute"),
    Category.WEAK_ENTITY: CategoryStyle((200, 150, 150), "Weak Entity"),
    Category.WEAK_RELATIONSHIP: CategoryStyle((150, 200, 150), "Weak Relationship"),
    Category.WEAK_ATTRIBUTE: CategoryStyle((150, 150, 200), "Multivalued Attribute"),
}


def _to_bgr(image: ImageArray) -> ImageArray:
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    return image.copy()


def draw_shape_boxes(
    image: ImageArray,
    result: ClassificationResult,
    padding: int = IMAGE_CONFIG.label_padding
) -> ImageArray:
    """Draw a labelled box around every recognized shape.

    Args:
        image: Source image (grayscale or BGR); left untouched
        result: Recognition result to draw
        padding: Pixels between each shape and its box

    Returns:
        Annotated BGR copy of the image
    """
    canvas = _to_bgr(image)
    for category in Category:
        style = CATEGORY_STYLES[category]
        for shape in result.get(category):
            box = shape.bounding_box.expand(padding)
            cv2.rectangle(
                canvas,
                (box.min_x, box.min_y),
                (box.max_x, box.max_y),
                style.color,
                IMAGE_CONFIG.box_thickness,
            )
            cv2.putText(
                canvas,
                style.label,
                (box.min_x, box.min_y - IMAGE_CONFIG.label_offset),
                cv2.FONT_HERSHEY_SIMPLEX,
                style.font_scale,
                style.color,
                1,
            )
    return canvas


def draw_color_coded_contours(
    image_size: ImageSize,
    result: ClassificationResult,
    all_contours: Iterable[Contour] = ()
) -> ImageArray:
    """Draw every contour on a blank canvas, classified ones in category color.

    Args:
        image_size: Canvas size
        result: Recognition result whose simplified polygons are drawn
        all_contours: Raw contours drawn underneath in a neutral color

    Returns:
        BGR canvas
    """
    canvas = np.zeros((image_size.height, image_size.width, 3), dtype=np.uint8)

    raw = [c.to_array() for c in all_contours if len(c) > 0]
    if raw:
        cv2.drawContours(
            canvas, raw, -1, IMAGE_CONFIG.contour_color, IMAGE_CONFIG.contour_thickness
        )

    for category in Category:
        polygons = [
            np.array([(p.x, p.y) for p in shape.polygon], dtype=np.int32).reshape(-1, 1, 2)
            for shape in result.get(category)
            if shape.polygon
        ]
        if polygons:
            cv2.drawContours(
                canvas,
                polygons,
                -1,
                CATEGORY_STYLES[category].color,
                IMAGE_CONFIG.contour_thickness,
            )
    return canvas


def save_image(image: ImageArray, path: Path | str) -> Path:
    """Write an image to disk.

    Raises:
        ImageProcessingError: If OpenCV cannot encode or write the file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise ImageProcessingError(f"Failed to write image: {e}", image_path=str(path)) from e
    if not ok:
        raise ImageProcessingError("Failed to write image", image_path=str(path))
    logger.debug(f"Saved {path}")
    return path
