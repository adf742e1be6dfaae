"""Border filter - drops contours that reach the image edge."""

from __future__ import annotations

from typing import Iterable

from ...domain.value_objects.geometry import Contour, ImageSize


def is_border_touching(contour: Contour, image_size: ImageSize) -> bool:
    """Check whether a contour's bounding box touches any image edge.

    Such contours are the image frame or scan artifacts, never symbols.

    Raises:
        InvalidContourError: If the contour has no points
    """
    return contour.bounding_box.touches_border(image_size)


def filter_border_contours(
    contours: Iterable[Contour],
    image_size: ImageSize
) -> tuple[list[Contour], list[Contour]]:
    """Split contours into interior and border-touching ones.

    Args:
        contours: Contours in extraction order
        image_size: Size of the source image

    Returns:
        ``(interior, rejected)``, both in input order
    """
    interior: list[Contour] = []
    rejected: list[Contour] = []
    for contour in contours:
        if is_border_touching(contour, image_size):
            rejected.append(contour)
        else:
            interior.append(contour)
    return interior, rejected
