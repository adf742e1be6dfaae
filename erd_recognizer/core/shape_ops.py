"""OpenCV polygon operations used for shape classification."""

import logging

import cv2
import numpy as np
import numpy.typing as npt

from ..domain.value_objects.geometry import Contour, Point

logger = logging.getLogger(__name__)

# Type aliases
ContourArray = npt.NDArray[np.int32]  # Shape (N, 1, 2)


def contour_array(contour: Contour) -> ContourArray:
    """Convert a contour to OpenCV format, validating it first.

    Raises:
        InvalidContourError: If the contour has fewer than 3 points
    """
    contour.require_polygon()
    return contour.to_array()


def simplify_polygon(contour: Contour, tolerance_factor: float) -> ContourArray:
    """Approximate a contour with fewer vertices.

    The tolerance scales with the closed perimeter, so large and small
    shapes simplify alike.

    Args:
        contour: Contour to simplify
        tolerance_factor: Maximum deviation as a fraction of perimeter

    Returns:
        Simplified closed polygon as (M, 1, 2) array
    """
    points = contour_array(contour)
    epsilon = tolerance_factor * cv2.arcLength(points, True)
    return cv2.approxPolyDP(points, epsilon, True)


def polygon_area(polygon: ContourArray) -> float:
    """Absolute enclosed area of a polygon."""
    return float(abs(cv2.contourArea(polygon)))


def is_convex(polygon: ContourArray) -> bool:
    return bool(cv2.isContourConvex(polygon))


def aspect_imbalance(contour: Contour) -> float:
    """Return ``|1 - w/h|`` of the contour's upright bounding rectangle.

    0 for a square footprint, growing as the shape stretches.
    """
    _, _, w, h = cv2.boundingRect(contour_array(contour))
    return abs(1 - w / h)


def polygon_points(polygon: ContourArray) -> tuple[Point, ...]:
    """Convert an OpenCV polygon back to domain points."""
    return tuple(Point(int(x), int(y)) for x, y in polygon.reshape(-1, 2))
