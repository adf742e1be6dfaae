"""Vertex-count shape classification of diagram contours."""

import logging
from typing import Iterable, Optional

from ..domain.entities.shape import Shape
from ..domain.value_objects.category import Category
from ..domain.value_objects.config import ClassifierConfig
from ..domain.value_objects.geometry import Contour
from .shape_ops import (
    aspect_imbalance,
    is_convex,
    polygon_area,
    polygon_points,
    simplify_polygon,
)

logger = logging.getLogger(__name__)

# Vertex counts after simplification
QUADRILATERAL_VERTICES = 4
MIN_ROUNDED_VERTICES = 7  # More than 6 approximates an oval


class ShapeClassifier:
    """Tag interior contours as entities, relationships or attributes."""

    def __init__(self, config: Optional[ClassifierConfig] = None):
        """
        Initialize the classifier.

        Args:
            config: Classification thresholds (defaults if omitted)
        """
        self.config = config or ClassifierConfig()

    def classify(self, contour: Contour) -> Optional[Shape]:
        """
        Classify a single contour.

        Convex quadrilaterals become relationships when their footprint is
        near-square and entities otherwise; polygons with more than six
        vertices become attributes. Anything else, or anything not larger
        than ``min_shape_area``, is not a symbol.

        Args:
            contour: Contour that does not touch the image border.

        Returns:
            The classified shape, or None if the contour is discarded.

        Raises:
            InvalidContourError: If the contour has fewer than 3 points
        """
        cfg = self.config
        polygon = simplify_polygon(contour, cfg.approx_tolerance_factor)
        vertices = len(polygon)
        area = polygon_area(polygon)

        category: Optional[Category] = None
        if vertices == QUADRILATERAL_VERTICES and is_convex(polygon) and area > cfg.min_shape_area:
            if aspect_imbalance(contour) <= cfg.square_aspect_tolerance:
                category = Category.RELATIONSHIP
            else:
                category = Category.ENTITY
        elif vertices >= MIN_ROUNDED_VERTICES and area > cfg.min_shape_area:
            category = Category.ATTRIBUTE

        if category is None:
            logger.debug(
                f"Discarded contour {contour.id} ({vertices} vertices, area {area:.0f})"
            )
            return None

        logger.debug(f"Contour {contour.id} -> {category.value} (area {area:.0f})")
        return Shape(
            contour=contour,
            category=category,
            polygon=polygon_points(polygon),
            area=area,
        )

    def classify_all(self, contours: Iterable[Contour]) -> list[Shape]:
        """Classify contours, dropping those that match no rule."""
        shapes = []
        for contour in contours:
            shape = self.classify(contour)
            if shape is not None:
                shapes.append(shape)
        return shapes
