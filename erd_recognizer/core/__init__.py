"""Core OpenCV-backed functionality."""

from .shape_ops import (
    ContourArray,
    contour_array,
    simplify_polygon,
    polygon_area,
    is_convex,
    aspect_imbalance,
)
from .shape_classifier import ShapeClassifier
from .rendering import (
    CategoryStyle,
    CATEGORY_STYLES,
    draw_shape_boxes,
    draw_color_coded_contours,
    save_image,
)

__all__ = [
    # Polygon operations
    'ContourArray',
    'contour_array',
    'simplify_polygon',
    'polygon_area',
    'is_convex',
    'aspect_imbalance',
    # Classification
    'ShapeClassifier',
    # Rendering
    'CategoryStyle',
    'CATEGORY_STYLES',
    'draw_shape_boxes',
    'draw_color_coded_contours',
    'save_image',
]
