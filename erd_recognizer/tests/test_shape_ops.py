"""Tests for OpenCV polygon operations."""

import pytest

from erd_recognizer.core.shape_ops import (
    aspect_imbalance,
    contour_array,
    is_convex,
    polygon_area,
    polygon_points,
    simplify_polygon,
)
from erd_recognizer.domain.value_objects.geometry import Contour, Point
from erd_recognizer.exceptions import InvalidContourError
from erd_recognizer.tests.shapes import circle_contour, polygon_contour, rect_contour


class TestContourArray:

    def test_shape(self):
        arr = contour_array(rect_contour(0, 10, 10, 20, 20))
        assert arr.ndim == 3
        assert arr.shape[1:] == (1, 2)

    def test_degenerate(self):
        with pytest.raises(InvalidContourError):
            contour_array(Contour.from_coords(0, [(1, 1), (2, 2)]))


class TestSimplifyPolygon:

    def test_rectangle_reduces_to_corners(self):
        polygon = simplify_polygon(rect_contour(0, 10, 10, 110, 60), 0.02)
        assert len(polygon) == 4
        corners = set(polygon_points(polygon))
        assert corners == {Point(10, 10), Point(110, 10), Point(110, 60), Point(10, 60)}

    def test_circle_keeps_many_vertices(self):
        polygon = simplify_polygon(circle_contour(0, 100, 100, 40), 0.02)
        assert len(polygon) > 6

    def test_coarser_tolerance_fewer_vertices(self):
        circle = circle_contour(0, 100, 100, 40)
        fine = simplify_polygon(circle, 0.005)
        coarse = simplify_polygon(circle, 0.1)
        assert len(coarse) < len(fine)


class TestPolygonProperties:

    def test_area(self):
        polygon = simplify_polygon(rect_contour(0, 10, 10, 110, 60), 0.02)
        assert polygon_area(polygon) == 5000

    def test_convex(self):
        polygon = simplify_polygon(rect_contour(0, 10, 10, 110, 60), 0.02)
        assert is_convex(polygon)

    def test_concave(self):
        dart = polygon_contour(0, [(50, 50), (150, 100), (50, 150), (80, 100)])
        polygon = simplify_polygon(dart, 0.02)
        assert len(polygon) == 4
        assert not is_convex(polygon)

    def test_aspect_imbalance(self):
        assert aspect_imbalance(rect_contour(0, 10, 10, 59, 59)) == 0
        assert aspect_imbalance(rect_contour(0, 10, 10, 109, 59)) == pytest.approx(1.0)
