"""Synthetic contours and shapes for tests."""

import math

import cv2
import numpy as np

from erd_recognizer.domain.entities.shape import Shape
from erd_recognizer.domain.value_objects.category import Category
from erd_recognizer.domain.value_objects.geometry import Contour, Point


def polygon_contour(contour_id: int, vertices: list[tuple[int, int]]) -> Contour:
    """Closed contour tracing every pixel step along the polygon edges."""
    points: list[tuple[int, int]] = []
    n = len(vertices)
    for i in range(n):
        x0, y0 = vertices[i]
        x1, y1 = vertices[(i + 1) % n]
        steps = max(abs(x1 - x0), abs(y1 - y0), 1)
        for s in range(steps):
            t = s / steps
            points.append((round(x0 + (x1 - x0) * t), round(y0 + (y1 - y0) * t)))
    return Contour.from_coords(contour_id, points)


def rect_contour(contour_id: int, x0: int, y0: int, x1: int, y1: int) -> Contour:
    """Axis-aligned rectangle from (x0, y0) to (x1, y1) inclusive."""
    return polygon_contour(contour_id, [(x0, y0), (x1, y0), (x1, y1), (x0, y1)])


def diamond_contour(contour_id: int, cx: int, cy: int, half: int) -> Contour:
    """Rhombus with equal diagonals of length ``2 * half``."""
    return polygon_contour(
        contour_id,
        [(cx, cy - half), (cx + half, cy), (cx, cy + half), (cx - half, cy)]
    )


def circle_contour(contour_id: int, cx: int, cy: int, r: int, samples: int = 120) -> Contour:
    """Circle sampled at ``samples`` angles, consecutive duplicates removed."""
    points: list[tuple[int, int]] = []
    for k in range(samples):
        angle = 2 * math.pi * k / samples
        p = (round(cx + r * math.cos(angle)), round(cy + r * math.sin(angle)))
        if not points or points[-1] != p:
            points.append(p)
    if points[0] == points[-1]:
        points.pop()
    return Contour.from_coords(contour_id, points)


def box_shape(
    contour_id: int,
    x0: int, y0: int, x1: int, y1: int,
    category: Category = Category.ENTITY
) -> Shape:
    """Shape with a rectangular outline and its area, for resolver tests."""
    contour = Contour(
        id=contour_id,
        points=(Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)),
    )
    return Shape(
        contour=contour,
        category=category,
        polygon=contour.points,
        area=float((x1 - x0) * (y1 - y0)),
    )


def blank_canvas(width: int = 400, height: int = 300) -> np.ndarray:
    """White BGR canvas."""
    return np.full((height, width, 3), 255, dtype=np.uint8)


def draw_rect(canvas: np.ndarray, x0: int, y0: int, x1: int, y1: int) -> None:
    cv2.rectangle(canvas, (x0, y0), (x1, y1), (0, 0, 0), 2)


def draw_circle(canvas: np.ndarray, cx: int, cy: int, r: int) -> None:
    cv2.circle(canvas, (cx, cy), r, (0, 0, 0), 2)
