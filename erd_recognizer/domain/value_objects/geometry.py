"""Geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ...exceptions import InvalidContourError


@dataclass(frozen=True, slots=True)
class Point:
    """2D point with integer pixel coordinates."""
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class ImageSize:
    """Width and height of an image in pixels."""
    width: int
    height: int

    @classmethod
    def from_shape(cls, shape: tuple[int, ...]) -> ImageSize:
        """Create from a numpy image shape (rows, cols[, channels])."""
        return cls(width=int(shape[1]), height=int(shape[0]))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box with inclusive pixel bounds.

    ``width`` and ``height`` count pixels, matching ``cv2.boundingRect``.
    """
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def top_left(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.max_x, self.max_y)

    def strictly_contains(self, other: BoundingBox) -> bool:
        """Check if this box encloses ``other`` with a margin on all four sides."""
        return (
            self.min_x < other.min_x and
            self.min_y < other.min_y and
            self.max_x > other.max_x and
            self.max_y > other.max_y
        )

    def touches_border(self, size: ImageSize) -> bool:
        """Check if the box reaches the outermost pixel row or column."""
        return (
            self.min_x <= 0 or
            self.min_y <= 0 or
            self.max_x >= size.width - 1 or
            self.max_y >= size.height - 1
        )

    def expand(self, pixels: int) -> BoundingBox:
        """Expand box by specified pixels in all directions."""
        return BoundingBox(
            self.min_x - pixels,
            self.min_y - pixels,
            self.max_x + pixels,
            self.max_y + pixels
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "x": self.min_x,
            "y": self.min_y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BoundingBox:
        """Compute the bounds of a point sequence."""
        xs: list[int] = []
        ys: list[int] = []
        for p in points:
            xs.append(p.x)
            ys.append(p.y)
        if not xs:
            raise InvalidContourError("Cannot compute bounding box of an empty point set")
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True, slots=True)
class Contour:
    """Closed polygon outline produced by a contour source.

    Identity is the ``id`` assigned at extraction time: two contours are
    equal (and hash equal) when their ids match, regardless of points.

    Attributes:
        id: Stable index assigned by the contour source
        points: Ordered, closed point sequence in pixel coordinates
        parent: Id of the enclosing contour in the extraction hierarchy, if any
    """
    id: int
    points: tuple[Point, ...] = field(compare=False)
    parent: int | None = field(default=None, compare=False)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def bounding_box(self) -> BoundingBox:
        try:
            return BoundingBox.from_points(self.points)
        except InvalidContourError:
            raise InvalidContourError(
                "Contour has no points", contour_id=self.id
            ) from None

    @property
    def area(self) -> float:
        """Calculate enclosed area using shoelace formula."""
        self.require_polygon()
        points = list(self.points) + [self.points[0]]
        n = len(points) - 1
        area = 0.0
        for i in range(n):
            area += points[i].x * points[i + 1].y
            area -= points[i + 1].x * points[i].y
        return abs(area) / 2

    def require_polygon(self) -> None:
        """Raise if the contour cannot describe a closed polygon."""
        if len(self.points) < 3:
            raise InvalidContourError(
                f"Contour needs at least 3 points, got {len(self.points)}",
                contour_id=self.id,
            )

    def to_array(self) -> object:
        """Convert to an OpenCV contour array of shape (N, 1, 2)."""
        import numpy as np
        return np.array(
            [(p.x, p.y) for p in self.points], dtype=np.int32
        ).reshape(-1, 1, 2)

    @classmethod
    def from_array(
        cls,
        contour_id: int,
        data: object,
        parent: int | None = None
    ) -> Contour:
        """Create from an OpenCV contour array (N, 1, 2) or (N, 2)."""
        import numpy as np
        pts = np.asarray(data).reshape(-1, 2)
        return cls(
            id=contour_id,
            points=tuple(Point(int(x), int(y)) for x, y in pts),
            parent=parent,
        )

    @classmethod
    def from_coords(
        cls,
        contour_id: int,
        coords: Iterable[tuple[int, int]],
        parent: int | None = None
    ) -> Contour:
        """Create from plain ``(x, y)`` tuples."""
        return cls(
            id=contour_id,
            points=tuple(Point(int(x), int(y)) for x, y in coords),
            parent=parent,
        )
