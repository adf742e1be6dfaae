"""Tests for the recognition pipeline."""

import itertools
from pathlib import Path

import pytest

from erd_recognizer.application.ports.contour_source import ContourSet, ContourSource
from erd_recognizer.application.services.recognition import (
    DiagramRecognizer,
    RecognitionService,
)
from erd_recognizer.domain.services.weak_resolver import is_nested
from erd_recognizer.domain.value_objects.category import Category
from erd_recognizer.domain.value_objects.config import ClassifierConfig
from erd_recognizer.domain.value_objects.geometry import Contour, ImageSize
from erd_recognizer.tests.shapes import circle_contour, diamond_contour, rect_contour


def ids(shapes):
    return [s.id for s in shapes]


class TestScenarios:
    """End-to-end classification of synthetic diagrams."""

    def test_double_bordered_entity_with_attribute(self, recognizer, image_size):
        contours = [
            rect_contour(0, 20, 20, 380, 220),
            rect_contour(1, 40, 40, 360, 200),
            circle_contour(2, 200, 120, 30),
        ]
        result = recognizer.recognize(contours, image_size)

        assert ids(result.weak_entities) == [0]
        assert result.entities == ()
        assert ids(result.attributes) == [2]
        assert result.relationships == ()
        assert result.weak_relationships == ()
        assert result.weak_attributes == ()

    def test_two_relationships(self, recognizer, image_size):
        contours = [
            diamond_contour(0, 100, 150, 32),
            diamond_contour(1, 250, 150, 32),
        ]
        result = recognizer.recognize(contours, image_size)

        assert ids(result.relationships) == [0, 1]
        assert result.total == 2

    def test_page_border_oval_removed(self, recognizer):
        size = ImageSize(400, 300)
        contours = [
            circle_contour(0, 200, 150, 100),
            circle_contour(1, 160, 150, 25),
            circle_contour(2, 240, 150, 25),
            rect_contour(3, 150, 80, 250, 110),
        ]
        report = recognizer.run(contours, size)
        result = report.result

        assert ids(result.attributes) == [1, 2]
        assert result.weak_attributes == ()
        assert ids(result.entities) == [3]
        assert report.outliers_removed == 1

    def test_weak_relationship(self, recognizer, image_size):
        contours = [
            diamond_contour(0, 150, 150, 60),
            diamond_contour(1, 150, 150, 50),
        ]
        result = recognizer.recognize(contours, image_size)
        assert ids(result.weak_relationships) == [0]
        assert result.relationships == ()

    def test_multivalued_attribute(self, recognizer, image_size):
        contours = [
            circle_contour(0, 150, 150, 45),
            circle_contour(1, 150, 150, 38),
        ]
        result = recognizer.recognize(contours, image_size)
        assert ids(result.weak_attributes) == [0]
        assert result.attributes == ()

    def test_weak_attributes_disabled(self, image_size):
        recognizer = DiagramRecognizer(ClassifierConfig(resolve_weak_attributes=False))
        contours = [
            circle_contour(0, 150, 150, 45),
            circle_contour(1, 150, 150, 38),
        ]
        result = recognizer.recognize(contours, image_size)
        assert ids(result.attributes) == [0, 1]
        assert result.weak_attributes == ()


class TestPipelineProperties:

    @pytest.fixture
    def busy_diagram(self):
        return [
            rect_contour(0, 0, 0, 399, 299),        # image frame
            rect_contour(1, 20, 20, 150, 80),
            rect_contour(2, 25, 25, 145, 75),
            diamond_contour(3, 220, 60, 35),
            circle_contour(4, 330, 60, 30),
            circle_contour(5, 330, 60, 24),
            rect_contour(6, 380, 200, 399, 240),    # cut off at right edge
            rect_contour(7, 40, 150, 200, 230),
            circle_contour(8, 280, 200, 30),
        ]

    def test_border_exclusion(self, recognizer, image_size, busy_diagram):
        report = recognizer.run(busy_diagram, image_size)
        assert report.result.category_of(0) is None
        assert report.result.category_of(6) is None
        assert report.border_rejected == 2

    def test_disjoint_categories(self, recognizer, image_size, busy_diagram):
        result = recognizer.recognize(busy_diagram, image_size)
        all_ids = ids(result.all_shapes())
        assert len(all_ids) == len(set(all_ids))

    def test_expected_counts(self, recognizer, image_size, busy_diagram):
        result = recognizer.recognize(busy_diagram, image_size)
        assert ids(result.weak_entities) == [1]
        assert ids(result.entities) == [7]
        assert ids(result.relationships) == [3]
        assert ids(result.weak_attributes) == [4]
        assert ids(result.attributes) == [8]

    def test_no_same_category_nesting_remains(self, recognizer, image_size, busy_diagram):
        result = recognizer.recognize(busy_diagram, image_size)
        for base in Category.base_categories():
            retained = result.get(base) + result.get(base.weak)
            for a, b in itertools.permutations(retained, 2):
                assert not is_nested(a.contour, b.contour)

    def test_invalid_contour_skipped(self, recognizer, image_size):
        contours = [
            Contour.from_coords(0, [(10, 10), (20, 20)]),
            Contour(id=1, points=()),
            rect_contour(2, 50, 50, 250, 150),
        ]
        report = recognizer.run(contours, image_size)
        assert report.invalid_skipped == 2
        assert report.contours_in == 3
        assert ids(report.result.entities) == [2]

    def test_empty_input(self, recognizer, image_size):
        report = recognizer.run([], image_size)
        assert report.result.is_empty
        assert report.contours_in == 0


class FakeSource(ContourSource):
    """Contour source returning a fixed set."""

    def __init__(self, contours):
        self._contours = tuple(contours)

    @property
    def name(self) -> str:
        return "fake"

    def extract(self, image_path):
        return ContourSet(
            contours=self._contours,
            image_size=ImageSize(400, 300),
            source_path=Path(image_path),
        )


class TestRecognitionService:

    def test_recognize_file(self):
        source = FakeSource([rect_contour(0, 50, 50, 250, 150)])
        service = RecognitionService(source)

        report = service.recognize_file("diagram.png")

        assert report.source_path == Path("diagram.png")
        assert report.result.count(Category.ENTITY) == 1

    def test_events_published(self):
        source = FakeSource([rect_contour(0, 50, 50, 250, 150)])
        service = RecognitionService(source)
        events = []
        service.subscribe_to_events(events.append)

        service.recognize_file("diagram.png")

        stages = [e.stage for e in events]
        assert stages[0] == "extract"
        assert stages[-1] == "complete"
        assert "classify_shapes" in stages
        assert "resolve_weak_types" in stages
        assert events[-1].progress == 1.0

    def test_source_satisfies_port(self):
        assert isinstance(FakeSource([]), ContourSource)
