"""Unit tests for configuration."""

import pytest

from erd_recognizer.domain.value_objects.config import ClassifierConfig


class TestClassifierConfig:
    """Tests for ClassifierConfig."""

    def test_default_values(self):
        config = ClassifierConfig()
        assert config.approx_tolerance_factor == 0.02
        assert config.min_shape_area == 500
        assert config.square_aspect_tolerance == 0.2
        assert config.max_attribute_area == 20000
        assert config.resolve_weak_attributes is True

    def test_custom_values(self):
        config = ClassifierConfig(min_shape_area=1000, square_aspect_tolerance=0.1)
        assert config.min_shape_area == 1000
        assert config.square_aspect_tolerance == 0.1

    def test_validation_tolerance_range(self):
        with pytest.raises(Exception):  # pydantic ValidationError
            ClassifierConfig(approx_tolerance_factor=0)

        with pytest.raises(Exception):
            ClassifierConfig(approx_tolerance_factor=1.5)

    def test_validation_negative_area(self):
        with pytest.raises(Exception):
            ClassifierConfig(min_shape_area=-1)

    def test_ceiling_above_floor(self):
        with pytest.raises(Exception):
            ClassifierConfig(min_shape_area=5000, max_attribute_area=4000)

    def test_frozen(self):
        config = ClassifierConfig()
        with pytest.raises(Exception):
            config.min_shape_area = 10
