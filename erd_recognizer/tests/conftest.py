"""Shared test fixtures."""

import pytest

from erd_recognizer.application.services.recognition import DiagramRecognizer
from erd_recognizer.domain.value_objects.config import ClassifierConfig
from erd_recognizer.domain.value_objects.geometry import ImageSize


@pytest.fixture
def config():
    return ClassifierConfig()


@pytest.fixture
def recognizer(config):
    return DiagramRecognizer(config)


@pytest.fixture
def image_size():
    return ImageSize(width=400, height=300)
