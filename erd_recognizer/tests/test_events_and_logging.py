"""Tests for event fan-out and logging setup."""

import logging

import pytest

from erd_recognizer.application.ports.event_publisher import (
    STAGE_COMPLETE,
    EventPublisher,
    RecognitionEvent,
    SimpleEventPublisher,
)
from erd_recognizer.utils.env import LOG_FILE_ENV, resolve_log_file, setup_logging


class TestSimpleEventPublisher:

    def test_listeners_called_in_order(self):
        publisher = SimpleEventPublisher()
        calls = []
        publisher.subscribe(lambda e: calls.append(("a", e.stage)))
        publisher.subscribe(lambda e: calls.append(("b", e.stage)))

        publisher.publish(RecognitionEvent(stage="classify_shapes", message="x"))

        assert calls == [("a", "classify_shapes"), ("b", "classify_shapes")]

    def test_subscribe_once(self):
        publisher = SimpleEventPublisher()
        events = []
        publisher.subscribe(events.append)
        publisher.subscribe(events.append)
        publisher.publish(RecognitionEvent(stage="extract", message="x"))
        assert len(events) == 1

    def test_unsubscribe(self):
        publisher = SimpleEventPublisher()
        events = []
        publisher.subscribe(events.append)
        publisher.unsubscribe(events.append)
        publisher.unsubscribe(events.append)
        publisher.publish(RecognitionEvent(stage="extract", message="x"))
        assert events == []

    def test_satisfies_port(self):
        assert isinstance(SimpleEventPublisher(), EventPublisher)

    def test_final_event(self):
        assert RecognitionEvent(stage=STAGE_COMPLETE, message="done").is_final
        assert not RecognitionEvent(stage="filter_border", message="").is_final


class TestLogging:

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        yield
        logging.basicConfig(force=True)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(LOG_FILE_ENV, "custom.log")
        assert resolve_log_file("run.log") == "custom.log"

    def test_env_empty_disables(self, monkeypatch):
        monkeypatch.setenv(LOG_FILE_ENV, "")
        assert resolve_log_file("run.log") is None

    def test_argument_used(self, monkeypatch):
        monkeypatch.delenv(LOG_FILE_ENV, raising=False)
        assert resolve_log_file("run.log") == "run.log"
        assert resolve_log_file(None) is None

    def test_file_handler(self, monkeypatch, tmp_path):
        monkeypatch.delenv(LOG_FILE_ENV, raising=False)
        log_file = tmp_path / "run.log"

        setup_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("erd_recognizer.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_pil_kept_quiet(self, monkeypatch):
        monkeypatch.delenv(LOG_FILE_ENV, raising=False)
        setup_logging(logging.DEBUG)
        assert logging.getLogger("PIL").level == logging.INFO
