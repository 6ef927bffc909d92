"""Tests for the ring buffer logger and notification sinks."""
import logging
import uuid

import pytest
from pydantic import ValidationError

from brewkit.events import BrewEvent, BrewStep
from brewkit.config import get_settings
from brewkit.decisions import FixedDecision
from brewkit.domain import CoffeeWithHook
from brewkit.logging import LOGGER_NAME, RingBufferHandler, create_logger, ring_buffer
from brewkit.sinks import EventSink, LoggingSink, RecordingSink


def _name():
    return f"brewkit.test.{uuid.uuid4().hex}"


def test_ring_buffer_keeps_latest_entries():
    logger = create_logger(_name(), ring_size=3)
    for i in range(5):
        logger.info(f"event {i}")
    events = ring_buffer(logger).get_events()
    assert [e["event"] for e in events] == ["event 2", "event 3", "event 4"]


def test_ring_buffer_clear():
    handler = RingBufferHandler(max_entries=5)
    logger = logging.getLogger(_name())
    logger.addHandler(handler)
    logger.warning("boiling over")
    assert len(handler.get_events()) == 1
    handler.clear()
    assert handler.get_events() == []


def test_create_logger_is_idempotent():
    name = _name()
    first = create_logger(name, ring_size=10)
    second = create_logger(name, ring_size=99)
    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is True


def test_create_logger_reapplies_level():
    name = _name()
    create_logger(name, ring_size=10, level="DEBUG")
    logger = create_logger(name, ring_size=10, level="WARNING")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_default_sink_reaches_application_handlers(caplog):
    get_settings.cache_clear()
    coffee = CoffeeWithHook(decide=FixedDecision(True))
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        coffee.prepare()
    get_settings.cache_clear()
    assert caplog.messages == [
        "Boiling water",
        "Brewing coffee with boiling water",
        "Pouring coffee into the cup",
        "customer_wants_sugar",
        "Adding sugar",
    ]


def test_logging_sink_writes_step_details():
    logger = create_logger(_name(), ring_size=10)
    sink = LoggingSink(logger)
    sink.emit(BrewEvent(step=BrewStep.BREW, message="Brewing", details={"cups": 2}))
    events = ring_buffer(logger).get_events()
    assert events[0]["event"] == "Brewing"
    assert events[0]["level"] == "INFO"
    assert events[0]["details"] == {"step": "brew", "cups": 2}


def test_recording_sink():
    sink = RecordingSink()
    assert isinstance(sink, EventSink)
    sink.emit(BrewEvent(step=BrewStep.BOIL, message="Boiling water"))
    sink.emit(BrewEvent(step=BrewStep.POUR, message="Pouring"))
    assert len(sink) == 2
    assert sink.steps == [BrewStep.BOIL, BrewStep.POUR]
    assert sink.messages == ["Boiling water", "Pouring"]


def test_brew_event_is_frozen():
    event = BrewEvent(step=BrewStep.BOIL, message="Boiling water")
    with pytest.raises(ValidationError):
        event.message = "changed"
