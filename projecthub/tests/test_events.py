"""Tests for the event bus and the execution-time decorator."""

import logging
import threading
from uuid import uuid4

from projecthub.core.db.models import Project
from projecthub.core.events import (
    DomainEvent,
    EventBus,
    EventSink,
    ProjectCreatedEvent,
    log_project_created,
)
from projecthub.core.utils import log_execution_time


def _event(name="Alpha") -> ProjectCreatedEvent:
    return ProjectCreatedEvent(project=Project(project_id=uuid4(), name=name, organization_id=uuid4()))


class TestEventBus:

    def test_is_an_event_sink(self):
        bus = EventBus()
        assert isinstance(bus, EventSink)
        bus.shutdown()

    def test_delivers_to_type_and_wildcard_handlers(self, event_bus):
        typed, everything = [], []
        event_bus.subscribe("project_created", typed.append)
        event_bus.subscribe(EventBus.WILDCARD, everything.append)
        event_bus.subscribe("something_else", lambda e: typed.append("wrong"))

        event = _event()
        futures = event_bus.publish(event)
        for f in futures:
            f.result(timeout=5)

        assert typed == [event]
        assert everything == [event]

    def test_publish_does_not_wait_for_slow_handler(self):
        bus = EventBus(max_workers=1)
        release = threading.Event()
        done = []

        def slow(event):
            release.wait(timeout=5)
            done.append(event)

        bus.subscribe("project_created", slow)
        futures = bus.publish(_event())

        assert done == []
        assert not futures[0].done()

        release.set()
        bus.shutdown(wait=True)
        assert len(done) == 1

    def test_failing_handler_is_isolated(self, event_bus, caplog):
        received = []

        def broken(event):
            raise RuntimeError("boom")

        event_bus.subscribe("project_created", broken)
        event_bus.subscribe("project_created", received.append)

        with caplog.at_level(logging.ERROR, logger="projecthub.core.events"):
            for f in event_bus.publish(_event()):
                f.result(timeout=5)

        assert len(received) == 1
        assert "boom" in caplog.text

    def test_unsubscribe(self, event_bus):
        received = []
        event_bus.subscribe("project_created", received.append)
        event_bus.unsubscribe("project_created", received.append)

        assert event_bus.publish(_event()) == []
        assert received == []

    def test_publish_after_shutdown_is_dropped(self):
        bus = EventBus()
        received = []
        bus.subscribe("project_created", received.append)
        bus.shutdown()

        assert bus.publish(_event()) == []
        assert received == []


def test_project_created_event_defaults():
    event = _event()
    assert event.type == "project_created"
    assert event.occurred_at.tzinfo is not None


def test_log_project_created(caplog):
    with caplog.at_level(logging.INFO, logger="projecthub.core.events"):
        log_project_created(_event("Alpha"))
        log_project_created(DomainEvent(type="other"))

    assert "Project created" in caplog.text
    assert "Alpha" in caplog.text


# ── Tests: log_execution_time ────────────────────────────────────────────


def test_log_execution_time_returns_result(caplog):
    @log_execution_time
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="projecthub.core.utils.timing"):
        assert add(2, 3) == 5

    assert "add executed in" in caplog.text
    assert add.__name__ == "add"


def test_log_execution_time_logs_on_error(caplog):
    @log_execution_time
    def fail():
        raise ValueError("nope")

    with caplog.at_level(logging.DEBUG, logger="projecthub.core.utils.timing"):
        try:
            fail()
        except ValueError:
            pass

    assert "fail executed in" in caplog.text
