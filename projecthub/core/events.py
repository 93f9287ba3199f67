"""Domain events and the in-process event bus.

``ProjectManager`` publishes a ``ProjectCreatedEvent`` after a project
has been committed. ``EventBus`` delivers events to subscribers on a
thread pool so publishing never waits on a slow handler.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, DefaultDict, List, Optional

from .db.models import Project

logger = logging.getLogger(__name__)


@dataclass
class DomainEvent:
    """Base class for all domain events."""

    type: str
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ProjectCreatedEvent(DomainEvent):
    """Emitted once a new project has been persisted."""

    type: str = "project_created"
    project: Optional[Project] = None


EventHandler = Callable[[DomainEvent], None]


class EventSink(ABC):
    """Destination for domain events."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Hand off ``event`` for delivery without waiting on subscribers."""


class EventBus(EventSink):
    """Thread-pool backed publish/subscribe bus.

    Handlers are registered per event ``type``; ``"*"`` receives every
    event. Each handler runs in its own pool task, and a failing handler
    is logged without affecting the publisher or other handlers.
    """

    WILDCARD = "*"

    def __init__(self, max_workers: int = 2):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="event-bus")
        self._handlers: DefaultDict[str, List[EventHandler]] = defaultdict(list)
        self._lock = threading.Lock()
        self._closed = False

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug(f"Subscribed {getattr(handler, '__name__', handler)} to {event_type}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            if handler in self._handlers.get(event_type, []):
                self._handlers[event_type].remove(handler)

    def publish(self, event: DomainEvent) -> List[Future]:
        """Schedule delivery of ``event`` and return the pending futures."""
        if self._closed:
            logger.warning(f"Event bus closed, dropping {event.type} event")
            return []

        with self._lock:
            handlers = list(self._handlers.get(event.type, [])) + list(self._handlers.get(self.WILDCARD, []))

        futures = [self._executor.submit(self._deliver, handler, event) for handler in handlers]
        logger.debug(f"Published {event.type} event to {len(futures)} handler(s)")
        return futures

    @staticmethod
    def _deliver(handler: EventHandler, event: DomainEvent) -> None:
        try:
            handler(event)
        except Exception as e:
            logger.error(
                f"Event handler {getattr(handler, '__name__', handler)} failed for {event.type}: {e}",
                exc_info=True,
            )

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting events; optionally wait for pending deliveries."""
        self._closed = True
        self._executor.shutdown(wait=wait)
        logger.info("Event bus stopped")


def log_project_created(event: DomainEvent) -> None:
    """Default subscriber: record project creation in the application log."""
    project = getattr(event, "project", None)
    if project is None:
        return
    logger.info(f"Project created: {project.project_id} ({project.name}) in org {project.organization_id}")
