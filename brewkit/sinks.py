"""
Sinks that receive the notifications emitted by each brewing step.

A sink is anything with an ``emit(event)`` method. The default sink writes
to the package logger; ``RecordingSink`` keeps events in memory so callers
can inspect exactly what happened and in which order.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol, runtime_checkable

from brewkit.events import BrewEvent, BrewStep


@runtime_checkable
class EventSink(Protocol):
    def emit(self, event: BrewEvent) -> None:
        ...


class LoggingSink:
    """Forward every event to a ``logging.Logger`` at INFO level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        if logger is None:
            from brewkit.logging import get_logger

            logger = get_logger()
        self.logger = logger

    def emit(self, event: BrewEvent) -> None:
        details = {"step": event.step.value, **event.details}
        self.logger.info(event.message, extra={"details": details})


class RecordingSink:
    """Collect events in emission order."""

    def __init__(self) -> None:
        self.events: List[BrewEvent] = []

    def emit(self, event: BrewEvent) -> None:
        self.events.append(event)

    @property
    def steps(self) -> List[BrewStep]:
        return [e.step for e in self.events]

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.events]

    def __len__(self) -> int:
        return len(self.events)
