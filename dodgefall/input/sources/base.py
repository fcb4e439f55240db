"""
Base Input Source - Abstract interface for pointer backends.
"""
from abc import ABC, abstractmethod
from typing import List

import pygame

from dodgefall.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    The host loop owns the pygame event queue and offers each event to
    the source; the source keeps the ones it understands as InputEvents
    until they are polled.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Translate one pygame event.

        Args:
            event: Raw pygame event

        Returns:
            True if the event was consumed by this source
        """
        pass

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Per-frame hook for sources with internal timing.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    def resize(self, width: int, height: int) -> None:
        """Called when the render surface changes size."""
        pass

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
