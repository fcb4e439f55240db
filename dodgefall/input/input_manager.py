"""
Input Manager - Collects pointer commands from the active source.
"""
from typing import Iterable, List, Optional

import pygame

from dodgefall.input.input_event import InputEvent
from dodgefall.input.sources.base import InputSource
from dodgefall.logging import get_logger

log = get_logger('input')


class InputManager:
    """Routes pygame events to an input source and collects its commands.

    Lets the host switch between mouse, touch or both at runtime without
    changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Set the input source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def process(self, events: Iterable[pygame.event.Event]) -> List[pygame.event.Event]:
        """Offer raw pygame events to the source.

        Args:
            events: Events pulled from the pygame queue this frame

        Returns:
            Events the source did not consume, for the host to handle
        """
        if self._source is None:
            return list(events)

        unhandled = []
        for event in events:
            if not self._source.handle_event(event):
                unhandled.append(event)
        return unhandled

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def resize(self, width: int, height: int) -> None:
        """Tell the source the surface size changed."""
        if self._source is not None:
            self._source.resize(width, height)

    def get_events(self) -> List[InputEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        events = self._source.poll_events()
        for event in events:
            log.trace("%s", event)
        return events

    def clear_events(self) -> None:
        """Clear any pending events from the active source."""
        if self._source is not None:
            self._source.clear()
