"""
Combined Input Source - Mouse and touch together.
"""
from typing import List, Optional

import pygame

from dodgefall.input.sources.base import InputSource
from dodgefall.input.sources.mouse import MouseInputSource
from dodgefall.input.sources.touch import TouchInputSource


class CombinedInputSource(InputSource):
    """Offers every event to each child source in order.

    Child commands are moved into one queue as each raw event is handled,
    so polled commands keep the order their pygame events arrived in.
    """

    def __init__(self, sources: Optional[List[InputSource]] = None):
        super().__init__()
        if sources is None:
            sources = [MouseInputSource(), TouchInputSource()]
        self._sources = list(sources)

    @property
    def sources(self) -> List[InputSource]:
        return list(self._sources)

    def _collect(self) -> None:
        for source in self._sources:
            self._event_queue.extend(source.poll_events())

    def handle_event(self, event: pygame.event.Event) -> bool:
        consumed = False
        for source in self._sources:
            if source.handle_event(event):
                consumed = True
        self._collect()
        return consumed

    def update(self, dt: float) -> None:
        for source in self._sources:
            source.update(dt)
        self._collect()

    def resize(self, width: int, height: int) -> None:
        for source in self._sources:
            source.resize(width, height)

    def clear(self) -> None:
        super().clear()
        for source in self._sources:
            source.clear()
