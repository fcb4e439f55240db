"""
Touch Input Source - Finger drag input.

pygame reports finger positions normalised to [0, 1]; they are scaled
to the current surface size here.
"""
import time
from typing import Optional

import pygame

from dodgefall import config
from dodgefall.input.input_event import InputEvent
from dodgefall.input.sources.base import InputSource
from dodgefall.models import Point2D, PointerAction


class TouchInputSource(InputSource):
    """Converts finger events into pointer commands.

    Only the first finger down drives grabs and moves; lifting any
    finger ends the drag.
    """

    def __init__(self, width: int = config.SCREEN_WIDTH, height: int = config.SCREEN_HEIGHT):
        """Initialize the touch source.

        Args:
            width: Surface width used to scale normalised coordinates
            height: Surface height used to scale normalised coordinates
        """
        super().__init__()
        self._width = width
        self._height = height
        self._active_finger: Optional[int] = None

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    def _to_surface(self, event: pygame.event.Event) -> Point2D:
        return Point2D(x=event.x * self._width, y=event.y * self._height)

    def _push(self, action: PointerAction, position: Point2D) -> None:
        self._event_queue.append(InputEvent(
            action=action,
            position=position,
            timestamp=time.monotonic(),
        ))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.FINGERDOWN:
            if self._active_finger is None:
                self._active_finger = event.finger_id
                self._push(PointerAction.GRAB, self._to_surface(event))
            return True

        if event.type == pygame.FINGERMOTION:
            if event.finger_id == self._active_finger:
                self._push(PointerAction.MOVE, self._to_surface(event))
            return True

        if event.type == pygame.FINGERUP:
            if event.finger_id == self._active_finger:
                self._active_finger = None
            self._push(PointerAction.RELEASE, self._to_surface(event))
            return True

        return False

    def clear(self) -> None:
        super().clear()
        self._active_finger = None
