"""
Mouse Input Source - Left-button drag input.
"""
import time
from typing import Tuple

import pygame

from dodgefall.input.input_event import InputEvent
from dodgefall.input.sources.base import InputSource
from dodgefall.models import Point2D, PointerAction


class MouseInputSource(InputSource):
    """Converts left-button presses, motion and releases into pointer commands.

    Mouse events that SDL synthesises from touches are skipped so a
    touch screen does not drive the avatar twice. Leaving the window
    counts as a release.
    """

    def __init__(self):
        super().__init__()
        self._last_pos: Tuple[float, float] = (0.0, 0.0)

    def _push(self, action: PointerAction, pos: Tuple[float, float]) -> None:
        self._last_pos = (float(pos[0]), float(pos[1]))
        self._event_queue.append(InputEvent(
            action=action,
            position=Point2D(x=self._last_pos[0], y=self._last_pos[1]),
            timestamp=time.monotonic(),
        ))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            if getattr(event, 'touch', False):
                return True

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:  # Left mouse button only
                self._push(PointerAction.GRAB, event.pos)
            return True

        if event.type == pygame.MOUSEMOTION:
            self._push(PointerAction.MOVE, event.pos)
            return True

        if event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                self._push(PointerAction.RELEASE, event.pos)
            return True

        if event.type == pygame.WINDOWLEAVE:
            self._push(PointerAction.RELEASE, self._last_pos)
            # Not consumed: the host may also care about focus changes
            return False

        return False
