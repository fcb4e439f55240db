"""Base class for Dodgefall skins.

Skins handle ALL rendering - the simulation only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from dodgefall.entities import Avatar, FallingObject


class DodgefallSkin(ABC):
    """Base class for game skins.

    The game mode calls these once per frame, background first.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_background(self, screen: pygame.Surface) -> None:
        """Fill the whole surface.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_avatar(self, avatar: 'Avatar', screen: pygame.Surface) -> None:
        """Render the player's avatar.

        Args:
            avatar: Avatar to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_object(self, obj: 'FallingObject', screen: pygame.Surface) -> None:
        """Render one falling object.

        Args:
            obj: Object to render
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, screen: pygame.Surface, seconds_left: int) -> None:
        """Render the countdown display.

        Args:
            screen: Pygame surface to draw on
            seconds_left: Whole time units remaining, already rounded up
        """
        pass
