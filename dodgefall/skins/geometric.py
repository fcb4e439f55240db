"""Flat-colour skin.

Draws the avatar and objects as solid rectangles. Also the fallback
used by the sprite skin for any image that is not available.
"""

from typing import Optional, Tuple, TYPE_CHECKING

import pygame

from dodgefall import config
from .base import DodgefallSkin

if TYPE_CHECKING:
    from dodgefall.entities import Avatar, FallingObject


class GeometricSkin(DodgefallSkin):
    """Solid rectangles on a plain background."""

    NAME = "geometric"
    DESCRIPTION = "Flat coloured squares"

    def __init__(
        self,
        background_color: Tuple[int, int, int] = config.BACKGROUND_COLOR,
        avatar_color: Tuple[int, int, int] = config.AVATAR_FALLBACK_COLOR,
        object_color: Tuple[int, int, int] = config.OBJECT_FALLBACK_COLOR,
        text_color: Tuple[int, int, int] = config.HUD_TEXT_COLOR,
    ):
        self.background_color = background_color
        self.avatar_color = avatar_color
        self.object_color = object_color
        self.text_color = text_color
        self._font: Optional[pygame.font.Font] = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, config.FONT_SIZE_HUD)
        return self._font

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(self.background_color)

    def render_avatar(self, avatar: 'Avatar', screen: pygame.Surface) -> None:
        rect = pygame.Rect(int(avatar.x), int(avatar.y), int(avatar.size), int(avatar.size))
        pygame.draw.rect(screen, self.avatar_color, rect)

    def render_object(self, obj: 'FallingObject', screen: pygame.Surface) -> None:
        rect = pygame.Rect(int(obj.x), int(obj.y), int(obj.size), int(obj.size))
        pygame.draw.rect(screen, self.object_color, rect)

    def render_hud(self, screen: pygame.Surface, seconds_left: int) -> None:
        text = self._get_font().render(str(seconds_left), True, self.text_color)
        rect = text.get_rect(topright=(screen.get_width() - config.HUD_MARGIN, config.HUD_MARGIN))
        screen.blit(text, rect)
