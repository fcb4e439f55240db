"""
Win/loss notifications.

Shows a timed banner over the playfield instead of blocking the loop.
The game keeps running underneath; a new message replaces the old one.

Classes:
    Banner: A message and how long it has left
    NotificationManager: Holds the current banner, ages and draws it
"""

from typing import Optional

import pygame
from pydantic import BaseModel, Field, computed_field

from dodgefall import config
from dodgefall.logging import get_logger

log = get_logger('notifications')


class Banner(BaseModel):
    """A single on-screen message.

    Attributes:
        message: Text to show
        lifetime: Seconds the banner has been visible (non-negative)
        max_lifetime: Seconds before it disappears (positive)
    """
    message: str
    lifetime: float = Field(default=0.0, ge=0.0)
    max_lifetime: float = Field(default=config.NOTIFICATION_DURATION, gt=0.0)

    @computed_field
    @property
    def is_alive(self) -> bool:
        return self.lifetime < self.max_lifetime

    @computed_field
    @property
    def alpha(self) -> int:
        """Opacity; fades out over the last quarter of the lifetime."""
        fade_start = self.max_lifetime * 0.75
        if self.lifetime <= fade_start:
            return 255
        remaining = max(0.0, self.max_lifetime - self.lifetime)
        return int(255 * remaining / (self.max_lifetime - fade_start))

    def aged(self, dt: float) -> 'Banner':
        """Return a copy that is dt seconds older."""
        return self.model_copy(update={'lifetime': self.lifetime + dt})


class NotificationManager:
    """Keeps at most one banner alive and renders it.

    Examples:
        >>> notes = NotificationManager()
        >>> notes.show("You Win!")
        >>> notes.current.message
        'You Win!'
    """

    def __init__(self, duration: float = config.NOTIFICATION_DURATION):
        """
        Args:
            duration: Seconds each banner stays on screen
        """
        self.duration = duration
        self.current: Optional[Banner] = None
        self._font: Optional[pygame.font.Font] = None

    @property
    def is_showing(self) -> bool:
        return self.current is not None

    def show(self, message: str) -> None:
        """Display a message, replacing any banner already showing."""
        self.current = Banner(message=message, max_lifetime=self.duration)
        log.info("Notify: %s", message)

    def clear(self) -> None:
        self.current = None

    def update(self, dt: float) -> None:
        """Age the banner and drop it once it expires.

        Args:
            dt: Seconds since last frame
        """
        if self.current is None:
            return
        self.current = self.current.aged(dt)
        if not self.current.is_alive:
            self.current = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, config.FONT_SIZE_BANNER)
        return self._font

    def render(self, screen: pygame.Surface) -> None:
        """Draw the banner centred on the screen, if one is showing."""
        if self.current is None:
            return

        alpha = self.current.alpha
        text = self._get_font().render(self.current.message, True, config.BANNER_TEXT_COLOR)
        text.set_alpha(alpha)

        padding = 20
        box = pygame.Surface(
            (text.get_width() + padding * 2, text.get_height() + padding * 2),
            pygame.SRCALPHA,
        )
        r, g, b, a = config.BANNER_BACKGROUND_COLOR
        box.fill((r, g, b, a * alpha // 255))

        box_rect = box.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        screen.blit(box, box_rect)
        screen.blit(text, text.get_rect(center=box_rect.center))
