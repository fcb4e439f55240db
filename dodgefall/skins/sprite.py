"""Sprite skin - image-based avatar and objects.

Each image is loaded lazily the first time it is drawn. An image that
fails to load is logged once and never retried; that entity is drawn
with the flat-colour fallback from then on. The two images are
independent, so one can fail while the other works.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, TYPE_CHECKING

import pygame

from dodgefall import config
from dodgefall.logging import get_logger
from .geometric import GeometricSkin

if TYPE_CHECKING:
    from dodgefall.entities import Avatar, FallingObject

log = get_logger('skins')


class SpriteImage:
    """One image file, loaded on demand and cached per draw size."""

    def __init__(self, path: Path, label: str):
        """
        Args:
            path: Image file to load
            label: Human-readable name used in log messages
        """
        self.path = Path(path)
        self.label = label
        self._image: Optional[pygame.Surface] = None
        self._scaled: Dict[Tuple[int, int], pygame.Surface] = {}
        self._attempted = False
        self.failed = False

    @property
    def is_loaded(self) -> bool:
        return self._image is not None

    def load(self) -> bool:
        """Try to load the image once.

        Returns:
            True if the image is available
        """
        if self._attempted:
            return self.is_loaded
        self._attempted = True

        try:
            image = pygame.image.load(str(self.path))
        except (pygame.error, OSError) as e:
            self.failed = True
            log.error("%s image failed to load from %s (%s); using flat colour",
                      self.label, self.path, e)
            return False

        if image.get_width() == 0 or image.get_height() == 0:
            self.failed = True
            log.error("%s image at %s is empty; using flat colour", self.label, self.path)
            return False

        self._image = image
        log.info("%s image loaded from %s", self.label, self.path)
        return True

    def get(self, width: int, height: int) -> Optional[pygame.Surface]:
        """Image scaled to width x height, or None if it is unavailable."""
        if not self.load():
            return None
        key = (width, height)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.scale(self._image, key)
        return self._scaled[key]


class SpriteSkin(GeometricSkin):
    """Draws the avatar and objects from image files."""

    NAME = "sprite"
    DESCRIPTION = "Image sprites with flat-colour fallback"

    def __init__(
        self,
        avatar_image: Path = config.AVATAR_IMAGE,
        object_image: Path = config.OBJECT_IMAGE,
        **kwargs,
    ):
        """Initialize sprite skin.

        Args:
            avatar_image: Path to the avatar image
            object_image: Path to the falling object image
            **kwargs: Colours passed through to GeometricSkin
        """
        super().__init__(**kwargs)
        self.avatar_sprite = SpriteImage(avatar_image, 'Avatar')
        self.object_sprite = SpriteImage(object_image, 'Object')

    def render_avatar(self, avatar: 'Avatar', screen: pygame.Surface) -> None:
        size = int(avatar.size)
        frame = self.avatar_sprite.get(size, size)
        if frame is None:
            super().render_avatar(avatar, screen)
            return
        screen.blit(frame, (int(avatar.x), int(avatar.y)))

    def render_object(self, obj: 'FallingObject', screen: pygame.Surface) -> None:
        size = int(obj.size)
        frame = self.object_sprite.get(size, size)
        if frame is None:
            super().render_object(obj, screen)
            return
        screen.blit(frame, (int(obj.x), int(obj.y)))
