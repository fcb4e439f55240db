"""
Dodgefall - Avatar and falling objects.

Both are plain mutable dataclasses; the simulation owns their lifecycle.
Positions are top-left corners in screen pixels.
"""
from dataclasses import dataclass

from dodgefall import config
from dodgefall.models import Point2D, Rectangle


@dataclass
class Avatar:
    """The player-controlled square.

    The avatar is created once and only ever repositioned: by reset
    (back to bottom-center) and by drag moves (centered on the pointer).
    """
    x: float = 0.0
    y: float = 0.0
    size: float = config.AVATAR_SIZE
    dragging: bool = False

    @property
    def rect(self) -> Rectangle:
        """Bounding box used for grabs and collisions."""
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    def contains_point(self, point: Point2D) -> bool:
        """Check whether a pointer position lands on the avatar (edges included)."""
        return self.rect.contains_point(point)

    def clamp_to(self, width: float, height: float) -> None:
        """Keep the avatar fully inside a width x height playfield.

        If the playfield is smaller than the avatar, it pins to the
        top-left corner.
        """
        self.x = max(0.0, min(width - self.size, self.x))
        self.y = max(0.0, min(height - self.size, self.y))

    def center_on(self, point: Point2D, width: float, height: float) -> None:
        """Center the avatar on a point, then clamp it to the playfield."""
        self.x = point.x - self.size / 2
        self.y = point.y - self.size / 2
        self.clamp_to(width, height)

    def place_at_rest(self, width: float, height: float) -> None:
        """Move to the default bottom-center spot and drop any drag."""
        self.x = width / 2 - self.size / 2
        self.y = height - self.size - config.AVATAR_BOTTOM_MARGIN
        # A reset ends any drag in progress, even if the pointer is still down
        self.dragging = False
        self.clamp_to(width, height)


@dataclass
class FallingObject:
    """An object falling straight down at a constant speed.

    Speed is fixed at spawn time from the speed multiplier then in effect,
    so raising the multiplier later only affects new objects.
    """
    x: float
    y: float
    speed: float  # pixels per frame
    size: float = config.OBJECT_SIZE

    @property
    def rect(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    def advance(self) -> None:
        """Fall by one frame's worth of motion."""
        self.y += self.speed

    def is_below(self, height: float) -> bool:
        """True once the top edge has passed the bottom of the playfield."""
        return self.y > height
