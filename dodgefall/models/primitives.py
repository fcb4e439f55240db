"""
Shared primitive data types for the game.

This module provides basic geometric and color types used by the
simulation, the input layer and the skins.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point for pointer positions and coordinates.

    Coordinates can be positive, negative, or zero; pointer positions
    outside the window are legal and get clamped by whoever consumes them.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> off_window = Point2D(x=-5.0, y=25.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Playfield dimensions in pixels.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> hd = Resolution(width=1280, height=720)
        >>> hd.aspect_ratio
        1.7777777777777777
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse a ``WIDTHxHEIGHT`` string such as ``1280x720``.

        Raises:
            ValueError: If the text is not two integers separated by ``x``
        """
        try:
            width, height = text.lower().split('x')
            return cls(width=int(width), height=int(height))
        except ValueError as e:
            raise ValueError(f"Invalid resolution {text!r}, expected WIDTHxHEIGHT") from e

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque
    """
    r: int
    g: int
    b: int
    a: int = 255

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle.

    Position is the top-left corner (pygame convention). Used for the
    avatar and falling object bounding boxes.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=40.0, height=40.0)
        >>> rect.contains_point(Point2D(x=140.0, y=120.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @computed_field
    @property
    def left(self) -> float:
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle.

        Edges count as inside, so a grab exactly on the border of the
        avatar still picks it up.

        Args:
            point: The point to check

        Returns:
            True if point is inside or on the boundary of the rectangle
        """
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def overlaps(self, other: 'Rectangle') -> bool:
        """Strict bounding-box overlap test.

        Rectangles that merely touch along an edge do not overlap.

        Args:
            other: Another rectangle

        Returns:
            True if the interiors of the rectangles intersect

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=40.0, height=40.0)
            >>> a.overlaps(Rectangle(x=40.0, y=0.0, width=20.0, height=20.0))
            False
        """
        return (self.left < other.right and
                self.right > other.left and
                self.top < other.bottom and
                self.bottom > other.top)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
