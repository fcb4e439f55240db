"""
Data models for Dodgefall.

This package provides the Pydantic data models and enums used across the game:
- Primitives: Basic geometric and color types (Point2D, Color, Rectangle, Resolution)
- Enums: Pointer commands and frame outcomes

Usage:
    >>> from dodgefall.models import Point2D, Rectangle
    >>> from dodgefall.models import PointerAction, RoundOutcome
"""

from .primitives import (
    Point2D,
    Resolution,
    Color,
    Rectangle,
)

from .enums import (
    PointerAction,
    RoundOutcome,
)

__all__ = [
    "Point2D",
    "Resolution",
    "Color",
    "Rectangle",
    "PointerAction",
    "RoundOutcome",
]
