"""Dodgefall skins."""

from .base import DodgefallSkin
from .geometric import GeometricSkin
from .sprite import SpriteSkin, SpriteImage

__all__ = ['DodgefallSkin', 'GeometricSkin', 'SpriteSkin', 'SpriteImage']
