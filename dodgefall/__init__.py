"""
Dodgefall

Drag the avatar out of the way of falling objects until the countdown
runs out. See SPEC_FULL.md for the game rules.
"""

from dodgefall.logging import get_logger

# Package-level logger; modules create their own via get_logger(name)
logger = get_logger('dodgefall')

__version__ = '1.0.0'

__all__ = ['logger', '__version__']
