"""
Input source implementations.
"""

from dodgefall.input.sources.base import InputSource
from dodgefall.input.sources.mouse import MouseInputSource
from dodgefall.input.sources.touch import TouchInputSource
from dodgefall.input.sources.combined import CombinedInputSource

__all__ = ['InputSource', 'MouseInputSource', 'TouchInputSource', 'CombinedInputSource']
