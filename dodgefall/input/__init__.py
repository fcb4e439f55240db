"""
Input abstraction layer.

Mouse and touch are both reduced to GRAB / MOVE / RELEASE commands so the
simulation never deals with device events.
"""

from dodgefall.input.input_event import InputEvent
from dodgefall.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
