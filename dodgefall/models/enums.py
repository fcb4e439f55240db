"""
Dodgefall enumerations.

These enums describe pointer commands and how a frame ended.
"""

from enum import Enum


class PointerAction(str, Enum):
    """Kinds of pointer command applied to the simulation.

    Mouse and touch sources both translate their raw events into these.

    Attributes:
        GRAB: Pointer pressed; starts a drag if it lands on the avatar
        MOVE: Pointer moved; repositions the avatar while dragging
        RELEASE: Pointer lifted or left the window; ends the drag
    """
    GRAB = "grab"
    MOVE = "move"
    RELEASE = "release"


class RoundOutcome(str, Enum):
    """Result of advancing the simulation by one frame.

    Attributes:
        NONE: The round continues (or has not started)
        LOST: The avatar collided with a falling object
        WON: The countdown reached zero
    """
    NONE = "none"
    LOST = "lost"
    WON = "won"
