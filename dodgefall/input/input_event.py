"""
Input Event - A single pointer command.

Mouse and touch sources both produce these; the simulation consumes them
without knowing where they came from. Uses Pydantic for validation and
immutability.
"""
from pydantic import BaseModel, field_validator, ConfigDict

from dodgefall.models import Point2D, PointerAction


class InputEvent(BaseModel):
    """Immutable pointer command from any source.

    Attributes:
        action: GRAB, MOVE or RELEASE
        position: Pointer position in surface coordinates
        timestamp: When the event occurred (seconds, monotonic clock)
    """
    action: PointerAction
    position: Point2D
    timestamp: float

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (f"InputEvent({self.action.value}, pos=({self.position.x:.2f}, "
                f"{self.position.y:.2f}), t={self.timestamp:.3f})")
