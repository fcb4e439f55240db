"""Standard GameState enum for Dodgefall.

Win and loss reset the round within the same frame, so they are reported
as frame outcomes (see dodgefall.models.RoundOutcome), not as states.
"""
from enum import Enum


class GameState(Enum):
    """Externally visible game states.

    States:
        READY: Waiting for the player to grab the avatar
        PLAYING: Round in progress
    """
    READY = "ready"
    PLAYING = "playing"
