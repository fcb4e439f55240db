"""Base class for Dodgefall games.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes; the launcher builds its argparse
options from them.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from dodgefall.game_state import GameState


class BaseGame(ABC):
    """Abstract base class for games run by the launcher.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState
        - handle_input(events): Process input events
        - update(dt): Update game logic
        - render(screen): Draw the game
        - resize(width, height): Adopt a new surface size
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to every game; game-specific entries with the same name win
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--resolution',
            'type': str,
            'default': None,
            'help': 'Window size as WIDTHxHEIGHT (default from config)'
        },
        {
            'name': '--fullscreen',
            'action': 'store_true',
            'default': False,
            'help': 'Run in fullscreen mode'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific first, then base).

        Duplicates by name are removed; game-specific takes precedence.
        """
        seen_names = set()
        result = []

        for arg in list(cls.ARGUMENTS) + list(cls._BASE_ARGUMENTS):
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary."""
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> Any:
        """Advance the game by one frame.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def resize(self, width: int, height: int) -> None:
        """Adopt a new surface size."""
        pass

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        pass
