"""
Dodgefall Game Mode

Drag the avatar to dodge falling objects until the countdown ends.
Wires the simulation to input commands, a skin and the notification banner.
"""
import math
import random
from pathlib import Path
from typing import List, Optional

import pygame

from dodgefall import config
from dodgefall import simulation
from dodgefall.base_game import BaseGame
from dodgefall.game_state import GameState
from dodgefall.input import InputEvent
from dodgefall.logging import get_logger
from dodgefall.models import RoundOutcome
from dodgefall.notifications import NotificationManager
from dodgefall.skins import DodgefallSkin, GeometricSkin, SpriteSkin
from dodgefall.spawner import ObjectSpawner, RandomSource

log = get_logger('game_mode')

SKINS = {
    'sprite': SpriteSkin,
    'geometric': GeometricSkin,
}


class DodgeMode(BaseGame):
    """Dodgefall game mode.

    Features:
    - Round starts on the first grab of the avatar
    - Objects spawn more often and fall faster as the round goes on
    - Any hit is a loss, surviving the countdown is a win; both reset
    - Win/loss shown as a non-blocking banner
    """

    NAME = "Dodgefall"
    DESCRIPTION = "Drag the square to dodge falling objects until time runs out."
    VERSION = "1.0.0"
    AUTHOR = "Dodgefall Team"

    ARGUMENTS = [
        {
            'name': '--duration',
            'type': float,
            'default': None,
            'help': 'Round length in time units (default from config)'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible spawns'
        },
        {
            'name': '--skin',
            'type': str,
            'default': 'sprite',
            'choices': sorted(SKINS),
            'help': 'Rendering style'
        },
        {
            'name': '--avatar-image',
            'type': str,
            'default': None,
            'help': 'Avatar image file (falls back to a blue square)'
        },
        {
            'name': '--object-image',
            'type': str,
            'default': None,
            'help': 'Falling object image file (falls back to red squares)'
        },
    ]

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        duration: Optional[float] = None,
        seed: Optional[int] = None,
        skin: str = 'sprite',
        avatar_image: Optional[str] = None,
        object_image: Optional[str] = None,
        rng: Optional[RandomSource] = None,
        **kwargs,
    ):
        """Initialize the game.

        Args:
            width: Playfield width in pixels
            height: Playfield height in pixels
            duration: Round length (None = config.ROUND_DURATION)
            seed: Seed for the spawn random source
            skin: 'sprite' or 'geometric'
            avatar_image: Override path for the avatar image
            object_image: Override path for the object image
            rng: Random source to use instead of a seeded random.Random

        Raises:
            ValueError: If duration is not positive
        """
        self.sim = simulation.create_state(
            width,
            height,
            duration=duration if duration is not None else config.ROUND_DURATION,
        )
        self.spawner = ObjectSpawner(rng if rng is not None else random.Random(seed))
        self.skin = self._create_skin(skin, avatar_image, object_image)
        self.notifications = NotificationManager()
        self.last_outcome = RoundOutcome.NONE

    @staticmethod
    def _create_skin(name: str, avatar_image: Optional[str],
                     object_image: Optional[str]) -> DodgefallSkin:
        if name not in SKINS:
            log.warning("Unknown skin '%s', using sprite", name)
            name = 'sprite'
        if name == 'sprite':
            return SpriteSkin(
                avatar_image=Path(avatar_image) if avatar_image else config.AVATAR_IMAGE,
                object_image=Path(object_image) if object_image else config.OBJECT_IMAGE,
            )
        return SKINS[name]()

    def _get_internal_state(self) -> GameState:
        return GameState.PLAYING if self.sim.is_active else GameState.READY

    @property
    def time_display(self) -> int:
        """Countdown as shown to the player: remaining time rounded up."""
        return math.ceil(self.sim.time_remaining)

    def handle_input(self, events: List[InputEvent]) -> None:
        """Apply pointer commands in arrival order."""
        for event in events:
            simulation.apply_input(self.sim, event)

    def update(self, dt: float) -> RoundOutcome:
        """Step the simulation one frame and announce any result.

        Args:
            dt: Seconds since last frame (only ages the banner; the
                simulation itself advances a fixed amount per frame)

        Returns:
            Outcome of this frame
        """
        outcome = simulation.step_frame(self.sim, self.spawner)
        self.last_outcome = outcome

        if outcome == RoundOutcome.LOST:
            self.notifications.show(config.LOSS_MESSAGE)
        elif outcome == RoundOutcome.WON:
            self.notifications.show(config.WIN_MESSAGE)

        self.notifications.update(dt)
        return outcome

    def render(self, screen: pygame.Surface) -> None:
        self.skin.render_background(screen)
        self.skin.render_avatar(self.sim.avatar, screen)
        for obj in self.sim.objects:
            self.skin.render_object(obj, screen)
        self.skin.render_hud(screen, self.time_display)
        self.notifications.render(screen)

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            # Minimised windows report a zero size; keep the last playfield
            return
        simulation.resize(self.sim, width, height)
        log.info("Playfield is now %dx%d", width, height)

    def reset(self) -> None:
        simulation.reset(self.sim)
        self.notifications.clear()
        self.last_outcome = RoundOutcome.NONE
