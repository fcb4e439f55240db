"""
Dodgefall - Falling object spawner.

Each frame of an active round rolls once; the chance of a new object
grows linearly with the speed multiplier, as does the new object's speed.
"""
import random
from typing import Optional, Protocol

from dodgefall import config
from dodgefall.entities import FallingObject
from dodgefall.logging import get_logger

log = get_logger('spawner')


class RandomSource(Protocol):
    """The subset of random.Random the spawner needs."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...


class ObjectSpawner:
    """Decides when to spawn falling objects and builds them."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        base_chance: float = config.BASE_SPAWN_CHANCE,
        base_speed: float = config.BASE_FALL_SPEED,
        object_size: float = config.OBJECT_SIZE,
    ):
        """Initialize the spawner.

        Args:
            rng: Random source (defaults to a fresh random.Random)
            base_chance: Per-frame spawn probability at multiplier 1.0
            base_speed: Fall speed in pixels/frame at multiplier 1.0
            object_size: Side length of spawned objects
        """
        self.rng = rng if rng is not None else random.Random()
        self.base_chance = base_chance
        self.base_speed = base_speed
        self.object_size = object_size

    def spawn_chance(self, speed_multiplier: float) -> float:
        """Per-frame spawn probability for the given multiplier."""
        return self.base_chance * speed_multiplier

    def should_spawn(self, speed_multiplier: float) -> bool:
        """Roll once for this frame."""
        return self.rng.random() < self.spawn_chance(speed_multiplier)

    def spawn(self, playfield_width: float, speed_multiplier: float) -> FallingObject:
        """Create an object just above the playfield at a random column.

        Args:
            playfield_width: Current playfield width in pixels
            speed_multiplier: Current speed multiplier

        Returns:
            New FallingObject
        """
        max_x = max(0.0, playfield_width - self.object_size)
        obj = FallingObject(
            x=self.rng.uniform(0.0, max_x),
            y=-self.object_size,
            speed=self.base_speed * speed_multiplier,
            size=self.object_size,
        )
        log.trace("Spawned object at x=%.1f speed=%.2f", obj.x, obj.speed)
        return obj
