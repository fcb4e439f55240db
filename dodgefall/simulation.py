"""
Dodgefall - Simulation state and per-frame update.

All mutable game state lives in a SimulationState. The functions here
mutate it; nothing in this module touches pygame, so a whole round can
be played out in tests with a seeded random source.

Frame order (step_frame):
    1. advance each object, test it against the avatar, cull it if it
       dropped below the playfield (newest first; a hit stops the frame)
    2. maybe spawn one object, if the round is active
    3. run the countdown and speed ramp, if the round is active
"""
from dataclasses import dataclass, field
from typing import List, Optional

from dodgefall import config
from dodgefall.entities import Avatar, FallingObject
from dodgefall.input.input_event import InputEvent
from dodgefall.logging import get_logger
from dodgefall.models import PointerAction, Resolution, RoundOutcome
from dodgefall.spawner import ObjectSpawner

log = get_logger('simulation')


@dataclass
class SimulationState:
    """Everything that changes while the game runs.

    Attributes:
        playfield: Current surface size
        avatar: The player's square
        objects: Falling objects in spawn order
        time_remaining: Countdown in time units, never negative
        speed_multiplier: Difficulty scale, only grows during a round
        started: True from the first successful grab until reset
        duration: Countdown value restored on reset
        initial_speed_multiplier: Multiplier value restored on reset
        frame: Frames stepped since creation (diagnostics only)
    """
    playfield: Resolution
    avatar: Avatar = field(default_factory=Avatar)
    objects: List[FallingObject] = field(default_factory=list)
    time_remaining: float = config.ROUND_DURATION
    speed_multiplier: float = config.INITIAL_SPEED_MULTIPLIER
    started: bool = False
    duration: float = config.ROUND_DURATION
    initial_speed_multiplier: float = config.INITIAL_SPEED_MULTIPLIER
    frame: int = 0

    @property
    def width(self) -> int:
        return self.playfield.width

    @property
    def height(self) -> int:
        return self.playfield.height

    @property
    def is_active(self) -> bool:
        """A round is active once the avatar has been grabbed."""
        return self.started


def create_state(
    width: int,
    height: int,
    duration: float = config.ROUND_DURATION,
    initial_speed_multiplier: float = config.INITIAL_SPEED_MULTIPLIER,
    avatar_size: float = config.AVATAR_SIZE,
) -> SimulationState:
    """Build a fresh state with the avatar at its resting spot.

    Raises:
        pydantic.ValidationError: If width or height is not positive
        ValueError: If duration is not positive
    """
    if duration <= 0:
        raise ValueError(f"Round duration must be positive, got {duration}")

    state = SimulationState(
        playfield=Resolution(width=width, height=height),
        avatar=Avatar(size=avatar_size),
        time_remaining=duration,
        speed_multiplier=initial_speed_multiplier,
        duration=duration,
        initial_speed_multiplier=initial_speed_multiplier,
    )
    state.avatar.place_at_rest(width, height)
    return state


def reset(state: SimulationState) -> None:
    """Return to the pre-round state. Used identically after a win or a loss."""
    state.objects.clear()
    state.time_remaining = state.duration
    state.speed_multiplier = state.initial_speed_multiplier
    state.started = False
    state.avatar.place_at_rest(state.width, state.height)
    log.debug("Round reset")


def resize(state: SimulationState, width: int, height: int) -> None:
    """Adopt a new playfield size and pull the avatar back inside it.

    Raises:
        pydantic.ValidationError: If width or height is not positive
    """
    state.playfield = Resolution(width=width, height=height)
    state.avatar.clamp_to(width, height)
    log.debug("Playfield resized to %dx%d", width, height)


def apply_input(state: SimulationState, event: InputEvent) -> None:
    """Apply one pointer command to the simulation.

    GRAB only takes hold when it lands on the avatar, and the first such
    grab starts the round. MOVE is ignored unless a drag is in progress.
    """
    avatar = state.avatar

    if event.action == PointerAction.GRAB:
        if avatar.contains_point(event.position):
            avatar.dragging = True
            if not state.started:
                state.started = True
                log.info("Round started")

    elif event.action == PointerAction.MOVE:
        if avatar.dragging:
            avatar.center_on(event.position, state.width, state.height)

    elif event.action == PointerAction.RELEASE:
        avatar.dragging = False


def advance_objects(state: SimulationState) -> bool:
    """Move, collide and cull every falling object.

    Iterates newest-first so deleting the current index never skips
    or repeats an element.

    Returns:
        True as soon as an object overlaps the avatar; objects after it
        in iteration order are left untouched this frame.
    """
    avatar_rect = state.avatar.rect
    for i in range(len(state.objects) - 1, -1, -1):
        obj = state.objects[i]
        obj.advance()

        if avatar_rect.overlaps(obj.rect):
            return True

        if obj.is_below(state.height):
            del state.objects[i]

    return False


def spawn_objects(state: SimulationState, spawner: ObjectSpawner) -> Optional[FallingObject]:
    """Maybe add one object. Never spawns outside an active round."""
    if not state.is_active:
        return None
    if not spawner.should_spawn(state.speed_multiplier):
        return None

    obj = spawner.spawn(state.width, state.speed_multiplier)
    state.objects.append(obj)
    return obj


def tick_timer(state: SimulationState, time_step: float = config.TIME_STEP,
               speed_increment: float = config.SPEED_INCREMENT) -> bool:
    """Run the countdown and difficulty ramp for one frame.

    Returns:
        True if the countdown has reached zero in an active round
    """
    if not state.is_active:
        return False

    if state.time_remaining > 0:
        state.time_remaining = max(0.0, state.time_remaining - time_step)
        state.speed_multiplier += speed_increment

    return state.time_remaining <= 0


def step_frame(state: SimulationState, spawner: ObjectSpawner) -> RoundOutcome:
    """Advance the whole simulation by one frame.

    On a loss or a win the state is reset before returning, so the
    caller only has to tell the player what happened.

    Args:
        state: Simulation state to mutate
        spawner: Spawner used for this frame's roll

    Returns:
        RoundOutcome for this frame
    """
    state.frame += 1

    if advance_objects(state):
        log.info("Collision on frame %d with %.1f left", state.frame, state.time_remaining)
        reset(state)
        return RoundOutcome.LOST

    spawn_objects(state, spawner)

    if tick_timer(state):
        log.info("Countdown finished on frame %d", state.frame)
        reset(state)
        return RoundOutcome.WON

    return RoundOutcome.NONE
