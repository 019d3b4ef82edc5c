"""Game state and the per-frame transition."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .apple import collect_apples
from .constants import PLAYER_START, TARGET_APPLES
from .models import Apple, DirectionInput, Player
from .movement import move_player
from .pacman import open_mouth, tick_mouth
from .spawner import Spawner


@dataclass(frozen=True)
class GameState:
    """
    Everything that changes while playing.

    Attributes
    ----------
    player : Player
        Pacman's position and mouth animation
    apples : tuple[Apple, ...]
        Apples on the field, never more than the spawner's target
    score : int
        Apples collected this session
    spawn_timer : float
        Seconds since the last spawn
    elapsed : float
        Seconds since the session started
    """
    player: Player
    apples: tuple[Apple, ...] = field(default_factory=tuple)
    score: int = 0
    spawn_timer: float = 0.0
    elapsed: float = 0.0


def new_game(width: float, height: float, spawner: Spawner, apples: int = TARGET_APPLES) -> GameState:
    """Fresh session: Pacman at the start position and `apples` random apples."""
    start = move_player(Player(*PLAYER_START), DirectionInput(), width, height)
    return GameState(player=start, apples=spawner.initial_apples(width, height, apples))


def step(state: GameState, direction: DirectionInput, dt: float,
         width: float, height: float, spawner: Spawner) -> GameState:
    """
    Advance the game by one frame.

    Order: movement, mouth countdown, collisions, spawning. Collisions
    are checked before the spawner runs, so an apple spawned this frame can
    only be collected next frame.

    Parameters
    ----------
    state : GameState
        State at the start of the frame
    direction : DirectionInput
        Directions held this frame
    dt : float
        Frame delta in seconds
    width, height : float
        Current canvas size
    spawner : Spawner
        Source of new apple positions

    Returns
    -------
    GameState
        State at the end of the frame
    """
    player = move_player(state.player, direction, width, height)
    player = tick_mouth(player, dt)

    apples, collected = collect_apples(player, state.apples)
    if collected:
        player = open_mouth(player)

    apples, spawn_timer = spawner.maybe_spawn(apples, state.spawn_timer, dt, width, height)

    return replace(
        state,
        player=player,
        apples=apples,
        score=state.score + collected,
        spawn_timer=spawn_timer,
        elapsed=state.elapsed + dt,
    )
