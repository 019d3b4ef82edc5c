"""Lightweight data models used across the game."""

from dataclasses import dataclass

from .constants import PLAYER_RADIUS


@dataclass(frozen=True)
class Apple:
    """
    A collectible apple.

    Attributes
    ----------
    pos : tuple[float, float]
        The (x, y) center of the apple on the canvas.
    """
    pos: tuple[float, float]


@dataclass(frozen=True)
class Player:
    """
    Pacman: position, size and mouth animation state.

    Attributes
    ----------
    x, y : float
        Center position in canvas coordinates.
    radius : float
        Body radius, also used for bounds clamping and collisions.
    mouth_open : bool
        True while the mouth animation is playing.
    mouth_timer : float
        Seconds left in the mouth animation; 0 when the mouth is closed.
    """
    x: float
    y: float
    radius: float = PLAYER_RADIUS
    mouth_open: bool = False
    mouth_timer: float = 0.0


@dataclass(frozen=True)
class DirectionInput:
    """Directions held down during one frame."""
    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False


@dataclass(frozen=True)
class BestScore:
    """The best score ever reached and the session time it was reached at."""
    score: int = 0
    time: float = 0.0
