"""Keyboard polling and player movement with canvas clamping."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import pygame

from .constants import PLAYER_SPEED
from .models import DirectionInput, Player


def direction_from_keys(pressed: Sequence[bool]) -> DirectionInput:
    """
    Build a DirectionInput from pygame.key.get_pressed().

    Arrow keys and WASD are aliases of each other.
    """
    return DirectionInput(
        right=bool(pressed[pygame.K_RIGHT] or pressed[pygame.K_d]),
        left=bool(pressed[pygame.K_LEFT] or pressed[pygame.K_a]),
        up=bool(pressed[pygame.K_UP] or pressed[pygame.K_w]),
        down=bool(pressed[pygame.K_DOWN] or pressed[pygame.K_s]),
    )


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def move_player(player: Player, direction: DirectionInput, width: float, height: float,
                speed: float = PLAYER_SPEED) -> Player:
    """
    Move the player one frame and keep it fully inside the canvas.

    Parameters
    ----------
    player : Player
        Player before the move
    direction : DirectionInput
        Directions held this frame; opposite keys cancel, diagonals add up
    width, height : float
        Current canvas size
    speed : float
        Distance per held direction per frame

    Returns
    -------
    Player
        Player with the new, clamped position
    """
    x, y = player.x, player.y
    if direction.right:
        x += speed
    if direction.left:
        x -= speed
    if direction.up:
        y -= speed
    if direction.down:
        y += speed

    r = player.radius
    return replace(player, x=clamp(x, r, width - r), y=clamp(y, r, height - r))
