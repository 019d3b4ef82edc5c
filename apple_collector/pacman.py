"""
Pacman's mouth animation and rendering.

States:
- CLOSED: plain filled disc.
- OPEN:   disc with a wedge cut out, for MOUTH_OPEN_S seconds after a
          collection.

The timer is driven by frame delta seconds.
"""

from __future__ import annotations

import math
from dataclasses import replace

import pygame

from .constants import (
    MOUTH_ANGLE_DEG,
    MOUTH_COLOR,
    MOUTH_LOWER_EDGE,
    MOUTH_OPEN_S,
    MOUTH_UPPER_EDGE,
    PACMAN_COLOR,
)
from .models import Player


def open_mouth(player: Player) -> Player:
    """Start (or restart) the mouth animation. Repeated calls do not stack."""
    return replace(player, mouth_open=True, mouth_timer=MOUTH_OPEN_S)


def tick_mouth(player: Player, dt: float) -> Player:
    """
    Count the mouth timer down by `dt` and close the mouth when it runs out.

    Parameters
    ----------
    player : Player
        Current player
    dt : float
        Frame delta in seconds

    Returns
    -------
    Player
        Player with mouth_open True iff mouth_timer > 0
    """
    if not player.mouth_open:
        return replace(player, mouth_timer=0.0) if player.mouth_timer else player
    timer = player.mouth_timer - dt
    if timer <= 0:
        return replace(player, mouth_open=False, mouth_timer=0.0)
    return replace(player, mouth_timer=timer)


def mouth_triangle(player: Player) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
    """
    Vertices of the mouth wedge: center, upper edge, lower edge.

    The edges have uneven lengths (1.7r and 1.3r); the wedge is purely
    visual and plays no part in collisions.
    """
    r = player.radius
    start = math.radians(MOUTH_ANGLE_DEG)
    end = math.radians(360.0 - MOUTH_ANGLE_DEG)
    return (
        (player.x, player.y),
        (player.x + r * MOUTH_UPPER_EDGE * math.cos(start), player.y + r * MOUTH_UPPER_EDGE * math.sin(start)),
        (player.x + r * MOUTH_LOWER_EDGE * math.cos(end), player.y + r * MOUTH_LOWER_EDGE * math.sin(end)),
    )


def draw_pacman(surf: pygame.Surface, player: Player) -> None:
    pygame.draw.circle(surf, PACMAN_COLOR, (player.x, player.y), player.radius)
    if player.mouth_open:
        pygame.draw.polygon(surf, MOUTH_COLOR, mouth_triangle(player))
