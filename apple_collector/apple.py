"""Apple collision checks and drawing."""

from __future__ import annotations

import math

import pygame

from .constants import APPLE_COLOR, APPLE_RADIUS, LEAF_COLOR, LEAF_OFFSET_Y, LEAF_RADIUS
from .models import Apple, Player


def is_collected(player: Player, apple: Apple) -> bool:
    """True if the apple overlaps Pacman's body."""
    ax, ay = apple.pos
    return math.hypot(player.x - ax, player.y - ay) < player.radius + APPLE_RADIUS


def collect_apples(player: Player, apples: tuple[Apple, ...]) -> tuple[tuple[Apple, ...], int]:
    """
    Remove every apple Pacman is touching.

    All apples are checked against the same player position, so removing one
    never changes the outcome for another.

    Returns
    -------
    tuple[tuple[Apple, ...], int]
        Remaining apples and how many were collected
    """
    remaining = tuple(a for a in apples if not is_collected(player, a))
    return remaining, len(apples) - len(remaining)


def draw_apple(surf: pygame.Surface, apple: Apple) -> None:
    x, y = apple.pos
    pygame.draw.circle(surf, APPLE_COLOR, (x, y), APPLE_RADIUS)
    # leaf
    pygame.draw.circle(surf, LEAF_COLOR, (x, y - LEAF_OFFSET_Y), LEAF_RADIUS)
