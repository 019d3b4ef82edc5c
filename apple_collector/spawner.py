from __future__ import annotations

import random

from .constants import SPAWN_COOLDOWN_S, SPAWN_MARGIN, TARGET_APPLES
from .models import Apple


class Spawner:
    """
    Responsible for placing apples at random positions, rate-limited by a
    cooldown.

    Notes
    - Timing uses frame delta seconds, accumulated every frame.
    - At most one apple appears per cooldown window; the field is not topped
      up to the target count in one go.
    """

    def __init__(self, rng: random.Random | None = None, target: int = TARGET_APPLES,
                 cooldown_s: float = SPAWN_COOLDOWN_S, margin: float = SPAWN_MARGIN) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.target = target
        self.cooldown_s = cooldown_s
        self.margin = margin

    def random_position(self, width: float, height: float) -> tuple[float, float]:
        """Uniform position at least `margin` units away from every edge."""
        return (
            self.rng.uniform(self.margin, width - self.margin),
            self.rng.uniform(self.margin, height - self.margin),
        )

    def initial_apples(self, width: float, height: float, count: int | None = None) -> tuple[Apple, ...]:
        """Apples present at the start of a session."""
        count = self.target if count is None else min(count, self.target)
        return tuple(Apple(self.random_position(width, height)) for _ in range(count))

    def maybe_spawn(self, apples: tuple[Apple, ...], spawn_timer: float, dt: float,
                    width: float, height: float) -> tuple[tuple[Apple, ...], float]:
        """
        Advance the spawn timer and add one apple if the cooldown has passed.

        Parameters
        ----------
        apples : tuple[Apple, ...]
            Apples currently on the field
        spawn_timer : float
            Seconds since the last spawn
        dt : float
            Frame delta in seconds
        width, height : float
            Current canvas size

        Returns
        -------
        tuple[tuple[Apple, ...], float]
            The (possibly extended) apples and the new spawn timer
        """
        spawn_timer += dt
        if len(apples) < self.target and spawn_timer > self.cooldown_s:
            apples = apples + (Apple(self.random_position(width, height)),)
            spawn_timer = 0.0
        return apples, spawn_timer
