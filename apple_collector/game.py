"""Game entry point"""

from __future__ import annotations

import random

import pygame

from .apple import draw_apple
from .constants import *
from .logger import GameLogger
from .models import BestScore
from .movement import direction_from_keys
from .pacman import draw_pacman
from .persistence import load_best_score, update_best_score
from .spawner import Spawner
from .state import GameState, new_game, step
from .ui import HUD


class Game:
    """
    Main game controller: initializes subsystems, runs the loop, polls input,
    advances the state, persists the best score, and draws the frame.
    """

    def __init__(self, best_score_path: str = BEST_SCORE_FILE, log_path: str = LOG_FILE,
                 seed: int | None = None) -> None:
        """Initialize pygame, load the best score, and start a new session."""
        pygame.init()
        pygame.display.set_caption(TITLE)

        # Fixed size, not resizable
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_score = pygame.font.Font(FONT_NAME, FONT_SIZE_SCORE)
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        self.hud = HUD(self.font_score, self.font_small)

        self.best_score_path = best_score_path
        self.best: BestScore = load_best_score(best_score_path)
        self.logger = GameLogger(log_path, self.best)

        self.spawner = Spawner(random.Random(seed))
        width, height = self.screen.get_size()
        self.state: GameState = new_game(width, height, self.spawner)
        self.running = True
        self.dt = 0.0                   # seconds since the previous frame

    # --------------------------------- Loop -----------------------------------------

    def run(self, max_frames: int | None = None) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        frames = 0
        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.update(self.dt)
            self.draw()

            # Cap frame rate; the measured delta drives the next frame
            self.dt = self.clock.tick(FPS) / 1000.0

            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.running = False

        self.logger.log_session_end(self.state.score, self.state.elapsed)
        pygame.quit()

    # --------------------------------- Input ----------------------------------------

    def handle_events(self) -> None:
        """Window close and Esc end the session."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    # --------------------------------- Update ---------------------------------------

    def update(self, dt: float) -> None:
        """
        Advance one frame and persist a broken record.

        Parameters
        ----------
        dt : float
            Seconds since the previous frame
        """
        direction = direction_from_keys(pygame.key.get_pressed())
        # Canvas size is read every frame
        width, height = self.screen.get_size()
        previous = self.state.score
        self.state = step(self.state, direction, dt, width, height, self.spawner)

        collected = self.state.score - previous
        if collected:
            player = self.state.player
            self.logger.log_collect((player.x, player.y), collected, self.state.score, self.state.elapsed)

        best = update_best_score(self.best, self.state.score, self.state.elapsed, self.best_score_path)
        if best is not self.best:
            self.best = best
            self.logger.log_new_best(best)

    # --------------------------------- Rendering ------------------------------------

    def draw(self) -> None:
        """Compose the frame: bg → apples → pacman → HUD."""
        self.screen.fill(BG_COLOR)

        for apple in self.state.apples:
            draw_apple(self.screen, apple)
        draw_pacman(self.screen, self.state.player)

        self.hud.draw(self.screen, self.state.score, self.best)

        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
