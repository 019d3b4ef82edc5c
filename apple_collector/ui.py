"""HUD: current score and best-score record"""

import pygame

from .constants import (
    BEST_LINE_GAP, BEST_TEXT_COLOR, SCORE_POS, TEXT_COLOR
)
from .models import BestScore


class HUD:
    """Heads-Up Display in the top-left corner."""

    def __init__(self, font: pygame.font.Font, small_font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = small_font

    def draw(self, surf: pygame.Surface, score: int, best: BestScore) -> None:
        """Render the score with the best record underneath."""
        x, baseline = SCORE_POS
        score_text = self.font.render(f"Score: {score}", True, TEXT_COLOR)
        # SCORE_POS is the text baseline, blit wants the top-left corner
        score_rect = score_text.get_rect(bottomleft=(x, baseline))
        surf.blit(score_text, score_rect)

        best_text = self.small_font.render(f"Best: {best.score} ({best.time:.1f}s)", True, BEST_TEXT_COLOR)
        surf.blit(best_text, (x, score_rect.bottom + BEST_LINE_GAP))
