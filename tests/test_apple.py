"""Tests for apple_collector.apple."""

from __future__ import annotations

import pygame

from apple_collector.apple import collect_apples, draw_apple, is_collected
from apple_collector.constants import APPLE_COLOR, LEAF_COLOR
from apple_collector.models import Apple, Player


class TestIsCollected:
    """Tests for the distance check."""

    def test_same_position(self):
        assert is_collected(Player(100, 100), Apple((100, 100)))

    def test_just_inside_reach(self):
        assert is_collected(Player(100, 100), Apple((129.9, 100)))

    def test_touching_is_not_enough(self):
        assert not is_collected(Player(100, 100), Apple((130, 100)))

    def test_diagonal_distance_is_euclidean(self):
        # dx = dy = 20 -> ~28.3
        assert is_collected(Player(100, 100), Apple((120, 120)))
        # dx = dy = 22 -> ~31.1
        assert not is_collected(Player(100, 100), Apple((122, 122)))


class TestCollectApples:
    """Tests for the per-frame collection pass."""

    def test_nothing_in_reach(self):
        apples = (Apple((300, 300)), Apple((500, 500)))
        remaining, collected = collect_apples(Player(100, 100), apples)
        assert remaining == apples
        assert collected == 0

    def test_removes_only_touched_apples(self):
        far = Apple((500, 500))
        remaining, collected = collect_apples(Player(100, 100), (Apple((105, 100)), far))
        assert remaining == (far,)
        assert collected == 1

    def test_several_in_one_frame(self):
        apples = (Apple((95, 100)), Apple((105, 100)))
        remaining, collected = collect_apples(Player(100, 100), apples)
        assert remaining == ()
        assert collected == 2

    def test_duplicates_count_separately(self):
        apples = (Apple((100, 100)), Apple((100, 100)))
        _, collected = collect_apples(Player(100, 100), apples)
        assert collected == 2


class TestDrawApple:
    """Tests for apple rendering."""

    def test_body_and_leaf(self):
        surf = pygame.Surface((100, 100))
        draw_apple(surf, Apple((50, 50)))
        assert tuple(surf.get_at((50, 53)))[:3] == APPLE_COLOR
        assert tuple(surf.get_at((50, 40)))[:3] == LEAF_COLOR
        assert tuple(surf.get_at((5, 5)))[:3] == (0, 0, 0)
