"""
Tests for the players package - keyboard and random input sources.
"""

import os
import random
import sys
from collections import defaultdict

import pygame
import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import Direction, GameStatus
from domain.game_state import GameState
from domain.position import Position
from players import KeyboardPlayer, Player, RandomPlayer


def make_state(snake_body, direction=Direction.RIGHT, width=10, height=10):
    return GameState(
        tick=0,
        snake_body=[Position(*cell) for cell in snake_body],
        direction=direction,
        apple=Position(width - 1, height - 1),
        status=GameStatus.IN_PROGRESS,
        width=width,
        height=height,
    )


def keys(*held):
    return lambda: defaultdict(bool, {key: True for key in held})


class TestPlayerBase:
    """Tests for the Player interface."""

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(0, 0)]))


class TestKeyboardPlayer:
    """Tests for the KeyboardPlayer class."""

    @pytest.mark.parametrize("key, direction", [
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_UP, Direction.UP),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_DOWN, Direction.DOWN),
    ])
    def test_single_key(self, key, direction):
        player = KeyboardPlayer(key_state=keys(key))
        assert player.get_move(make_state([(0, 0)])) == direction

    def test_no_key_returns_none(self):
        player = KeyboardPlayer(key_state=keys())
        assert player.get_move(make_state([(0, 0)])) is None

    def test_other_keys_are_ignored(self):
        player = KeyboardPlayer(key_state=keys(pygame.K_SPACE, pygame.K_a))
        assert player.get_move(make_state([(0, 0)])) is None

    @pytest.mark.parametrize("held, expected", [
        ((pygame.K_DOWN, pygame.K_LEFT), Direction.LEFT),
        ((pygame.K_RIGHT, pygame.K_UP), Direction.UP),
        ((pygame.K_DOWN, pygame.K_RIGHT), Direction.RIGHT),
        ((pygame.K_LEFT, pygame.K_UP, pygame.K_RIGHT, pygame.K_DOWN), Direction.LEFT),
    ])
    def test_precedence_left_up_right_down(self, held, expected):
        player = KeyboardPlayer(key_state=keys(*held))
        assert player.get_move(make_state([(0, 0)])) == expected


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(0))
        move = player.get_move(make_state([(5, 5)]))
        assert move in set(Direction)

    def test_random_player_avoids_walls_when_possible(self):
        player = RandomPlayer(rng=random.Random(1))
        # Snake in top-left corner facing right - only RIGHT and DOWN are safe
        state = make_state([(0, 0)])

        for _ in range(20):
            move = player.get_move(state)
            assert move in {Direction.RIGHT, Direction.DOWN}, f"Expected RIGHT or DOWN, got {move}"

    def test_random_player_never_reverses(self):
        player = RandomPlayer(rng=random.Random(2))
        state = make_state([(5, 5)], direction=Direction.UP)

        for _ in range(20):
            assert player.get_move(state) != Direction.DOWN

    def test_random_player_avoids_self_collision(self):
        player = RandomPlayer(rng=random.Random(3))
        # Head at (5,5) facing RIGHT with body curling above it
        state = make_state([(5, 5), (4, 5), (4, 4), (5, 4), (6, 4)])

        for _ in range(20):
            move = player.get_move(state)
            assert move in {Direction.RIGHT, Direction.DOWN}

    def test_random_player_may_enter_tail_cell(self):
        player = RandomPlayer(rng=random.Random(4))
        # Tail at (5,4) moves away this tick, so UP is safe
        state = make_state([(5, 5), (4, 5), (4, 4), (5, 4)], width=6, height=6)

        moves = {player.get_move(state) for _ in range(50)}
        assert Direction.UP in moves

    def test_random_player_trapped_still_moves(self):
        player = RandomPlayer(rng=random.Random(5))
        # 2x1 board, head on the right edge facing right, body behind
        state = make_state([(1, 0), (0, 0), (0, 1)], width=2, height=1)
        assert player.get_move(state) in set(Direction)
