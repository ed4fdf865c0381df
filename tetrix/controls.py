"""Keyboard controls: A left, D right, S down, W rotate, Q quit."""

from __future__ import annotations

import enum

import pygame


class Action(enum.Enum):
    NONE = enum.auto()
    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    DROP = enum.auto()
    ROTATE = enum.auto()
    QUIT = enum.auto()


_KEY_ACTIONS: dict[int, Action] = {
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_s: Action.DROP,
    pygame.K_w: Action.ROTATE,
    pygame.K_q: Action.QUIT,
}


def process_event(event) -> Action:
    """Map a key press event to a game action; anything else is Action.NONE."""
    if event.type != pygame.KEYDOWN:
        return Action.NONE
    return _KEY_ACTIONS.get(getattr(event, "key", None), Action.NONE)