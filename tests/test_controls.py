import pygame
import pytest

from tetrix.controls import Action, process_event


@pytest.mark.parametrize(
    "key, action",
    [
        (pygame.K_a, Action.MOVE_LEFT),
        (pygame.K_d, Action.MOVE_RIGHT),
        (pygame.K_s, Action.DROP),
        (pygame.K_w, Action.ROTATE),
        (pygame.K_q, Action.QUIT),
    ],
)
def test_key_presses_map_to_actions(key, action):
    event = pygame.event.Event(pygame.KEYDOWN, key=key)
    assert process_event(event) is action


def test_other_key_is_none():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z)
    assert process_event(event) is Action.NONE


def test_key_release_is_none():
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_a)
    assert process_event(event) is Action.NONE


def test_non_key_event_is_none():
    event = pygame.event.Event(pygame.QUIT)
    assert process_event(event) is Action.NONE