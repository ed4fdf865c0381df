import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from tetrix.window import Window


@pytest.fixture
def window():
    win = Window(120, 80, "Prueba")
    yield win
    win.close()


def _drain(win):
    events = []
    while (event := win.poll_event()) is not None:
        events.append(event)
    return events


def test_surface_has_requested_size(window):
    assert window.surface.get_size() == (120, 80)


def test_caption_is_title():
    win = Window(60, 50, "Titulo de prueba")
    try:
        assert win.is_open() is True
        assert win.surface.get_size() == (60, 50)
        assert pygame.display.get_caption()[0] == "Titulo de prueba"
    finally:
        win.close()


def test_clear_fills_black(window):
    window.surface.fill((255, 255, 255))
    window.clear()
    assert tuple(window.surface.get_at((10, 10)))[:3] == (0, 0, 0)


def test_close_marks_window_closed(window):
    assert window.is_open() is True
    window.close()
    assert window.is_open() is False
    window.close()
    assert window.is_open() is False


def test_poll_event_returns_posted_event(window):
    _drain(window)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    events = _drain(window)
    assert any(e.type == pygame.KEYDOWN and e.key == pygame.K_a for e in events)


def test_poll_event_after_close_is_none(window):
    window.close()
    assert window.poll_event() is None


def test_context_manager_closes():
    with Window(40, 40, "ctx") as win:
        assert win.is_open() is True
    assert win.is_open() is False