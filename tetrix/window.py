"""A thin window wrapper around the pygame display."""

from __future__ import annotations

import pygame

_BLACK = (0, 0, 0)


class Window:
    """The game window: a display surface plus event polling."""

    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.display.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.title = title
        self._open = True

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def is_open(self) -> bool:
        """Tell whether the window has not been closed yet."""
        return self._open

    def clear(self) -> None:
        """Fill the window with black."""
        if self._open:
            self.surface.fill(_BLACK)

    def display(self) -> None:
        """Show what has been drawn since the last clear."""
        if self._open:
            pygame.display.flip()

    def poll_event(self):
        """Return the next pending event, or None when there is none."""
        if not self._open:
            return None
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return None
        return event

    def close(self) -> None:
        """Close the window; later calls do nothing."""
        if self._open:
            self._open = False
            pygame.display.quit()