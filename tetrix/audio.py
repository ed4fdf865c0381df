"""Background music playback."""

from __future__ import annotations

import os

import pygame


class Audio:
    """A music track loaded from a file, played at full volume."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        print(f"Intentando cargar el archivo de audio: {self.path}")
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(self.path)
        except (pygame.error, OSError) as exc:
            raise RuntimeError(
                f"No se pudo cargar el archivo de audio: {self.path}"
            ) from exc
        print("Archivo de audio cargado correctamente.")
        pygame.mixer.music.set_volume(1.0)

    def __repr__(self) -> str:
        return f"Audio(path={self.path!r})"

    def play(self) -> None:
        """Start playback and report whether it is running."""
        print("Reproduciendo audio...")
        pygame.mixer.music.play()
        if self.is_playing():
            print("El audio se está reproduciendo correctamente.")
        else:
            print("El audio no se está reproduciendo.")

    def is_playing(self) -> bool:
        """Tell whether the track is currently playing."""
        return bool(pygame.mixer.get_init()) and pygame.mixer.music.get_busy()

    def stop(self) -> None:
        """Stop playback if the mixer is running."""
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()