"""A player's score counter shown on screen."""

from __future__ import annotations

from typing import Any

import pygame

from pongfire.vec import Vec

WHITE = (0xFF, 0xFF, 0xFF, 0xFF)


class PlayerScore:
    """A score drawn with its top-left corner at ``position``."""

    def __init__(self, font: Any, position: Vec, sound: Any = None) -> None:
        self._font = font
        self.position = position
        self._sound = sound
        self._score = 0
        self.rect = pygame.Rect(int(position.x), int(position.y), 0, 0)
        self._render()

    def _render(self) -> None:
        self._image = self._font.render(str(self._score), False, WHITE)
        self.rect.size = self._image.get_size()

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self._image, self.rect)

    def increase(self) -> None:
        """Add a point and play the scoring sound."""
        if self._sound is not None:
            self._sound.play()
        self._score += 1
        self._render()

    def reset(self) -> None:
        self._score = 0
        self._render()

    def score(self) -> int:
        return self._score