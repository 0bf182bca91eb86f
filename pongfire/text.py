"""Text labels rendered with a font and anchored by an alignment."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

import pygame

from pongfire.vec import Vec

WHITE = (0xFF, 0xFF, 0xFF, 0xFF)


class Alignment(IntEnum):
    """Which point of the text sits on its position's x coordinate."""

    LEFT = 0
    RIGHT = 1
    CENTER = 2


class Text:
    """A single line of text, vertically centred on its position.

    ``font`` is anything with a pygame-style ``render(text, antialias, color)``.
    """

    def __init__(self, font: Any, text: str, alignment: Alignment = Alignment.LEFT,
                 position: Vec | None = None) -> None:
        self._font = font
        self.alignment = Alignment(alignment)
        self.position = position if position is not None else Vec()
        self.text = text
        self._image = self._render(WHITE)
        self.rect = self._place()

    def _render(self, color: Any) -> pygame.Surface:
        return self._font.render(self.text, False, color)

    def _place(self) -> pygame.Rect:
        width, height = self._image.get_size()
        offset = (0, width, width // 2)[self.alignment]
        return pygame.Rect(
            int(self.position.x) - offset,
            int(self.position.y) - height // 2,
            width,
            height,
        )

    def update(self, text: str) -> None:
        """Replace the text, render it in white and re-anchor it."""
        self.text = text
        self._image = self._render(WHITE)
        self.rect = self._place()

    def set_color(self, color: Any) -> None:
        """Render the current text in ``color``; the placement is kept."""
        self._image = self._render(color)

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self._image, self.rect)