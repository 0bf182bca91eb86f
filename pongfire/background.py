"""The tiled playfield background: grass framed by rock and dirt."""

from __future__ import annotations

from typing import Iterator

import pygame

TILE_SIZE = 64


def _scaled(texture: pygame.Surface | None) -> pygame.Surface | None:
    if texture is None:
        return None
    return pygame.transform.scale(texture, (TILE_SIZE, TILE_SIZE))


class Background:
    """Grass inside, rock along the top and bottom, dirt down both sides."""

    def __init__(self, width: int, height: int, grass: pygame.Surface | None = None,
                 dirt: pygame.Surface | None = None,
                 rock: pygame.Surface | None = None) -> None:
        self.width = width
        self.height = height
        self._textures = {
            "grass": _scaled(grass),
            "dirt": _scaled(dirt),
            "rock": _scaled(rock),
        }

    def tiles(self) -> Iterator[tuple[str, tuple[int, int]]]:
        """Yield ``(kind, (x, y))`` for every tile, in drawing order."""
        columns = self.width // TILE_SIZE
        rows = self.height // TILE_SIZE
        width_rest = self.width % TILE_SIZE
        height_rest = self.height % TILE_SIZE

        inner_rows = range(1, rows - (1 if width_rest > 0 else 0))
        inner_columns = range(1, columns - (1 if height_rest > 0 else 0))

        for i in inner_rows:
            for j in inner_columns:
                yield "grass", (TILE_SIZE * j, TILE_SIZE * i)

        for j in inner_columns:
            yield "rock", (TILE_SIZE * j, 0)
            yield "rock", (TILE_SIZE * j, self.height - TILE_SIZE)

        for i in range(rows + (1 if width_rest > 0 else 0) + 1):
            yield "dirt", (0, TILE_SIZE * i)
            yield "dirt", (self.width - TILE_SIZE, TILE_SIZE * i)

    def draw(self, surface: pygame.Surface) -> None:
        for kind, position in self.tiles():
            texture = self._textures[kind]
            if texture is not None:
                surface.blit(texture, position)