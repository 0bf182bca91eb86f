"""The fixed-rate loop that drives a match."""

from __future__ import annotations

from typing import Callable

import pygame

from pongfire.config import APP_FPS
from pongfire.pong import PongMatch

FRAME_TIME_MS = 1000.0 / APP_FPS


def clamp_delta(elapsed_ms: float) -> float:
    """Scale the ticks between frames by 1000 and cap the result at one frame."""
    return min(elapsed_ms * 1000.0, FRAME_TIME_MS)


def game_loop(screen: pygame.Surface, match: PongMatch,
              clock: Callable[[], int] = pygame.time.get_ticks) -> None:
    """Run input, update, draw and sleep until the match stops running."""
    current = clock()
    while match.running():
        match.update_inputs(pygame.event.get())

        now = clock()
        delta = clamp_delta(now - current)
        current = now

        match.recalculate(delta)
        match.draw()
        pygame.display.flip()

        pygame.time.delay(int(delta))