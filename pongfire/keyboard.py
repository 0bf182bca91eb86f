"""Keyboard state tracking for the match."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

import pygame


class Key(IntEnum):
    W = 0
    S = 1
    UP = 2
    DOWN = 3
    ENTER = 4
    ESC = 5


_HELD_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}
_RELEASE_KEYS = {
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESC,
}
_ONE_SHOT = frozenset({Key.ENTER, Key.ESC})


class Keyboard:
    """Maps key events to game commands.

    Movement keys are held while pressed; ENTER and ESC fire once on release.
    """

    def __init__(self) -> None:
        self._keys = dict.fromkeys(Key, False)

    def update(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                key = _HELD_KEYS.get(event.key)
                if key is not None:
                    self._keys[key] = True
            elif event.type == pygame.KEYUP:
                if event.key in _RELEASE_KEYS:
                    self._keys[_RELEASE_KEYS[event.key]] = True
                elif event.key in _HELD_KEYS:
                    self._keys[_HELD_KEYS[event.key]] = False

    def pressed(self, key: Key) -> bool:
        """Report a key; reading ENTER or ESC consumes it."""
        value = self._keys[key]
        if key in _ONE_SHOT:
            self._keys[key] = False
        return value

    def reset(self) -> None:
        for key in self._keys:
            self._keys[key] = False