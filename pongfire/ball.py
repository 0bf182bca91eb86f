"""The ball: movement, bouncing and scoring collisions."""

from __future__ import annotations

from typing import Any

import pygame

from pongfire.collision import Collision, Contact, Side
from pongfire.vec import Vec

BALL_WIDTH = 20
BALL_HEIGHT = 20
BALL_SPEED = 0.85
BOUNCE_FACTOR = 0.85
_SPRITE_OVERHANG = 12


class Ball:
    """A ball positioned by its top-left corner, centred at ``(x, y)`` on creation."""

    def __init__(self, x: float, y: float, texture: pygame.Surface | None = None,
                 sound: Any = None) -> None:
        self.position = Vec(x - BALL_WIDTH / 2, y - BALL_HEIGHT / 2)
        self._velocity = Vec(BALL_SPEED, 0.0)
        self._sound = sound
        self._texture = (
            pygame.transform.scale(texture, (BALL_WIDTH, BALL_HEIGHT + _SPRITE_OVERHANG))
            if texture is not None
            else None
        )
        self._contact_id = -1

    def _play(self) -> None:
        if self._sound is not None:
            self._sound.play()

    def draw(self, surface: pygame.Surface) -> None:
        if self._texture is None:
            return
        surface.blit(
            self._texture,
            (int(self.position.x), int(self.position.y) - _SPRITE_OVERHANG),
        )

    def update(self, dt: float) -> None:
        self.position += self._velocity * dt

    def vertices(self) -> tuple[float, float, float, float]:
        """Return ``(left, right, top, bottom)``; index it with :class:`Side`."""
        return (
            self.position.x,
            self.position.x + BALL_WIDTH,
            self.position.y,
            self.position.y + BALL_HEIGHT,
        )

    def collide(self, contact: Contact) -> None:
        """Bounce off a paddle; a second contact with the same paddle is ignored."""
        if self._contact_id == contact.id:
            return
        self._contact_id = contact.id
        self._play()

        self.position.x += contact.penetration
        self._velocity.x = -self._velocity.x

        if contact.kind is Collision.TOP:
            self._velocity.y = -BOUNCE_FACTOR * BALL_SPEED
        elif contact.kind is Collision.BOTTOM:
            self._velocity.y = BOUNCE_FACTOR * BALL_SPEED

    def reset(self, x: float, y: float) -> None:
        self._velocity = Vec(BALL_SPEED, 0.0)
        self.position = Vec(x - BALL_WIDTH / 2, y - BALL_HEIGHT / 2)
        self._contact_id = -1

    def collide_with_walls(self, width: int, height: int) -> Contact:
        """Bounce off the top and bottom; re-serve after leaving by a side."""
        vertices = self.vertices()
        contact = Contact()

        if vertices[Side.LEFT] < 0.0:
            contact.kind = Collision.LEFT
        elif vertices[Side.RIGHT] > width:
            contact.kind = Collision.RIGHT
        elif vertices[Side.TOP] < 0.0:
            contact.kind = Collision.TOP
            contact.penetration = -vertices[Side.TOP]
        elif vertices[Side.BOTTOM] > height:
            contact.kind = Collision.BOTTOM
            contact.penetration = height - vertices[Side.BOTTOM]

        if contact.kind is Collision.NONE:
            return contact

        self._contact_id = -1

        if contact.kind in (Collision.TOP, Collision.BOTTOM):
            self._play()
            self.position.y += contact.penetration
            self._velocity.y = -self._velocity.y
        else:
            self.position.x = (width - BALL_WIDTH) / 2
            self.position.y = (height - BALL_HEIGHT) / 2
            self._velocity.x = BALL_SPEED if contact.kind is Collision.LEFT else -BALL_SPEED
            self._velocity.y = BOUNCE_FACTOR * BALL_SPEED

        return contact

    @property
    def velocity(self) -> Vec:
        return Vec(self._velocity.x, self._velocity.y)