"""Paddles driven by a player or by the computer."""

from __future__ import annotations

from enum import IntEnum

import pygame

from pongfire.ball import Ball
from pongfire.collision import Collision, Contact, Side
from pongfire.vec import Vec

PADDLE_WIDTH = 30
PADDLE_HEIGHT = 120
PADDLE_SPEED = 1.0
CPU_UP_FACTOR = 0.9
CPU_RAMP_MS = 400
CPU_RAMP_BASE = 0.6


class PlayerKind(IntEnum):
    PERSON = 0
    CPU = 1


class PaddleMotion(IntEnum):
    STILL = 0
    UP = 1
    DOWN = 2


class Paddle:
    """A paddle centred at ``(x, y)`` on creation and on reset."""

    def __init__(self, paddle_id: int, x: float, y: float,
                 texture: pygame.Surface | None = None) -> None:
        self.paddle_id = paddle_id
        self.kind = PlayerKind.PERSON
        self.motion = PaddleMotion.STILL
        self.position = Vec(x - PADDLE_WIDTH / 2, y - PADDLE_HEIGHT / 2)
        self.velocity = Vec()
        self._motion_start: int | None = None
        self._draw_x = int(self.position.x)
        self._texture = (
            pygame.transform.scale(texture, (PADDLE_WIDTH, PADDLE_HEIGHT))
            if texture is not None
            else None
        )

    def _vertices(self) -> tuple[float, float, float, float]:
        return (
            self.position.x,
            self.position.x + PADDLE_WIDTH,
            self.position.y,
            self.position.y + PADDLE_HEIGHT,
        )

    def draw(self, surface: pygame.Surface) -> None:
        if self._texture is not None:
            surface.blit(self._texture, (self._draw_x, int(self.position.y)))

    def apply_manual_velocity(self, up: bool, down: bool) -> None:
        if self.kind is PlayerKind.CPU:
            return
        if up:
            self.velocity.y = -PADDLE_SPEED
        elif down:
            self.velocity.y = PADDLE_SPEED
        else:
            self.velocity.y = 0.0

    def apply_cpu_velocity(self, elapsed: int, ball: Ball) -> None:
        """Follow the ball; going down starts slow and speeds up over 400 ms."""
        if self.kind is PlayerKind.PERSON:
            return
        ball_vertices = ball.vertices()
        vertices = self._vertices()

        if vertices[Side.TOP] > ball_vertices[Side.BOTTOM]:
            self.motion = PaddleMotion.UP
            self.velocity.y = -PADDLE_SPEED * CPU_UP_FACTOR
        elif vertices[Side.BOTTOM] < ball_vertices[Side.TOP]:
            if self.motion is not PaddleMotion.DOWN:
                self.motion = PaddleMotion.DOWN
                self._motion_start = elapsed
            since = elapsed - self._motion_start
            if since > CPU_RAMP_MS:
                self.velocity.y = PADDLE_SPEED
            else:
                self.velocity.y = PADDLE_SPEED * (since / 1000.0 + CPU_RAMP_BASE)
        else:
            self.velocity.y = 0.0

    def update(self, dt: float, height: int) -> None:
        self.position += self.velocity * dt
        if self.position.y < 0:
            self.position.y = 0.0
        elif self.position.y > height - PADDLE_HEIGHT:
            self.position.y = float(height - PADDLE_HEIGHT)

    def reset(self, x: float, y: float, kind: PlayerKind | None = None) -> None:
        if kind is not None:
            self.kind = kind
        self.velocity = Vec()
        self.motion = PaddleMotion.STILL
        self._motion_start = None
        self.position = Vec(x - PADDLE_WIDTH / 2, y - PADDLE_HEIGHT / 2)
        self._draw_x = int(self.position.x)

    def collide(self, ball: Ball) -> None:
        """Send the ball back if it overlaps, angled by the third of the paddle hit."""
        ball_vertices = ball.vertices()
        vertices = self._vertices()

        if (
            ball_vertices[Side.LEFT] > vertices[Side.RIGHT]
            or ball_vertices[Side.RIGHT] < vertices[Side.LEFT]
            or ball_vertices[Side.TOP] > vertices[Side.BOTTOM]
            or ball_vertices[Side.BOTTOM] < vertices[Side.TOP]
        ):
            return

        contact = Contact(id=self.paddle_id)
        upper_limit = vertices[Side.BOTTOM] - 2.0 * PADDLE_HEIGHT / 3.0
        middle_limit = vertices[Side.BOTTOM] - PADDLE_HEIGHT / 3.0

        ball_vx = ball.velocity.x
        if ball_vx < 0:
            contact.penetration = vertices[Side.RIGHT] - ball_vertices[Side.LEFT]
        elif ball_vx > 0:
            contact.penetration = vertices[Side.LEFT] - ball_vertices[Side.RIGHT]

        ball_bottom = ball_vertices[Side.BOTTOM]
        if vertices[Side.TOP] < ball_bottom < upper_limit:
            contact.kind = Collision.TOP
        elif upper_limit <= ball_bottom <= middle_limit:
            contact.kind = Collision.CENTER
        else:
            contact.kind = Collision.BOTTOM

        ball.collide(contact)