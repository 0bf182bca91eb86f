"""A pong match: the court, its rules and its clock."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Callable, Iterable

import pygame

from pongfire.background import Background
from pongfire.ball import Ball
from pongfire.collision import Collision
from pongfire.config import assets_path
from pongfire.keyboard import Key, Keyboard
from pongfire.paddle import Paddle, PlayerKind
from pongfire.results import MatchOutcome, Result
from pongfire.score import PlayerScore
from pongfire.text import Alignment, Text
from pongfire.vec import Vec

log = logging.getLogger(__name__)

MAX_TIME_MS = 120_000
MAX_SCORE = 7
PADDLE_MARGIN = 50.0
BLACK = (0x0, 0x0, 0x0, 0xFF)
WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
RED = (255, 0, 0, 255)


class PongState(IntEnum):
    SERVE = 0
    PLAYING = 1
    PAUSED = 2
    FINISHED = 3


def _load_image(name: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(assets_path(name))
    except (pygame.error, OSError) as exc:
        log.warning("Could not load image %s: %s", name, exc)
        return None


def _load_sound(name: str) -> Any:
    try:
        return pygame.mixer.Sound(assets_path(name))
    except (pygame.error, OSError) as exc:
        log.warning("Could not load sound %s: %s", name, exc)
        return None


class PongMatch:
    """One match drawn on ``screen``; ``clock`` returns milliseconds."""

    def __init__(self, screen: pygame.Surface, score_font: Any,
                 clock: Callable[[], int] = pygame.time.get_ticks) -> None:
        self._screen = screen
        self._clock = clock
        self._width, self._height = screen.get_size()
        width, height = self._width, self._height

        self._state = PongState.FINISHED
        self._pre_pause_state = PongState.FINISHED
        self._start_time = 0
        self._pause_time = 0
        self._result = Result()

        self.background = Background(
            width, height,
            _load_image("pasto.webp"),
            _load_image("tierra.webp"),
            _load_image("roca.webp"),
        )
        self.ball = Ball(width / 2, height / 2, _load_image("fuego.webp"),
                         _load_sound("short-fire-whoosh_1-317280.mp3"))
        self.paddle1 = Paddle(1, PADDLE_MARGIN, height / 2, _load_image("basalto.webp"))
        self.paddle2 = Paddle(2, width - PADDLE_MARGIN, height / 2,
                              _load_image("basalto.webp"))
        score_sound = _load_sound("success-340660.mp3")
        self.score1 = PlayerScore(score_font, Vec(width // 4, 20), score_sound)
        self.score2 = PlayerScore(score_font, Vec(3 * width // 4, 20), score_sound)
        self.keyboard = Keyboard()
        self.counter = Text(score_font, "0.00s", Alignment.CENTER, Vec(width // 2, 40))

    def _elapsed(self) -> int:
        return self._clock() - self._start_time

    def running(self) -> bool:
        return self._state in (PongState.SERVE, PongState.PLAYING)

    def update_inputs(self, events: Iterable[pygame.event.Event]) -> None:
        """Feed key events: ENTER serves, ESC pauses."""
        self.keyboard.update(events)
        if self.keyboard.pressed(Key.ENTER) and self._state is PongState.SERVE:
            self._state = PongState.PLAYING
        if self.keyboard.pressed(Key.ESC):
            self.pause(True)

    def recalculate(self, delta_time: float) -> None:
        """Advance the match by ``delta_time`` milliseconds."""
        if self._state is PongState.PAUSED:
            return
        self.counter.update(f"{self._elapsed() / 1000.0:.2f}s")

        if self._state is PongState.SERVE:
            # Serving is part of the match, so the time limit still applies.
            self._check_end()
            return

        keys = self.keyboard
        self.paddle1.apply_manual_velocity(keys.pressed(Key.W), keys.pressed(Key.S))
        self.paddle2.apply_manual_velocity(keys.pressed(Key.UP), keys.pressed(Key.DOWN))
        self.paddle2.apply_cpu_velocity(self._elapsed(), self.ball)

        self.paddle1.update(delta_time, self._height)
        self.paddle2.update(delta_time, self._height)
        self.ball.update(delta_time)

        self.paddle1.collide(self.ball)
        self.paddle2.collide(self.ball)

        contact = self.ball.collide_with_walls(self._width, self._height)
        if contact.kind in (Collision.LEFT, Collision.RIGHT):
            scorer = self.score2 if contact.kind is Collision.LEFT else self.score1
            scorer.increase()
            self.paddle1.reset(PADDLE_MARGIN, self._height / 2)
            self.paddle2.reset(self._width - PADDLE_MARGIN, self._height / 2)
            self._state = PongState.SERVE

        self._check_end()

    def _draw_net(self) -> None:
        middle = self._width // 2
        for y in range(0, self._height, 5):
            pygame.draw.line(self._screen, WHITE, (middle, y), (middle, y + 3))

    def draw(self) -> None:
        if self._state is PongState.PAUSED:
            return
        self._screen.fill(BLACK)
        self._width, self._height = self._screen.get_size()

        self.background.draw(self._screen)
        self._draw_net()
        self.ball.draw(self._screen)
        self.paddle1.draw(self._screen)
        self.paddle2.draw(self._screen)
        self.score1.draw(self._screen)
        self.score2.draw(self._screen)
        self.counter.draw(self._screen)

    def start(self, kind: PlayerKind) -> None:
        """Begin a new match; ``kind`` decides who drives the right paddle."""
        self._state = PongState.SERVE
        self._start_time = self._clock()
        self._pause_time = 0
        self.counter.update("0.00s")

        self.keyboard.reset()
        self.ball.reset(self._width / 2, self._height / 2)
        self.paddle1.reset(PADDLE_MARGIN, self._height / 2)
        self.paddle2.reset(self._width - PADDLE_MARGIN, self._height / 2, kind)
        self.score1.reset()
        self.score2.reset()

    def pause(self, paused: bool) -> None:
        """Pause or resume; time spent paused does not count."""
        if paused:
            self._pre_pause_state = self._state
            self._state = PongState.PAUSED
            self._pause_time = self._clock()
        else:
            self._state = self._pre_pause_state
            self.keyboard.reset()
            self._start_time += self._clock() - self._pause_time
            self._pause_time = 0

    def finish(self, cancelled: bool) -> None:
        """End the match and record its result."""
        paused_for = self._clock() - self._pause_time if self._pause_time > 0 else 0
        self._state = PongState.FINISHED

        p1 = self.score1.score()
        p2 = self.score2.score()
        if cancelled:
            outcome = MatchOutcome.QUIT
        elif p1 > p2:
            outcome = MatchOutcome.PLAYER_1
        elif p2 > p1:
            outcome = MatchOutcome.CPU
        else:
            outcome = MatchOutcome.DRAW

        self._result = Result(
            outcome=outcome,
            time=(self._clock() - (self._start_time + paused_for)) / 1000.0,
            player1=p1,
            player2=p2,
        )

    def _check_end(self) -> None:
        if (
            self.score1.score() == MAX_SCORE
            or self.score2.score() == MAX_SCORE
            or self._elapsed() >= MAX_TIME_MS
        ):
            self.finish(False)

    def last_result(self) -> Result:
        return self._result

    def state(self) -> PongState:
        return self._state


def red_window_render(surface: pygame.Surface) -> None:
    """Paint the whole surface red."""
    surface.fill(RED)