"""The application: menu, match, pause, results and ranking screens."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Iterator

import pygame

from pongfire.config import assets_path
from pongfire.game_loop import game_loop
from pongfire.paddle import PlayerKind
from pongfire.pong import PongMatch, PongState
from pongfire.results import MatchOutcome, Result, read_results, write_result
from pongfire.text import Alignment, Text
from pongfire.vec import Vec

log = logging.getLogger(__name__)

WINDOW_TITLE = "Pong"
VERSION_LABEL = "v1.0.4"
CREDITS = "Introduccion a la programacion, 2025."
SCREEN_DELAY_MS = 41

BLACK = (0x0, 0x0, 0x0, 0xFF)
SELECTED_OPTION = (0xAA, 0x44, 0x33, 0xFF)
NON_SELECTED_OPTION = (0xFF, 0xFF, 0xFF, 0xFF)

MENU_OPTIONS = ("Jugar Solo", "Jugar 1v1", "Ranking", "Salir")
MENU_SELECTED = ("JUGAR SOLO", "JUGAR 1v1", "RANKING", "SALIR")
MENU_OFFSETS = (-150, -50, 50, 150)

RANKING_HEADER = "| Resultado    | Jugador1     | Jugador2/CPU | Tiempo       |"
RANKING_RULE = "|==============|==============|==============|==============|"
_COLUMN_WIDTH = 12

_OUTCOME_LABELS = {
    MatchOutcome.QUIT: "Cancelada",
    MatchOutcome.DRAW: "Empate",
    MatchOutcome.CPU: "Victoria CPU",
    MatchOutcome.PLAYER_1: "Victoria P1",
    MatchOutcome.PLAYER_2: "Victoria P2",
}
_RANKING_LABELS = {
    MatchOutcome.QUIT: "Cancelada",
    MatchOutcome.DRAW: "Empate",
    MatchOutcome.PLAYER_1: "P1",
    MatchOutcome.CPU: "CPU",
    MatchOutcome.PLAYER_2: "P2",
}


class GameState(IntEnum):
    MENU = 0
    PLAY = 1
    PAUSE = 2
    FINISHED = 3
    RANKING = 4
    EXIT = 5


def create_window() -> pygame.Surface:
    """Open the full-screen game window."""
    screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    pygame.display.set_caption(WINDOW_TITLE)
    return screen


def outcome_label(outcome: MatchOutcome) -> str:
    """Describe how a match ended, as shown on the results screen."""
    return _OUTCOME_LABELS[MatchOutcome(outcome)]


def ranking_row(result: Result) -> str:
    """Format one result as a row of the ranking table."""
    cells = (
        _RANKING_LABELS[MatchOutcome(result.outcome)],
        str(result.player1),
        str(result.player2),
        f"{result.time:.2f}",
    )
    return "| " + " | ".join(cell.ljust(_COLUMN_WIDTH) for cell in cells) + " |"


def _key_releases() -> Iterator[int]:
    """Yield released keys; events not consumed stay queued."""
    while True:
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return
        if event.type == pygame.KEYUP:
            yield event.key


def _load_sound(name: str) -> Any:
    try:
        return pygame.mixer.Sound(assets_path(name))
    except (pygame.error, OSError) as exc:
        log.warning("Could not load sound %s: %s", name, exc)
        return None


def _play(sound: Any) -> None:
    if sound is not None:
        sound.play()


class Game:
    """Owns the window contents and switches between the game's screens."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.state = GameState.MENU

        icon = pygame.image.load(assets_path("logo.webp"))
        pygame.display.set_icon(icon)

        self._font = pygame.font.Font(assets_path("HurmitNerdFont-Bold.otf"), 40)
        self._author_font = pygame.font.Font(assets_path("HurmitNerdFont-Bold.otf"), 16)
        self._title_font = pygame.font.Font(assets_path("Blanka.otf"), 120)
        try:
            self._title_font.outline = 2
        except AttributeError:
            pass
        self._option_sound = _load_sound("radio-338296.mp3")
        self._select_sound = _load_sound("8-bit-victory-sound-101319.mp3")

        self.match = PongMatch(screen, self._font)

    def run(self) -> None:
        """Show screens until the player chooses to leave."""
        screens = {
            GameState.MENU: self.menu,
            GameState.PLAY: self.play,
            GameState.PAUSE: self.pause,
            GameState.FINISHED: self.finished,
            GameState.RANKING: self.ranking,
        }
        while self.state is not GameState.EXIT:
            screens[self.state]()

    def _present(self, texts: list[Text], clear: bool = True) -> None:
        if clear:
            self.screen.fill(BLACK)
        for text in texts:
            text.draw(self.screen)
        pygame.display.flip()
        pygame.time.delay(SCREEN_DELAY_MS)

    def menu(self) -> None:
        self.width, self.height = self.screen.get_size()
        width, height = self.width, self.height

        title = Text(self._title_font, "PONG", Alignment.CENTER, Vec(width // 2, 100))
        title.set_color(SELECTED_OPTION)
        credits = Text(self._author_font, CREDITS, Alignment.CENTER,
                       Vec(width // 2, height - 40))
        version = Text(self._author_font, VERSION_LABEL, Alignment.RIGHT, Vec(width, 10))

        options = [
            Text(self._font, label, Alignment.CENTER, Vec(width // 2, height // 2 + offset))
            for label, offset in zip(MENU_OPTIONS, MENU_OFFSETS)
        ]

        def mark(index: int, selected: bool) -> None:
            labels = MENU_SELECTED if selected else MENU_OPTIONS
            options[index].update(labels[index])
            options[index].set_color(SELECTED_OPTION if selected else NON_SELECTED_OPTION)

        position = 0
        mark(position, True)

        while self.state is GameState.MENU:
            for key in _key_releases():
                if key in (pygame.K_UP, pygame.K_DOWN):
                    _play(self._option_sound)
                    mark(position, False)
                    step = -1 if key == pygame.K_UP else 1
                    position = (position + step) % len(options)
                    mark(position, True)
                elif key == pygame.K_RETURN:
                    _play(self._select_sound)
                    self._choose(position)
                    return
            self._present([title, credits, version, *options])

    def _choose(self, position: int) -> None:
        if position == 0:
            self.match.start(PlayerKind.CPU)
            self.state = GameState.PLAY
        elif position == 1:
            self.match.start(PlayerKind.PERSON)
            self.state = GameState.PLAY
        elif position == 2:
            self.state = GameState.RANKING
        else:
            self.state = GameState.EXIT

    def play(self) -> None:
        game_loop(self.screen, self.match)
        match_state = self.match.state()
        if match_state is PongState.PAUSED:
            self.state = GameState.PAUSE
        elif match_state is PongState.FINISHED:
            self.state = GameState.FINISHED

    def pause(self) -> None:
        width, height = self.width, self.height
        texts = [
            Text(self._font, "Apreta ENTER para continuar", Alignment.CENTER,
                 Vec(width // 2, height // 2 - 30)),
            Text(self._font, "o ESC para terminar la partida", Alignment.CENTER,
                 Vec(width // 2, height // 2 + 30)),
        ]
        while self.state is GameState.PAUSE:
            for key in _key_releases():
                if key == pygame.K_ESCAPE:
                    self.match.finish(True)
                    self.state = GameState.FINISHED
                    return
                if key == pygame.K_RETURN:
                    self.match.pause(False)
                    self.state = GameState.PLAY
                    return
            # The match frame stays visible underneath the pause message.
            self._present(texts, clear=False)

    def _save(self, result: Result) -> None:
        try:
            write_result(result)
        except OSError as exc:
            log.warning("Could not store the result: %s", exc)

    def finished(self) -> None:
        result = self.match.last_result()
        self._save(result)

        if result.outcome is MatchOutcome.QUIT:
            self.state = GameState.MENU
            return

        width, height = self.width, self.height
        left = width // 4
        top = height // 3 + 100
        texts = [
            Text(self._font, "Apreta ENTER o ESC para volver al menu.", Alignment.CENTER,
                 Vec(width // 2, height // 3 - 40)),
            Text(self._font, f"- Resultado:  {outcome_label(result.outcome)}.",
                 Alignment.LEFT, Vec(left, top)),
            Text(self._font, f"- Puntaje P1: {result.player1}.", Alignment.LEFT,
                 Vec(left, top + 40)),
            Text(self._font, f"- Puntaje P2: {result.player2}.", Alignment.LEFT,
                 Vec(left, top + 80)),
            Text(self._font, f"- Tiempo:     {result.time:.2f}seg.", Alignment.LEFT,
                 Vec(left, top + 120)),
        ]
        self._wait_for_menu(GameState.FINISHED, texts)

    def ranking(self) -> None:
        results = read_results()
        texts = [
            Text(self._font, RANKING_HEADER, Alignment.LEFT, Vec(5, 40)),
            Text(self._font, RANKING_RULE, Alignment.LEFT, Vec(5, 77)),
        ]
        texts.extend(
            Text(self._font, ranking_row(result), Alignment.LEFT, Vec(5, 114 + row * 37))
            for row, result in enumerate(results)
        )
        self._wait_for_menu(GameState.RANKING, texts)

    def _wait_for_menu(self, current: GameState, texts: list[Text]) -> None:
        while self.state is current:
            for key in _key_releases():
                if key in (pygame.K_ESCAPE, pygame.K_RETURN):
                    self.state = GameState.MENU
                    return
            self._present(texts)