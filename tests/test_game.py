import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pongfire.game import (
    RANKING_HEADER,
    Game,
    GameState,
    create_window,
    outcome_label,
    ranking_row,
)
from pongfire.paddle import PlayerKind
from pongfire.pong import PongState
from pongfire.results import MatchOutcome, Result, read_results, write_result


@pytest.fixture
def assets(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "src" / "assets"
    folder.mkdir(parents=True)
    pygame.init()
    real_font = pygame.font.Font
    monkeypatch.setattr(pygame.font, "Font", lambda _path, size: real_font(None, size))
    monkeypatch.setattr(pygame.image, "load", lambda _path: pygame.Surface((8, 8)))
    yield folder
    pygame.quit()


@pytest.fixture
def game(assets):
    screen = pygame.display.set_mode((640, 480))
    pygame.event.clear()
    return Game(screen)


def release(*keys):
    for key in keys:
        pygame.event.post(pygame.event.Event(pygame.KEYUP, key=key))


@pytest.mark.parametrize(
    "outcome, label",
    [
        (MatchOutcome.QUIT, "Cancelada"),
        (MatchOutcome.DRAW, "Empate"),
        (MatchOutcome.CPU, "Victoria CPU"),
        (MatchOutcome.PLAYER_1, "Victoria P1"),
        (MatchOutcome.PLAYER_2, "Victoria P2"),
    ],
)
def test_outcome_label(outcome, label):
    assert outcome_label(outcome) == label


def test_ranking_row_columns():
    row = ranking_row(Result(MatchOutcome.PLAYER_2, 45.678, 2, 7))
    cells = [cell.strip() for cell in row.split("|")[1:-1]]
    assert cells == ["P2", "2", "7", "45.68"]
    assert len(row) == len(RANKING_HEADER)


@pytest.mark.parametrize("outcome", list(MatchOutcome))
def test_ranking_row_aligns_with_header(outcome):
    row = ranking_row(Result(outcome, 1.0, 3, 4))
    assert [i for i, c in enumerate(row) if c == "|"] == [
        i for i, c in enumerate(RANKING_HEADER) if c == "|"
    ]


def test_create_window_sets_caption(assets):
    window = create_window()
    assert pygame.display.get_caption()[0] == "Pong"
    assert window.get_size() == pygame.display.get_surface().get_size()


def test_new_game_starts_in_menu(game):
    assert game.state is GameState.MENU


def test_menu_enter_starts_cpu_match(game):
    release(pygame.K_RETURN)
    game.menu()
    assert game.state is GameState.PLAY
    assert game.match.state() is PongState.SERVE
    assert game.match.paddle2.kind is PlayerKind.CPU


def test_menu_second_option_starts_two_player_match(game):
    release(pygame.K_DOWN, pygame.K_RETURN)
    game.menu()
    assert game.state is GameState.PLAY
    assert game.match.paddle2.kind is PlayerKind.PERSON


def test_menu_ranking_option(game):
    release(pygame.K_DOWN, pygame.K_DOWN, pygame.K_RETURN)
    game.menu()
    assert game.state is GameState.RANKING


def test_menu_wraps_upwards_to_exit(game):
    release(pygame.K_UP, pygame.K_RETURN)
    game.menu()
    assert game.state is GameState.EXIT


def test_menu_wraps_downwards_to_first_option(game):
    release(pygame.K_DOWN, pygame.K_DOWN, pygame.K_DOWN, pygame.K_DOWN, pygame.K_RETURN)
    game.menu()
    assert game.match.paddle2.kind is PlayerKind.CPU


def test_menu_ignores_key_presses(game):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    release(pygame.K_RETURN)
    game.menu()
    assert game.state is GameState.PLAY


def test_menu_leaves_later_events_queued(game):
    release(pygame.K_RETURN, pygame.K_ESCAPE)
    game.menu()
    assert game.state is GameState.PLAY
    remaining = [e.key for e in pygame.event.get() if e.type == pygame.KEYUP]
    assert remaining == [pygame.K_ESCAPE]


def test_run_stops_on_exit(game):
    release(pygame.K_UP, pygame.K_RETURN)
    game.run()
    assert game.state is GameState.EXIT


def test_play_escape_pauses(game):
    game.match.start(PlayerKind.PERSON)
    game.state = GameState.PLAY
    release(pygame.K_ESCAPE)
    game.play()
    assert game.state is GameState.PAUSE
    assert game.match.state() is PongState.PAUSED


def test_pause_enter_resumes(game):
    game.match.start(PlayerKind.PERSON)
    game.match.pause(True)
    game.state = GameState.PAUSE
    release(pygame.K_RETURN)
    game.pause()
    assert game.state is GameState.PLAY
    assert game.match.state() is PongState.SERVE


def test_pause_escape_cancels_match(game):
    game.match.start(PlayerKind.PERSON)
    game.match.pause(True)
    game.state = GameState.PAUSE
    release(pygame.K_ESCAPE)
    game.pause()
    assert game.state is GameState.FINISHED
    assert game.match.last_result().outcome is MatchOutcome.QUIT


def test_finished_cancelled_match_is_stored_and_returns_to_menu(game, assets):
    game.match.start(PlayerKind.CPU)
    game.match.finish(True)
    game.state = GameState.FINISHED
    game.finished()
    assert game.state is GameState.MENU
    stored = read_results(assets / "resultados.csv")
    assert [r.outcome for r in stored] == [MatchOutcome.QUIT]


def test_finished_shows_result_until_key(game, assets):
    game.match.start(PlayerKind.CPU)
    game.match.finish(False)
    game.state = GameState.FINISHED
    release(pygame.K_RETURN)
    game.finished()
    assert game.state is GameState.MENU
    stored = read_results(assets / "resultados.csv")
    assert len(stored) == 1
    assert stored[0].outcome is MatchOutcome.DRAW
    assert (stored[0].player1, stored[0].player2) == (0, 0)


def test_ranking_escape_returns_to_menu(game):
    write_result(Result(MatchOutcome.PLAYER_1, 1.0, 7, 2))
    game.state = GameState.RANKING
    release(pygame.K_ESCAPE)
    game.ranking()
    assert game.state is GameState.MENU


def test_ranking_rejects_malformed_file(game, assets):
    (assets / "resultados.csv").write_text("1,2\n", encoding="utf-8")
    game.state = GameState.RANKING
    with pytest.raises(ValueError):
        game.ranking()