import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest import mock

import pygame
import pytest

from pongfire.main import main, sdl_session


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src" / "assets").mkdir(parents=True)
    yield tmp_path
    pygame.quit()


def test_main_fails_when_audio_cannot_start(workdir):
    with mock.patch("pygame.mixer.init", side_effect=pygame.error("no audio")):
        assert main([]) == 1
    assert not pygame.display.get_init()


def test_session_initialises_and_cleans_up(workdir):
    with mock.patch("pygame.mixer.init"), mock.patch("pygame.mixer.music") as music:
        session = sdl_session()
        session.__enter__()
        assert pygame.display.get_init()
        assert pygame.font.get_init()
        suppressed = session.__exit__(None, None, None)
        assert not suppressed
        assert not pygame.font.get_init()
        assert not pygame.display.get_init()
        assert music.fadeout.call_args_list == [mock.call(100)]
        assert music.play.call_args_list == [mock.call(-1, fade_ms=240)]


def test_session_cleans_up_after_error(workdir):
    with mock.patch("pygame.mixer.init"), mock.patch("pygame.mixer.music") as music:
        session = sdl_session()
        session.__enter__()
        error = ValueError("boom")
        suppressed = session.__exit__(ValueError, error, None)
        assert not suppressed
        assert not pygame.display.get_init()
        assert music.unload.call_count == 1


def test_session_tolerates_missing_music(workdir):
    with mock.patch("pygame.mixer.init"), mock.patch("pygame.mixer.music") as music:
        music.load.side_effect = pygame.error("missing")
        session = sdl_session()
        session.__enter__()
        assert pygame.display.get_init()
        suppressed = session.__exit__(None, None, None)
        assert not suppressed
        assert music.play.call_count == 0
        assert music.fadeout.call_count == 1


def test_main_runs_until_exit_is_chosen(workdir, monkeypatch):
    real_font = pygame.font.Font
    monkeypatch.setattr(pygame.font, "Font", lambda _path, size: real_font(None, size))
    monkeypatch.setattr(pygame.image, "load", lambda _path: pygame.Surface((8, 8)))
    events = [
        pygame.event.Event(pygame.KEYUP, key=pygame.K_UP),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN),
    ]
    with mock.patch("pygame.mixer.init"), mock.patch("pygame.mixer.music") as music, \
            mock.patch("pygame.event.poll", side_effect=events):
        assert main([]) == 0
        assert music.fadeout.call_count == 1
    assert not pygame.display.get_init()