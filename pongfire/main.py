"""Command entry point: set up audio and video, then run the game."""

from __future__ import annotations

import argparse
import logging
from contextlib import ExitStack, contextmanager
from typing import Iterator, Sequence

import pygame

from pongfire.config import assets_path
from pongfire.game import Game, create_window

log = logging.getLogger(__name__)

MUSIC_FILE = "best-game-console-301284.mp3"
MUSIC_VOLUME = 40 / 128
MUSIC_FADE_IN_MS = 240
MUSIC_FADE_OUT_MS = 100


@contextmanager
def sdl_session() -> Iterator[None]:
    """Initialise video, fonts, audio and music; shut them all down on exit.

    Raises ``pygame.error`` when a subsystem cannot be initialised.
    """
    try:
        pygame.display.init()
        pygame.font.init()
        pygame.mixer.init(44100, -16, 2, 2048)
        if not pygame.image.get_extended():
            raise pygame.error("Extended image formats are not available.")
        pygame.mouse.set_visible(False)
    except pygame.error:
        pygame.quit()
        raise

    music = pygame.mixer.music
    try:
        music.load(assets_path(MUSIC_FILE))
    except (pygame.error, OSError) as exc:
        log.warning("Could not load music %s: %s", MUSIC_FILE, exc)
    else:
        music.set_volume(MUSIC_VOLUME)
        music.play(-1, fade_ms=MUSIC_FADE_IN_MS)

    try:
        yield
    finally:
        log.info("Cleaning up before exit.")
        music.fadeout(MUSIC_FADE_OUT_MS)
        music.unload()
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; return 1 if the environment cannot be set up."""
    parser = argparse.ArgumentParser(prog="pongfire", description="Play pong.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    with ExitStack() as stack:
        try:
            stack.enter_context(sdl_session())
        except pygame.error as exc:
            log.error("Unable to initialise: %s", exc)
            return 1
        screen = create_window()
        Game(screen).run()
    return 0