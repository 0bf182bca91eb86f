"""Application-wide settings and asset lookup."""

from pathlib import Path

APP_FPS = 60
APP_WINDOW_WIDTH = 1280
APP_WINDOW_HEIGHT = 720


def assets_path(relative_path: str) -> str:
    """Return the path of an asset under ``src/assets`` of the working directory."""
    return (Path.cwd() / "src" / "assets" / relative_path).as_posix()