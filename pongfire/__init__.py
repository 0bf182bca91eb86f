"""A full-screen Pong game with a CPU opponent, pause screen and results ranking."""

__version__ = "1.0.4"