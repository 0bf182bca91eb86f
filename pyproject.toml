[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongfire"
version = "1.0.4"
description = "A full-screen Pong game with a menu, a CPU opponent, a pause screen and a results ranking."
requires-python = ">=3.10"
keywords = ["pong", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
pongfire = "pongfire.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pongfire"]

[tool.pytest.ini_options]
addopts = "-ra"
