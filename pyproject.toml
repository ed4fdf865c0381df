[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrix"
version = "0.1.0"
description = "A falling-blocks puzzle game with a NES-style look, built on pygame"
requires-python = ">=3.10"
keywords = ["tetris", "game", "puzzle", "pygame", "blocks"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tetrix = "tetrix.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
