[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonlab"
version = "0.1.0"
description = "Playing cards, a growable integer stack, item trees, characters, hashing experiments and a small room-crawling adventure"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "stack", "binary search tree", "hashing", "adventure", "role-playing", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeonlab-cards = "dungeonlab.card_driver:main"
dungeonlab-stack = "dungeonlab.stack_driver:main"
dungeonlab-hashing = "dungeonlab.hashing:main"
dungeonlab-game = "dungeonlab.game_graph:main"
dungeonlab-grading = "dungeonlab.grading:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonlab"]

[tool.pytest.ini_options]
addopts = "-ra"
