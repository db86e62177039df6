[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrabble"
version = "0.1.0"
description = "Rules engine for Scrabble: tile bag, premium-square board with word finding and scoring, word lists, players and turns"
requires-python = ">=3.10"
dependencies = []
keywords = ["scrabble", "board game", "word game", "tiles", "dictionary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scrabble"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
