[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gemesis"
version = "0.1.0"
description = "A Monte Carlo tree search and minimax bot for a gem-trading card board game"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "game ai", "mcts", "minimax", "alpha-beta", "bot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gemesis = "gemesis.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gemesis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
