"""Monte Carlo tree search and minimax bot for a gem-trading card board game."""

__version__ = "0.1.0"