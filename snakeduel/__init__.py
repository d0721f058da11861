"""Terminal snake duel for two players, with a single-player mode."""

__version__ = "1.0.0"