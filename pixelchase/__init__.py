"""A small chase game on a simulated 240x160 pixel screen, with its frame buffer, 6x8 font and sprites."""

__version__ = "0.1.0"