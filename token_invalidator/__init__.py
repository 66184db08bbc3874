"""Token Invalidator — Discord bot that gets leaked tokens invalidated."""

__version__ = "0.1.0"
