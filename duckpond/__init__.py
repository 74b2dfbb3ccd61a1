"""Duck sumo arcade game: game logic that runs headless, plus a pygame window."""

__version__ = "0.1.0"