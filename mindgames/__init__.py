"""Mind Arcade: terminal mini-games for reflexes and short-term memory."""

__version__ = "0.1.0"
