"""Game registry: the fixed list the menu offers."""

from mindgames.games.base import Game
from mindgames.games.number_memory import NumberMemoryGame
from mindgames.games.reaction import ReactionGame
from mindgames.games.verbal_memory import WORDS_PATH, VerbalMemoryGame

__all__ = ["Game", "NumberMemoryGame", "ReactionGame", "VerbalMemoryGame", "get_all_games"]


def get_all_games(config=None) -> list[Game]:
    """Build one instance of every game, wired to the terminal timing in config."""
    timing = {}
    words_path = WORDS_PATH
    if config is not None:
        timing = {
            "poll_interval": config.terminal.poll_interval_ms / 1000,
            "frame_delay": config.terminal.frame_delay_ms / 1000,
        }
        if config.words.path:
            words_path = config.words.path
    return [
        ReactionGame(**timing),
        VerbalMemoryGame(words_path=words_path),
        NumberMemoryGame(**timing),
    ]
