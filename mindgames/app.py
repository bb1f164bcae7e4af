"""Mind Arcade: terminal launcher for the reflex and memory games.

Usage:
    mindgames [--config mindgames.yaml] [--record frames/] [--verbose]
"""

import argparse
import sys
from pathlib import Path

from mindgames.config import DEFAULT_CONFIG, AppConfig, load_config
from mindgames.games import VerbalMemoryGame, get_all_games
from mindgames.menu import Menu
from mindgames.renderer import FrameRecorder
from mindgames.terminal import run_session


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Terminal mini-game arcade")
    parser.add_argument("--config", default=None, help=f"Config file path (default: {DEFAULT_CONFIG})")
    parser.add_argument("--record", default=None, help="Save every frame as PNG into this directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    args = parser.parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Config not found: {config_path}")
            sys.exit(1)
        config = load_config(config_path)
    elif DEFAULT_CONFIG.exists():
        config = load_config(DEFAULT_CONFIG)
    else:
        config = AppConfig()

    record_dir = args.record or config.record.directory
    recorder = FrameRecorder(Path(record_dir)) if record_dir else None

    menu = Menu(get_all_games(config))

    try:
        run_session(menu.run, escape_delay_ms=config.terminal.escape_delay_ms, recorder=recorder)
    except OSError as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        if args.verbose:
            for game in menu.games:
                if isinstance(game, VerbalMemoryGame) and game.words:
                    print(f"Loaded {len(game.words)} words")
            for name in menu.launches:
                print(f"Played: {name}")
            if recorder:
                print(f"Recorded {recorder.count} frames to {recorder.directory}")

    print("Bye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
