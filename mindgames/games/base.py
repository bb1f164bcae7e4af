"""Game contract: every mini-game the menu can launch implements this."""

from abc import ABC, abstractmethod

from mindgames.events import PRESS, KeyEvent

POLL_INTERVAL = 0.01  # seconds between input polls in timer-driven loops
FRAME_DELAY = 0.005   # idle sleep after each timer-driven frame


class Game(ABC):
    name: str = ""
    description: str = ""

    def __init__(self):
        self.quit = False  # set by handle_input to hand control back to the menu

    def handle_events(self, terminal) -> None:
        """Block for one key event and dispatch it if it is a press."""
        event = terminal.read()
        if event.kind == PRESS:
            self.handle_input(event)

    @abstractmethod
    def handle_input(self, event: KeyEvent) -> None:
        """Apply a key press to the game state. No I/O."""

    @abstractmethod
    def run(self, terminal) -> None:
        """Own the terminal until the player quits back to the menu.

        Raises OSError if drawing or reading input fails.
        """
