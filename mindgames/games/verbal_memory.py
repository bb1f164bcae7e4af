"""Verbal Memory: say whether each word has been shown before.

Words come one at a time. Mark SEEN (a / ←) or NEW (d / →), confirm with
Enter. A wrong call costs one of three lives.
"""

import random
from dataclasses import dataclass, field
from pathlib import Path

from mindgames.events import ENTER, LEFT, RIGHT, KeyEvent
from mindgames.frame import Frame, TextLine, line
from mindgames.games.base import Game

# -- config ----------------------------------------------------------------
WORDS_PATH = Path(__file__).resolve().parent.parent / "assets" / "words.txt"
MAX_LIVES = 3
POOL_CHANCE = 0.7  # otherwise draw from words already seen

SEEN = "seen"
NEW = "new"


@dataclass
class VerbalMemorySession:
    seen: set[str] = field(default_factory=set)
    shown: str | None = None
    lives: int = MAX_LIVES
    score: int = 0
    choice: str = SEEN


def load_words(path: Path = WORDS_PATH) -> list[str]:
    """Read a newline-delimited word list; blank lines are skipped."""
    with open(path, encoding="utf-8") as f:
        return [w for w in (ln.strip() for ln in f) if w]


# -- renderers -------------------------------------------------------------

def render_title() -> Frame:
    return Frame("cyan", [
        line("Verbal Memory Test"),
        line("You will be shown words, one at a time.", bold=False),
        line("If you've seen a word during the test, pick SEEN.", bold=False),
        line("If it's a new word, pick NEW.", bold=False),
        line(""),
        line("Press Enter to start"),
    ])


def render_showing(s: VerbalMemorySession) -> Frame:
    picked = {"fg": "cyan", "bg": "black", "bold": True}
    plain = {"fg": "white", "bold": False}
    seen_style = picked if s.choice == SEEN else plain
    new_style = picked if s.choice == NEW else plain
    return Frame("cyan", [
        line(f"Score: {s.score}    Lives: {s.lives}", bold=False),
        line(""),
        line(s.shown or ""),
        line(""),
        TextLine("  Seen  ", **seen_style),
        TextLine("  New   ", **new_style),
        TextLine("← / a  seen    → / d  new    Enter  confirm", fg="white", bold=False, row=-2),
    ])


def render_end(score: int) -> Frame:
    return Frame("cyan", [
        line("Verbal Memory"),
        line(f"{score} words"),
        line("Press Enter to continue", bold=False),
    ])


# -- game logic ------------------------------------------------------------

class VerbalMemoryGame(Game):
    name = "🧠📝 Verbal Memory"
    description = "Keep as many words in short term memory as possible"

    def __init__(self, words_path: Path = WORDS_PATH, rng: random.Random | None = None):
        super().__init__()
        self.words_path = Path(words_path)
        self.rng = rng or random.Random()
        self.words: list[str] = []
        self.state = "title"  # title | showing | end
        self.session = VerbalMemorySession()

    def init_words(self) -> None:
        """Load the word pool once; later calls are no-ops."""
        if self.words:
            return
        self.words = load_words(self.words_path)

    def reset(self):
        self.state = "title"
        self.session = VerbalMemorySession()

    def next_word(self) -> None:
        """Pick the next word: usually from the pool, sometimes a repeat."""
        s = self.session
        word = None
        if self.rng.random() >= POOL_CHANCE and s.seen:
            word = self.rng.choice(sorted(s.seen))
        elif self.words:
            word = self.rng.choice(self.words)
        s.shown = word

    def answer(self) -> None:
        """Score the current choice against the shown word."""
        s = self.session
        if s.shown is None:
            return
        was_seen = s.shown in s.seen
        if s.choice == SEEN:
            if was_seen:
                s.score += 1
            else:
                s.lives -= 1
        else:
            if not was_seen:
                s.score += 1
            else:
                s.lives -= 1
            s.seen.add(s.shown)

        if s.lives <= 0:
            s.lives = 0
            self.state = "end"
        else:
            self.next_word()

    def handle_input(self, event: KeyEvent) -> None:
        if event.is_quit():
            if self.state == "title":
                self.quit = True
            self.reset()
            return

        if self.state == "title":
            if event.key == ENTER:
                self.next_word()
                self.state = "showing"
        elif self.state == "showing":
            if event.key == LEFT or event.is_char("a"):
                self.session.choice = SEEN
            elif event.key == RIGHT or event.is_char("d"):
                self.session.choice = NEW
            elif event.key == ENTER:
                self.answer()
        elif self.state == "end":
            if event.key == ENTER:
                self.reset()

    def frame(self) -> Frame:
        if self.state == "showing":
            return render_showing(self.session)
        if self.state == "end":
            return render_end(self.session.score)
        return render_title()

    def run(self, terminal) -> None:
        self.init_words()
        while not self.quit:
            terminal.draw(self.frame())
            self.handle_events(terminal)
        self.quit = False
