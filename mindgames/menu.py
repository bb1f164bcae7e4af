"""Game selector: lists the games and hands the terminal to the chosen one."""

from mindgames.events import DOWN, ENTER, PRESS, UP, KeyEvent
from mindgames.frame import Frame, TextLine
from mindgames.games.base import Game

HINT = "↑ ↓ to navigate • Enter to launch • q to quit"


def render_menu(games: list[Game], selected: int) -> Frame:
    """Title, one name/description pair per game, hint on the bottom row."""
    lines = [TextLine("🎮 Game Selector", fg="white", row=1, align="left")]
    row = 3
    for i, game in enumerate(games):
        if i == selected:
            lines.append(TextLine(f">> {game.name}", fg="white", bg="blue", row=row, align="left"))
            lines.append(TextLine(f"   {game.description}", fg="white", bg="blue",
                                  bold=False, row=row + 1, align="left"))
        else:
            lines.append(TextLine(f"   {game.name}", fg="yellow", row=row, align="left"))
            lines.append(TextLine(f"   {game.description}", fg="gray",
                                  bold=False, row=row + 1, align="left"))
        row += 3
    lines.append(TextLine(HINT, fg="white", bold=False, row=-2))
    return Frame("default", lines)


class Menu:
    def __init__(self, games: list[Game]):
        if not games:
            raise ValueError("menu needs at least one game")
        self.games = games
        self.selected = 0
        self.in_game = False  # launch requested
        self.quit = False
        self.launches: list[str] = []

    def handle_input(self, event: KeyEvent) -> None:
        if event.is_quit():
            self.in_game = True
            self.quit = True
        elif event.key == DOWN or event.is_char("s"):
            if self.selected + 1 < len(self.games):
                self.selected += 1
        elif event.key == UP or event.is_char("w"):
            if self.selected > 0:
                self.selected -= 1
        elif event.key == ENTER:
            self.in_game = True

    def handle_events(self, terminal) -> None:
        event = terminal.read()
        if event.kind == PRESS:
            self.handle_input(event)

    def run(self, terminal) -> None:
        """Menu loop. Returns on quit; an OSError from a game ends the loop and propagates."""
        while not self.quit:
            while not self.in_game:
                terminal.draw(render_menu(self.games, self.selected))
                self.handle_events(terminal)

            if self.quit:
                break

            game = self.games[self.selected]
            self.launches.append(game.name)
            try:
                game.run(terminal)
            except OSError:
                self.quit = True
                raise
            self.in_game = False
