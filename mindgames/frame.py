"""Frame description: what a game wants on screen, not how to paint it."""

from dataclasses import dataclass, field

# name -> (curses color index, hex for image output)
PALETTE: dict[str, tuple[int, str]] = {
    "black": (0, "#0a0a0a"),
    "red": (1, "#ef4444"),
    "green": (2, "#22c55e"),
    "yellow": (3, "#eab308"),
    "blue": (4, "#3b82f6"),
    "magenta": (5, "#a855f7"),
    "cyan": (6, "#06b6d4"),
    "white": (7, "#ffffff"),
    "gray": (7, "#9ca3af"),
    "light_blue": (4, "#60a5fa"),
    "default": (-1, "#111827"),
}


@dataclass(frozen=True)
class TextLine:
    text: str
    fg: str = "white"
    bg: str | None = None  # None = frame background
    bold: bool = True
    strike: bool = False
    row: int | None = None  # None = centered block, negative = from bottom
    align: str = "center"   # "center" | "left"


@dataclass(frozen=True)
class Progress:
    percent: int  # 0-100
    fg: str = "white"
    bg: str | None = None


@dataclass(frozen=True)
class Frame:
    background: str = "default"
    lines: list[TextLine] = field(default_factory=list)
    progress: Progress | None = None


def line(text: str, color: str = "white", **kwargs) -> TextLine:
    """Bold line in one color: the common case for game screens."""
    return TextLine(text=text, fg=color, **kwargs)


def color_hex(name: str) -> str:
    return PALETTE.get(name, PALETTE["default"])[1]
