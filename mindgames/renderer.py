"""Frame painters: curses for the terminal, PIL for recorded snapshots."""

import curses
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from mindgames.frame import PALETTE, Frame, TextLine, color_hex

FONT_PATH = "DejaVuSansMono.ttf"
BAR_FILL = "█"
BAR_EMPTY = "░"
STRIKE = "̶"

_pairs: dict[tuple[int, int], int] = {}
_use_color = False


def _font(size: int) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(FONT_PATH, size)
    except OSError:
        return ImageFont.load_default()


def init_colors() -> None:
    """Start curses colors; a monochrome terminal draws everything plain.

    Raises OSError if the terminal rejects the color setup.
    """
    global _use_color
    _pairs.clear()
    _use_color = curses.has_colors()
    if not _use_color:
        return
    try:
        curses.start_color()
        curses.use_default_colors()
    except curses.error as e:
        raise OSError(f"terminal color setup failed: {e}") from e


def color_attr(fg: str, bg: str) -> int:
    """Curses attribute for a fg/bg pair, allocating the pair on first use."""
    if not _use_color:
        return 0
    key = (PALETTE.get(fg, PALETTE["default"])[0], PALETTE.get(bg, PALETTE["default"])[0])
    if key not in _pairs:
        pair = len(_pairs) + 1
        if pair >= curses.COLOR_PAIRS:
            return 0
        try:
            curses.init_pair(pair, *key)
        except curses.error as e:
            raise OSError(f"terminal rejected color pair {key}: {e}") from e
        _pairs[key] = pair
    return curses.color_pair(_pairs[key])


def safe_addstr(stdscr, y: int, x: int, s: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        # writing the bottom-right cell always errors; clipped text is fine
        pass


def progress_bar(percent: int, width: int) -> str:
    """Text gauge: ████░░░░ 50%"""
    percent = max(0, min(100, percent))
    label = f" {percent}%"
    cells = max(0, width - len(label))
    filled = cells * percent // 100
    return BAR_FILL * filled + BAR_EMPTY * (cells - filled) + label


def _layout(frame: Frame, height: int) -> list[tuple[int, TextLine]]:
    """Resolve each line to a screen row."""
    block = [ln for ln in frame.lines if ln.row is None]
    extra = 2 if frame.progress else 0
    top = max(0, (height - len(block) - extra) // 2)
    rows = []
    for i, ln in enumerate(block):
        rows.append((top + i, ln))
    for ln in frame.lines:
        if ln.row is not None:
            rows.append((ln.row if ln.row >= 0 else height + ln.row, ln))
    return rows


def _progress_row(frame: Frame, height: int) -> int:
    block = [ln for ln in frame.lines if ln.row is None]
    top = max(0, (height - len(block) - 2) // 2)
    return top + len(block) + 1


def draw_frame(stdscr, frame: Frame) -> None:
    """Paint a frame onto the curses screen.

    Raises OSError if the terminal refuses the background or the refresh.
    """
    height, width = stdscr.getmaxyx()
    try:
        stdscr.bkgd(" ", color_attr("white", frame.background))
    except curses.error as e:
        raise OSError(f"terminal background failed: {e}") from e
    stdscr.erase()

    for y, ln in _layout(frame, height):
        text = ln.text[:width]
        if ln.strike:
            text = "".join(c + STRIKE for c in text)
        attr = color_attr(ln.fg, ln.bg or frame.background)
        if ln.bold:
            attr |= curses.A_BOLD
        x = 0 if ln.align == "left" else max(0, (width - len(ln.text[:width])) // 2)
        safe_addstr(stdscr, y, x, text, attr)

    if frame.progress:
        bar_width = max(10, width * 3 // 5)
        bar = progress_bar(frame.progress.percent, bar_width)
        attr = color_attr(frame.progress.fg, frame.progress.bg or frame.background) | curses.A_BOLD
        safe_addstr(stdscr, _progress_row(frame, height), (width - bar_width) // 2, bar, attr)

    try:
        stdscr.refresh()
    except curses.error as e:
        raise OSError(f"terminal refresh failed: {e}") from e


def render_frame_image(frame: Frame, size: tuple[int, int] = (640, 360)) -> Image.Image:
    """Rasterize a frame: same layout as the terminal, one text row per 24px."""
    img = Image.new("RGB", size, color_hex(frame.background))
    draw = ImageDraw.Draw(img)
    row_h = 24
    rows = size[1] // row_h
    font = _font(16)

    for y, ln in _layout(frame, rows):
        top = y * row_h
        if ln.bg:
            draw.rectangle([0, top, size[0], top + row_h - 1], fill=color_hex(ln.bg))
        if ln.align == "left":
            anchor, x = "lm", 8
        else:
            anchor, x = "mm", size[0] // 2
        draw.text((x, top + row_h // 2), ln.text, font=font, fill=color_hex(ln.fg), anchor=anchor)
        if ln.strike:
            left, _, right, _ = draw.textbbox((x, top + row_h // 2), ln.text, font=font, anchor=anchor)
            draw.line([(left, top + row_h // 2), (right, top + row_h // 2)], fill=color_hex(ln.fg), width=2)

    if frame.progress:
        top = _progress_row(frame, rows) * row_h + 4
        left, right = size[0] // 5, size[0] * 4 // 5
        fill_to = left + (right - left) * max(0, min(100, frame.progress.percent)) // 100
        draw.rectangle([left, top, right, top + row_h - 8], outline=color_hex(frame.progress.fg), width=2)
        if fill_to > left:
            draw.rectangle([left, top, fill_to, top + row_h - 8], fill=color_hex(frame.progress.fg))

    return img


class FrameRecorder:
    """Saves each distinct frame as a numbered PNG."""

    def __init__(self, directory: Path, size: tuple[int, int] = (640, 360)):
        self.directory = Path(directory)
        self.size = size
        self.count = 0
        self._last: Frame | None = None

    def record(self, frame: Frame) -> Path | None:
        if frame == self._last:
            return None
        self._last = frame
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / f"frame-{self.count:05d}.png"
        render_frame_image(frame, self.size).save(path)
        self.count += 1
        return path
