import curses
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from zap.config import ZapConfig
from zap.errors import InitFailure
from zap.types import AppEntry
from zap.utils.enums import ViewMode
from zap.utils.state import (
    Cancel,
    CursorDown,
    CursorUp,
    Effect,
    Event,
    ListController,
    ListState,
    Resize,
    Submit,
    TextChanged,
    initial_state,
)


CHAR_LIMIT = 200
PLACEHOLDER = "search apps · / to search web · esc to quit"

ENTER_KEYS = ("\n", "\r")
BACKSPACE_KEYS = ("\x7f", "\b")
ESCAPE = "\x1b"
CTRL_A = "\x01"
CTRL_C = "\x03"
CTRL_E = "\x05"
CTRL_K = "\x0b"
CTRL_U = "\x15"
CTRL_W = "\x17"

Line = tuple[str, str]  # (text, style name)


# -------------------------
# Input
# -------------------------

@dataclass
class QueryInput:
    """
    Single-line text field behind the prompt. `pos` is the insertion
    point, 0 <= pos <= len(text).
    """
    text: str = ""
    pos: int = 0
    limit: int = CHAR_LIMIT

    def insert(self, s: str):
        if len(self.text) + len(s) > self.limit:
            return
        self.text = self.text[:self.pos] + s + self.text[self.pos:]
        self.pos += len(s)

    def move(self, step: int):
        self.pos = min(max(self.pos + step, 0), len(self.text))

    def home(self):
        self.pos = 0

    def end(self):
        self.pos = len(self.text)

    def backspace(self):
        if self.pos > 0:
            self.text = self.text[:self.pos - 1] + self.text[self.pos:]
            self.pos -= 1

    def delete(self):
        self.text = self.text[:self.pos] + self.text[self.pos + 1:]

    def delete_word(self):
        start = self.pos
        while start > 0 and self.text[start - 1].isspace():
            start -= 1
        while start > 0 and not self.text[start - 1].isspace():
            start -= 1
        self.text = self.text[:start] + self.text[self.pos:]
        self.pos = start

    def delete_to_start(self):
        self.text = self.text[self.pos:]
        self.pos = 0

    def delete_to_end(self):
        self.text = self.text[:self.pos]


def event_for_key(ch: str | int, field: QueryInput) -> Event | None:
    """
    Translate one key from get_wch() into a controller event.

    Editing keys change `field` in place; the controller only sees the
    resulting query. Keys that just move the insertion point give None.
    """
    before = field.text

    if isinstance(ch, int):
        if ch == curses.KEY_UP:
            return CursorUp()
        if ch == curses.KEY_DOWN:
            return CursorDown()
        if ch == curses.KEY_ENTER:
            return Submit()

        if ch == curses.KEY_LEFT:
            field.move(-1)
        elif ch == curses.KEY_RIGHT:
            field.move(1)
        elif ch == curses.KEY_HOME:
            field.home()
        elif ch == curses.KEY_END:
            field.end()
        elif ch == curses.KEY_BACKSPACE:
            field.backspace()
        elif ch == curses.KEY_DC:
            field.delete()

    elif ch in ENTER_KEYS:
        return Submit()
    elif ch in (ESCAPE, CTRL_C):
        return Cancel()
    elif ch in BACKSPACE_KEYS:
        field.backspace()
    elif ch == CTRL_A:
        field.home()
    elif ch == CTRL_E:
        field.end()
    elif ch == CTRL_W:
        field.delete_word()
    elif ch == CTRL_U:
        field.delete_to_start()
    elif ch == CTRL_K:
        field.delete_to_end()
    elif ch.isprintable():
        field.insert(ch)

    if field.text != before:
        return TextChanged(field.text)
    return None


def refresh_term_size():
    # PDCurses reports the old size until resize_term(0, 0) re-reads it
    if hasattr(curses, "ncurses_version"):
        return
    try:
        curses.resize_term(0, 0)
    except curses.error:
        pass

# -------------------------
# Rendering
# -------------------------

def search_engine_name(search_url: str) -> str:
    host = urlparse(search_url).netloc
    return host.removeprefix("www.") or "the web"


def render_lines(state: ListState, search_url: str) -> list[Line]:
    """
    Build the screen for a state, top to bottom.
    """
    lines: list[Line] = [(" ⚡ zap ", "title")]

    if state.query:
        lines.append(("  > " + state.query, "normal"))
    else:
        lines.append(("  > " + PLACEHOLDER, "dim"))
    lines.append(("", "normal"))

    if state.mode == ViewMode.WEB_SEARCH:
        lines.append(("  🔍 Search: " + state.search_text, "search"))
        lines.append((f"  enter to search {search_engine_name(search_url)}", "dim"))
        return lines

    end = min(state.offset + state.max_visible, len(state.filtered))
    more_above = state.offset > 0
    more_below = end < len(state.filtered)

    if more_above:
        lines.append(("  ↑ more", "dim"))

    for i in range(state.offset, end):
        name = state.filtered[i].name
        if i == state.cursor:
            lines.append(("  ▸ " + name, "selected"))
        else:
            lines.append(("    " + name, "normal"))

    if more_below:
        lines.append(("  ↓ more", "dim"))
    if not state.filtered:
        lines.append(("  no matches", "dim"))

    # with both markers shown the footer takes the spacer row
    if not (more_above and more_below):
        lines.append(("", "normal"))
    lines.append((
        f"  {len(state.filtered)} apps · ↑↓ navigate · enter launch · / search · esc quit",
        "help",
    ))
    return lines


# -------------------------
# curses front-end
# -------------------------

class LauncherUI:
    def __init__(self, stdscr, controller: ListController, config: ZapConfig):
        self.stdscr = stdscr
        self.controller = controller
        self.config = config
        self.field = QueryInput(controller.state.query)
        self.field.end()
        self.styles: dict[str, int] = {}

        try:
            curses.curs_set(1)
        except curses.error:
            pass
        self.setup_styles()

    def setup_styles(self):
        italic = getattr(curses, "A_ITALIC", curses.A_DIM)
        self.styles = {
            "title": curses.A_BOLD,
            "normal": curses.A_NORMAL,
            "selected": curses.A_BOLD,
            "dim": curses.A_DIM,
            "search": curses.A_BOLD,
            "help": curses.A_DIM | italic,
        }
        if not curses.has_colors():
            return

        curses.start_color()
        background = -1
        try:
            curses.use_default_colors()
        except curses.error:
            background = curses.COLOR_BLACK

        curses.init_pair(1, curses.COLOR_CYAN, background)     # title
        curses.init_pair(2, curses.COLOR_GREEN, background)    # selected
        curses.init_pair(3, curses.COLOR_MAGENTA, background)  # search
        self.styles["title"] |= curses.color_pair(1)
        self.styles["selected"] |= curses.color_pair(2)
        self.styles["search"] |= curses.color_pair(3)

    def safe_add(self, y: int, x: int, s: str, attr: int = 0):
        h, w = self.stdscr.getmaxyx()
        if y >= h or x >= w:
            return
        try:
            self.stdscr.addstr(y, x, s[: max(0, w - x - 1)], attr)
        except curses.error:
            pass

    def draw(self):
        self.stdscr.erase()
        state = self.controller.state

        for y, (text, style) in enumerate(render_lines(state, self.config.search_url)):
            self.safe_add(y, 0, text, self.styles.get(style, 0))

        # keep the terminal cursor on the input line
        _, w = self.stdscr.getmaxyx()
        try:
            self.stdscr.move(1, min(4 + self.field.pos, max(0, w - 1)))
        except curses.error:
            pass
        self.stdscr.refresh()

    def read_event(self) -> Event | None:
        try:
            ch = self.stdscr.get_wch()
        except KeyboardInterrupt:
            return Cancel()
        except curses.error:
            return None

        if ch == curses.KEY_RESIZE:
            refresh_term_size()
            return Resize(self.stdscr.getmaxyx()[0])
        return event_for_key(ch, self.field)

    def run(self) -> Effect | None:
        self.controller.update(Resize(self.stdscr.getmaxyx()[0]))

        while not self.controller.done:
            self.draw()
            event = self.read_event()
            if event is None:
                continue

            effect = self.controller.update(event)
            if effect is not None:
                return effect

        return None


def run_session(apps: list[AppEntry], config: ZapConfig) -> tuple[ListState, Effect | None]:
    """
    Run the interactive list until the user launches, searches or quits.

    The effect is returned rather than performed so the caller can run
    it after curses has restored the terminal.
    """
    # Shorten the delay curses waits to tell Esc from an escape sequence
    os.environ.setdefault("ESCDELAY", "25")

    controller = ListController(initial_state(tuple(apps), prefix=config.search_prefix))

    def _main(stdscr):
        return LauncherUI(stdscr, controller, config).run()

    try:
        effect = curses.wrapper(_main)
    except curses.error as e:
        raise InitFailure(f"could not start the terminal UI: {e}") from e

    return controller.state, effect
