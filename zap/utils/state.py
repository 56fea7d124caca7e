from dataclasses import dataclass, replace

from zap.filtering import filter_apps
from zap.types import AppEntry
from zap.utils.enums import ViewMode

SEARCH_PREFIX = "/"
DEFAULT_MAX_VISIBLE = 15
MIN_VISIBLE = 5
RESERVED_ROWS = 6  # title, prompt, spacer and footer lines


# -------------------------
# Events
# -------------------------

@dataclass(frozen=True)
class TextChanged:
    query: str


@dataclass(frozen=True)
class CursorUp:
    pass


@dataclass(frozen=True)
class CursorDown:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class Resize:
    height: int


Event = TextChanged | CursorUp | CursorDown | Submit | Cancel | Resize


# -------------------------
# Effects
# -------------------------

@dataclass(frozen=True)
class LaunchApp:
    entry: AppEntry


@dataclass(frozen=True)
class SearchWeb:
    query: str


@dataclass(frozen=True)
class Quit:
    pass


Effect = LaunchApp | SearchWeb | Quit


# -------------------------
# State
# -------------------------

@dataclass(frozen=True)
class ListState:
    apps: tuple[AppEntry, ...]
    filtered: tuple[AppEntry, ...]
    query: str = ""
    cursor: int = 0
    offset: int = 0
    max_visible: int = DEFAULT_MAX_VISIBLE
    mode: ViewMode = ViewMode.BROWSING
    prefix: str = SEARCH_PREFIX
    done: bool = False
    last_action: str = ""

    @property
    def search_text(self) -> str:
        return self.query.removeprefix(self.prefix).strip()

    @property
    def selected(self) -> AppEntry | None:
        if 0 <= self.cursor < len(self.filtered):
            return self.filtered[self.cursor]
        return None


def initial_state(
    apps: tuple[AppEntry, ...],
    prefix: str = SEARCH_PREFIX,
    max_visible: int = DEFAULT_MAX_VISIBLE,
) -> ListState:
    apps = tuple(apps)
    return ListState(apps=apps, filtered=apps, prefix=prefix, max_visible=max_visible)


def visible_rows(height: int) -> int:
    return max(height - RESERVED_ROWS, MIN_VISIBLE)


def _fit_offset(cursor: int, offset: int, max_visible: int) -> int:
    if cursor < offset:
        return cursor
    if cursor >= offset + max_visible:
        return cursor - max_visible + 1
    return offset


def _on_text(state: ListState, query: str) -> ListState:
    if query.startswith(state.prefix):
        return replace(state, query=query, mode=ViewMode.WEB_SEARCH, cursor=0, offset=0)

    filtered = tuple(filter_apps(state.apps, query))

    if state.mode == ViewMode.WEB_SEARCH:
        return replace(
            state,
            query=query,
            filtered=filtered,
            mode=ViewMode.BROWSING,
            cursor=0,
            offset=0,
        )

    cursor = min(state.cursor, max(len(filtered) - 1, 0))
    offset = _fit_offset(cursor, state.offset, state.max_visible)
    return replace(state, query=query, filtered=filtered, cursor=cursor, offset=offset)


def _on_move(state: ListState, step: int) -> ListState:
    if state.mode != ViewMode.BROWSING:
        return state

    cursor = state.cursor + step
    if cursor < 0 or cursor > len(state.filtered) - 1:
        return state

    offset = _fit_offset(cursor, state.offset, state.max_visible)
    return replace(state, cursor=cursor, offset=offset)


def _on_submit(state: ListState) -> tuple[ListState, Effect | None]:
    if state.mode == ViewMode.WEB_SEARCH:
        text = state.search_text
        if not text:
            return replace(state, done=True), Quit()
        return replace(state, done=True, last_action=f"Searching: {text}"), SearchWeb(text)

    entry = state.selected
    if entry is None:
        return state, None
    return replace(state, done=True, last_action=entry.name), LaunchApp(entry)


def transition(state: ListState, event: Event) -> tuple[ListState, Effect | None]:
    """
    Apply one input event to the list state.

    Returns the next state and the side effect the front-end must
    perform, if any. Once the session is done every event is ignored.
    """
    if state.done:
        return state, None

    if isinstance(event, Cancel):
        return replace(state, done=True), Quit()

    if isinstance(event, Submit):
        return _on_submit(state)

    if isinstance(event, CursorUp):
        return _on_move(state, -1), None

    if isinstance(event, CursorDown):
        return _on_move(state, 1), None

    if isinstance(event, Resize):
        max_visible = visible_rows(event.height)
        offset = _fit_offset(state.cursor, state.offset, max_visible)
        return replace(state, max_visible=max_visible, offset=offset), None

    if isinstance(event, TextChanged):
        return _on_text(state, event.query), None

    raise TypeError(f"Unknown event: {event!r}")


class ListController:
    """
    Holds the current list state and feeds events through `transition`.
    """

    def __init__(self, state: ListState):
        self.state = state

    def update(self, event: Event) -> Effect | None:
        self.state, effect = transition(self.state, event)
        return effect

    @property
    def done(self) -> bool:
        return self.state.done
