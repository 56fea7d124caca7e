import pytest

from zap.types import AppEntry, CollectorResult, HandleKind


def app(name: str, handle: str | None = None, kind: HandleKind = HandleKind.APP_ID, source: str = "start_menu") -> AppEntry:
    return AppEntry(name=name, handle=handle or f"{name}.id", kind=kind, source=source)


@pytest.fixture
def make_app():
    """Factory for AppEntry objects with a default APP_ID handle."""
    return app


@pytest.fixture
def sample_apps():
    names = ["Calculator", "Google Drive", "Notepad", "Notepad++", "Paint", "Visual Studio Code"]
    return tuple(app(n) for n in names)


@pytest.fixture
def many_apps():
    return tuple(app(f"App {i:02d}") for i in range(40))


@pytest.fixture
def result_of():
    def build(source: str, *entries: AppEntry) -> CollectorResult:
        return CollectorResult(source=source, entries=tuple(entries))
    return build


class FakeScreen:
    """
    Stand-in for a curses window. Keys are handed out in order by
    get_wch(); an exception in the list is raised instead.
    """

    def __init__(self, keys, height: int = 24, width: int = 80):
        self.keys = list(keys)
        self.height = height
        self.width = width
        self.rows: dict[int, str] = {}
        self.cursor = (0, 0)

    def getmaxyx(self):
        return self.height, self.width

    def get_wch(self):
        if not self.keys:
            raise AssertionError("screen ran out of keys")
        key = self.keys.pop(0)
        if isinstance(key, BaseException) or (isinstance(key, type) and issubclass(key, BaseException)):
            raise key
        return key

    def addstr(self, y, x, s, attr=0):
        self.rows[y] = s

    def erase(self):
        self.rows = {}

    def move(self, y, x):
        self.cursor = (y, x)

    def refresh(self):
        pass


@pytest.fixture
def make_screen(monkeypatch):
    """Factory for FakeScreen; curses calls that need a real terminal are stubbed."""
    import curses

    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    return FakeScreen
