from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

# -------------------------
# Data model
# -------------------------

class HandleKind(Enum):
    APP_ID = "app_id"            # shell:AppsFolder identifier
    SHORTCUT = "shortcut"        # path to a .lnk file
    INSTALL_DIR = "install_dir"  # install location from the registry


Source = Literal["start_menu", "registry", "shortcut"]


@dataclass(frozen=True)
class AppEntry:
    name: str
    handle: str
    kind: HandleKind
    source: Source

    @property
    def key(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class CollectorResult:
    """
    Outcome of a single collector run.
    A failed result carries the reason and contributes no entries.
    """
    source: Source
    entries: tuple[AppEntry, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, source: Source, reason: str) -> "CollectorResult":
        return cls(source=source, entries=(), error=reason)
