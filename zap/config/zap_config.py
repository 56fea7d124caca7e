import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from zap.utils import user_data_dir

logger = logging.getLogger(__name__)

DEFAULT_GHOST_APPS = frozenset({
    # uninstalled, but still cached by Get-StartApps
    "google chrome",
})
DEFAULT_SEARCH_PREFIX = "/"
DEFAULT_SEARCH_URL = "https://duckduckgo.com/?q="


def _typed(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        logger.warning(
            "Ignoring config key %r: expected %s, got %s",
            key, kind.__name__, type(value).__name__,
        )
        return default
    return value


@dataclass(frozen=True)
class ZapConfig:
    ghost_apps: frozenset[str] = field(default=DEFAULT_GHOST_APPS)
    search_prefix: str = DEFAULT_SEARCH_PREFIX
    search_url: str = DEFAULT_SEARCH_URL
    browser_path: str | None = None
    scan_shortcuts: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ZapConfig":
        """
        Build a config from parsed JSON. Unknown keys are ignored,
        missing keys and keys of the wrong type keep their defaults.
        """
        defaults = cls()

        names = _typed(data, "ghost_apps", list, None)
        if names is not None and not all(isinstance(n, str) for n in names):
            logger.warning("Ignoring config key 'ghost_apps': expected a list of names")
            names = None

        if names is None:
            ghosts = defaults.ghost_apps
        else:
            ghosts = frozenset(n.strip().lower() for n in names)

        return cls(
            ghost_apps=ghosts,
            search_prefix=_typed(data, "search_prefix", str, "") or defaults.search_prefix,
            search_url=_typed(data, "search_url", str, "") or defaults.search_url,
            browser_path=_typed(data, "browser_path", str, "") or None,
            scan_shortcuts=_typed(data, "scan_shortcuts", bool, defaults.scan_shortcuts),
            log_level=(_typed(data, "log_level", str, "") or defaults.log_level).upper(),
        )


def config_path() -> Path:
    return user_data_dir() / "config.json"


def log_path() -> Path:
    return user_data_dir() / "zap.log"


def load_config(path: Path | None = None) -> ZapConfig:
    p = path if path is not None else config_path()
    if not p.exists():
        return ZapConfig()

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return ZapConfig()

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return ZapConfig()

    return ZapConfig.from_dict(data)
