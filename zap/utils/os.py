import os
import platform
from enum import Enum
from pathlib import Path

class OSType(Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    UNKNOWN = "unknown"


def get_os() -> OSType:
    system = platform.system().lower()

    if system == "windows":
        return OSType.WINDOWS
    elif system == "linux":
        return OSType.LINUX
    else:
        return OSType.UNKNOWN


def is_windows() -> bool:
    return get_os() == OSType.WINDOWS


def get_env(env: str) -> str | None:
    return os.environ.get(env)


def user_data_dir() -> Path:
    """
    Per-user directory holding zap's config and log file.
    """
    if is_windows():
        base = get_env("LOCALAPPDATA") or str(Path.home())
        return Path(base) / "zap"

    # Linux (and unknown): XDG fallback
    base = get_env("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "zap"


def start_menu_dirs() -> list[Path]:
    """
    Machine-wide and per-user Start Menu "Programs" folders.
    """
    dirs: list[Path] = []

    for env in ("ProgramData", "APPDATA"):
        base = get_env(env)
        if base:
            dirs.append(Path(base) / "Microsoft" / "Windows" / "Start Menu" / "Programs")

    # Filter to ones that actually exist
    return [d for d in dirs if d.exists()]
