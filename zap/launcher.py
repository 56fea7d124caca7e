"""
Launching apps and web searches.

Every launch is fire-and-forget: the child is detached, never waited
on, and a failed spawn is only logged. The session ends right after a
launch either way.
"""

import logging
import subprocess
import webbrowser
from pathlib import Path, PureWindowsPath
from urllib.parse import quote_plus

from zap.config import ZapConfig
from zap.errors import LaunchFailure
from zap.types import AppEntry, HandleKind
from zap.utils import get_env
from zap.utils.state import Effect, LaunchApp, SearchWeb

logger = logging.getLogger(__name__)

EXPLORER = "explorer.exe"
APPS_FOLDER = "shell:AppsFolder\\"

# Only defined on Windows
DETACHED_FLAGS = (
    getattr(subprocess, "DETACHED_PROCESS", 0)
    | getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0)
)


def spawn(args: list[str]) -> None:
    try:
        subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
            creationflags=DETACHED_FLAGS,
        )
    except OSError as e:
        raise LaunchFailure(f"could not start {args[0]}: {e}") from e


def detach(args: list[str]) -> None:
    """
    Start a process without waiting for it. Spawn errors are discarded.
    """
    try:
        spawn(args)
    except LaunchFailure as e:
        logger.debug("Ignoring launch failure: %s", e)


def launch_args(entry: AppEntry) -> list[str]:
    if entry.kind == HandleKind.APP_ID:
        return [EXPLORER, APPS_FOLDER + entry.handle]

    # shortcuts and install directories are opened by the shell
    return [EXPLORER, entry.handle]


def launch_app(entry: AppEntry) -> None:
    logger.info("Launching %s (%s)", entry.name, entry.kind.value)
    detach(launch_args(entry))


def build_search_url(query: str, base_url: str) -> str:
    return base_url + quote_plus(query.strip())


def default_browser_path() -> str | None:
    base = get_env("LOCALAPPDATA")
    if not base:
        return None
    return str(PureWindowsPath(base, "Chromium", "Application", "chrome.exe"))


def search_web(query: str, config: ZapConfig) -> None:
    query = query.strip()
    if not query:
        return

    url = build_search_url(query, config.search_url)
    browser = config.browser_path or default_browser_path()

    if browser and Path(browser).exists():
        logger.info("Searching %r with %s", query, browser)
        detach([browser, url])
        return

    logger.info("Browser %s not found, using system default for %r", browser, query)
    try:
        webbrowser.open_new_tab(url)
    except webbrowser.Error as e:
        logger.debug("Ignoring browser failure: %s", e)


def run_effect(effect: Effect | None, config: ZapConfig) -> None:
    if isinstance(effect, LaunchApp):
        launch_app(effect.entry)
    elif isinstance(effect, SearchWeb):
        search_web(effect.query, config)
