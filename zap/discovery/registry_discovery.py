import logging
from typing import Any

from zap.errors import CollectionFailure
from zap.types import AppEntry, CollectorResult, HandleKind

logger = logging.getLogger(__name__)

UNINSTALL_KEYS = (
    r"SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall",
    r"SOFTWARE\WOW6432Node\Microsoft\Windows\CurrentVersion\Uninstall",
)


def load_winreg() -> Any:
    try:
        import winreg
    except ImportError as e:
        raise CollectionFailure("registry", "winreg is only available on Windows") from e
    return winreg


def read_string_value(reg: Any, key: Any, name: str) -> str:
    try:
        value, _ = reg.QueryValueEx(key, name)
    except OSError:
        return ""
    return str(value).strip() if value else ""


def read_uninstall_entries(reg: Any, subkey: str) -> list[AppEntry]:
    """
    Read DisplayName / InstallLocation pairs below one uninstall key.
    Subkeys missing either value, or that cannot be opened, are skipped.
    """
    apps: list[AppEntry] = []

    try:
        with reg.OpenKey(reg.HKEY_LOCAL_MACHINE, subkey) as hkey:
            for i in range(reg.QueryInfoKey(hkey)[0]):
                try:
                    name = reg.EnumKey(hkey, i)
                    with reg.OpenKey(hkey, name) as sub:
                        display_name = read_string_value(reg, sub, "DisplayName")
                        install_location = read_string_value(reg, sub, "InstallLocation")
                except OSError:
                    continue

                if not display_name or not install_location:
                    continue

                apps.append(
                    AppEntry(
                        name=display_name,
                        handle=install_location,
                        kind=HandleKind.INSTALL_DIR,
                        source="registry",
                    )
                )
    except OSError as e:
        logger.debug("Skipping registry key %s: %s", subkey, e)

    return apps


def collect_registry_apps(reg: Any = None) -> CollectorResult:
    try:
        reg = reg if reg is not None else load_winreg()
    except CollectionFailure as e:
        logger.info("Registry apps unavailable: %s", e.reason)
        return CollectorResult.failed("registry", e.reason)

    apps: list[AppEntry] = []
    for subkey in UNINSTALL_KEYS:
        apps.extend(read_uninstall_entries(reg, subkey))

    logger.info("Registry: %d apps", len(apps))
    return CollectorResult(source="registry", entries=tuple(apps))
