import logging
from collections.abc import Callable, Iterable

from zap.config import ZapConfig
from zap.config.zap_config import DEFAULT_GHOST_APPS
from zap.errors import CollectionFailure
from zap.types import AppEntry, CollectorResult

from zap.discovery.registry_discovery import collect_registry_apps
from zap.discovery.shortcut_discovery import collect_shortcut_apps
from zap.discovery.start_menu import collect_start_menu_apps

logger = logging.getLogger(__name__)

Collector = Callable[[], CollectorResult]


# -------------------------
# Merge / dedup
# -------------------------

def merge_apps(
    results: Iterable[CollectorResult],
    ghost_apps: frozenset[str] = DEFAULT_GHOST_APPS,
) -> list[AppEntry]:
    """
    Merge collector results given in priority order.

    The first entry seen for a case-folded name wins; names on the
    ghost list are dropped. Failed results contribute nothing.
    The merged list is sorted by case-folded name.
    """
    seen: set[str] = set()
    apps: list[AppEntry] = []

    for result in results:
        if not result.ok:
            continue

        for entry in result.entries:
            if not entry.name.strip():
                continue

            key = entry.key
            if key in seen or key in ghost_apps:
                continue

            seen.add(key)
            apps.append(entry)

    apps.sort(key=lambda a: a.key)
    return apps


# -------------------------
# Unified discovery entrypoint
# -------------------------

def default_collectors(config: ZapConfig) -> list[Collector]:
    collectors: list[Collector] = [
        collect_start_menu_apps,
        collect_registry_apps,
    ]
    if config.scan_shortcuts:
        collectors.append(collect_shortcut_apps)
    return collectors


def run_collectors(collectors: Iterable[Collector]) -> list[CollectorResult]:
    """
    Run collectors one after another. A collector that raises is
    logged and skipped, the rest still run.
    """
    results: list[CollectorResult] = []

    for collect in collectors:
        try:
            result = collect()
        except (CollectionFailure, OSError) as e:
            name = getattr(collect, "__name__", repr(collect))
            logger.info("Collector %s failed: %s", name, e)
            continue

        results.append(result)

    return results


def discover_apps(
    config: ZapConfig,
    collectors: Iterable[Collector] | None = None,
) -> list[AppEntry]:
    """
    Perform full app discovery:
    - Start menu apps (Get-StartApps)
    - Registry uninstall entries with an install location
    - Start Menu shortcuts, when enabled
    """
    if collectors is None:
        collectors = default_collectors(config)

    apps = merge_apps(run_collectors(collectors), ghost_apps=config.ghost_apps)
    logger.info("Discovered %d apps", len(apps))
    return apps
