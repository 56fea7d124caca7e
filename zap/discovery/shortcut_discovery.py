import logging
import os
from pathlib import Path

from zap.types import AppEntry, CollectorResult, HandleKind
from zap.utils import start_menu_dirs

logger = logging.getLogger(__name__)

SHORTCUT_EXTENSION = ".lnk"

# Start Menu folders also carry uninstallers and readme links
EXCLUDED_NAME_PREFIXES = ("uninstall",)


def is_launchable_shortcut(path: Path) -> bool:
    if path.suffix.lower() != SHORTCUT_EXTENSION:
        return False
    return not path.stem.lower().startswith(EXCLUDED_NAME_PREFIXES)


def discover_shortcuts(roots: list[Path], max_depth: int = 4) -> list[AppEntry]:
    """
    Collect .lnk files below the given roots, up to `max_depth` levels deep.
    """
    discovered: list[AppEntry] = []

    for root in roots:
        if not root.exists():
            continue

        for dirpath, dirnames, filenames in os.walk(root):
            dp = Path(dirpath)

            try:
                depth = len(dp.relative_to(root).parts)
            except ValueError:
                continue

            if depth >= max_depth:
                dirnames[:] = []

            # os.walk order is platform dependent
            dirnames.sort()
            for fn in sorted(filenames):
                p = dp / fn
                if not is_launchable_shortcut(p):
                    continue

                discovered.append(
                    AppEntry(
                        name=p.stem,
                        handle=str(p),
                        kind=HandleKind.SHORTCUT,
                        source="shortcut",
                    )
                )

    return discovered


def collect_shortcut_apps(roots: list[Path] | None = None) -> CollectorResult:
    if roots is None:
        roots = start_menu_dirs()

    if not roots:
        logger.info("Shortcut scan skipped: no Start Menu folders found")
        return CollectorResult.failed("shortcut", "no Start Menu folders found")

    apps = discover_shortcuts(roots)
    logger.info("Shortcuts: %d apps", len(apps))
    return CollectorResult(source="shortcut", entries=tuple(apps))
