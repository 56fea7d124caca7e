import logging
import subprocess

from zap.errors import CollectionFailure
from zap.types import AppEntry, CollectorResult, HandleKind

logger = logging.getLogger(__name__)

# One "Name|AppID" line per Start menu entry
GET_START_APPS = 'Get-StartApps | ForEach-Object { "$($_.Name)|$($_.AppID)" }'


def parse_start_apps(output: str) -> list[AppEntry]:
    """
    Parse Get-StartApps output into APP_ID entries.
    Lines without a name or an AppID are skipped.
    """
    apps: list[AppEntry] = []

    for line in output.splitlines():
        parts = line.strip().split("|", 1)
        if len(parts) != 2:
            continue

        name, app_id = parts[0].strip(), parts[1].strip()
        if not name or not app_id:
            continue

        apps.append(
            AppEntry(
                name=name,
                handle=app_id,
                kind=HandleKind.APP_ID,
                source="start_menu",
            )
        )

    return apps


def run_get_start_apps() -> str:
    try:
        result = subprocess.run(
            ["powershell", "-NoProfile", "-Command", GET_START_APPS],
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
        )
    except FileNotFoundError as e:
        raise CollectionFailure("start_menu", "powershell not found") from e
    except subprocess.CalledProcessError as e:
        raise CollectionFailure("start_menu", f"Get-StartApps exited with {e.returncode}") from e
    except OSError as e:
        raise CollectionFailure("start_menu", str(e)) from e

    return result.stdout


def collect_start_menu_apps() -> CollectorResult:
    try:
        output = run_get_start_apps()
    except CollectionFailure as e:
        logger.info("Start menu apps unavailable: %s", e.reason)
        return CollectorResult.failed("start_menu", e.reason)

    apps = parse_start_apps(output)
    logger.info("Start menu: %d apps", len(apps))
    return CollectorResult(source="start_menu", entries=tuple(apps))
