import logging
import sys

from zap.config import load_config, log_path
from zap.discovery import discover_apps
from zap.errors import InitFailure
from zap.launcher import run_effect
from zap.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def load_frontend():
    try:
        from zap.ui import run_session
    except ImportError as e:
        raise InitFailure(f"curses is unavailable ({e}); install windows-curses") from e
    return run_session


def main() -> int:
    config = load_config()
    setup_logging(config.log_level, log_path())

    try:
        apps = discover_apps(config)
        run_session = load_frontend()
        state, effect = run_session(apps, config)
    except InitFailure as e:
        logger.error("Startup failed: %s", e)
        print(f"zap: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0

    run_effect(effect, config)
    if state.last_action:
        print(f"  → {state.last_action}")
    return 0
