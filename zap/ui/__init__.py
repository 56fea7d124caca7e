from .tui import LauncherUI, QueryInput, event_for_key, render_lines, run_session
