from .applist_manager import default_collectors, discover_apps, merge_apps, run_collectors
