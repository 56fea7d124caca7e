from .modes import ViewMode
