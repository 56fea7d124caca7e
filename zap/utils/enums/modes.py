from enum import Enum

class ViewMode(Enum):
    BROWSING = 0    # app list + live filter
    WEB_SEARCH = 1  # query starts with the search prefix
