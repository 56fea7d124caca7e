from .enums import *
from .os import OSType, get_os, is_windows, get_env, user_data_dir, start_menu_dirs
from .state import ListController, ListState, initial_state, transition
