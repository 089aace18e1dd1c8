"""
movieList
~~~~~~~~~

Top-level package for the Movies list application.

Exports:
  - MOVIES_URL, POSTER_BASE_URL
  - Utility functions: log_debug, apply_dark_palette
  - MainWindow GUI and the list controller
"""

# settings
from movieList.settings import MOVIES_URL, POSTER_BASE_URL

# utils
from movieList.utils import log_debug, apply_dark_palette

# GUI entrypoint
from movieList.gui.main_window import MainWindow

# core logic
from movieList.gui.controller import MovieListController

__all__ = [
    # settings
    "MOVIES_URL",
    "POSTER_BASE_URL",
    # utils
    "log_debug",
    "apply_dark_palette",
    # GUI
    "MainWindow",
    # core actions
    "MovieListController",
]
