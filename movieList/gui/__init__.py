"""
gui
~~~
All Qt widgets, pages and the list controller.

•  Widgets never own movie data – everything goes through the controller.
•  Re-export the high-level symbols so the app can simply:

    from movieList.gui import MainWindow, MovieListController
"""

from movieList.gui.controller      import MovieListController
from movieList.gui.main_window     import MainWindow
from movieList.gui.movie_list_page import MovieListPage, PullToRefreshList
from movieList.gui.movie_item      import MovieItem, episode_caption
from movieList.gui.poster_loader   import PosterLoader, poster_url

__all__ = [
    "MovieListController",
    "MainWindow", "MovieListPage", "PullToRefreshList",
    "MovieItem", "episode_caption",
    "PosterLoader", "poster_url",
]
