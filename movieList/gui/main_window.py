# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Slot
from PySide6.QtGui     import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QMessageBox

from movieList.settings              import WINDOW_TITLE
from movieList.metadata.core.models  import SortField
from movieList.metadata.api_clients.movies_client import MoviesClient
from movieList.gui.controller        import MovieListController
from movieList.gui.movie_list_page   import MovieListPage
from movieList.gui.poster_loader     import PosterLoader


class MainWindow(QMainWindow):
    def __init__(self, client: MoviesClient | None = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(420, 720)
        self._started = False

        # ── state owner + image pipeline ────────────────────────────────
        self.controller = MovieListController(client, self)
        self.posters    = PosterLoader(self)

        # ── page ────────────────────────────────────────────────────────
        self.page = MovieListPage(self.posters)
        self.setCentralWidget(self.page)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        self.refresh_action = QAction("Refresh", self)
        self.refresh_action.setShortcuts([QKeySequence("Ctrl+R"), QKeySequence("F5")])
        self.refresh_action.triggered.connect(self._on_refresh)
        tb.addAction(self.refresh_action)

        # ── wiring ──────────────────────────────────────────────────────
        ctl = self.controller
        ctl.state_changed.connect(self.page.render)
        ctl.fetch_failed.connect(self._on_fetch_failed)
        self.page.refresh_requested.connect(self._on_refresh)
        self.page.sort_requested.connect(self._on_sort)

    # ───────────────────────────────────────────────────────────────────
    def showEvent(self, event):
        super().showEvent(event)
        if not self._started:            # initial load, once
            self._started = True
            self.controller.fetch_movies()

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)

    @Slot()
    def _on_refresh(self):
        self.controller.fetch_movies()

    @Slot()
    def _on_sort(self):
        """Only the title sort is on a button; the controller supports all fields."""
        self.controller.sort_by(SortField.TITLE)

    @Slot(str)
    def _on_fetch_failed(self, message: str):
        # open() keeps the dialog window-modal without blocking the event loop
        self.alert = QMessageBox(QMessageBox.Warning, WINDOW_TITLE, message,
                                 QMessageBox.Ok, self)
        self.alert.open()
