from __future__ import annotations
from typing import Dict, List

from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QListWidget,
    QListWidgetItem, QProgressBar, QPushButton, QAbstractItemView
)

from ..settings import WINDOW_TITLE
from ..metadata.core.models import ListState
from .movie_item    import MovieItem
from .poster_loader import PosterLoader, poster_url


# -------------------------------------------------------------------------
class PullToRefreshList(QListWidget):
    """List that asks for a refresh when scrolled upward past the top."""
    refresh_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.refreshing = False
        self.setVerticalScrollMode(QAbstractItemView.ScrollPerPixel)
        self.setSelectionMode(QAbstractItemView.NoSelection)

    def wheelEvent(self, ev) -> None:
        bar = self.verticalScrollBar()
        at_top = bar.value() == bar.minimum()
        super().wheelEvent(ev)
        if at_top and ev.angleDelta().y() > 0 and not self.refreshing:
            self.refresh_requested.emit()


# -------------------------------------------------------------------------
class MovieListPage(QWidget):
    """Header, movie rows, busy bar and the Sort button."""
    refresh_requested = Signal()
    sort_requested    = Signal()

    def __init__(self, posters: PosterLoader | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.posters = posters
        self._items: Dict[str, List[MovieItem]] = {}   # poster url → rows showing it
        self._build_ui()
        self._connect()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(10, 0, 10, 5)

        self.header = QLabel(WINDOW_TITLE)
        self.header.setStyleSheet("font-size:20px; font-weight:bold; margin:8px 2px;")
        root.addWidget(self.header)

        self.list = PullToRefreshList()
        root.addWidget(self.list, 1)

        # ── bottom row: busy bar (left) | Sort (right) ──────────────────
        footer = QHBoxLayout()
        self.busy = QProgressBar()
        self.busy.setRange(0, 0)               # indeterminate
        self.busy.setTextVisible(False)
        self.busy.setMaximumHeight(6)
        self.busy.hide()

        self.sort_btn = QPushButton("Sort")
        self.sort_btn.setAutoDefault(False)

        footer.addWidget(self.busy, 1)
        footer.addStretch()
        footer.addWidget(self.sort_btn, 0, Qt.AlignRight)
        root.addLayout(footer)

    def _connect(self) -> None:
        self.list.refresh_requested.connect(self.refresh_requested)
        self.sort_btn.clicked.connect(lambda: self.sort_requested.emit())
        if self.posters is not None:
            self.posters.poster_ready.connect(self._on_poster_ready)

    # ----- slots fed by the controller -------------------------------------
    @Slot(object)
    def render(self, state: ListState) -> None:
        """Rebuild the rows from *state*; one row per movie."""
        self.set_loading(state.loading)

        self.list.clear()
        self._items.clear()
        for movie in state.movies:
            item = QListWidgetItem(self.list)
            item.setData(Qt.UserRole, movie.episode_number)
            card = MovieItem(movie)
            item.setSizeHint(card.sizeHint())
            self.list.setItemWidget(item, card)

            url = poster_url(movie.poster)
            self._items.setdefault(url, []).append(card)
            if self.posters is not None:
                pix = self.posters.request(url)
                if pix is not None:
                    card.set_poster(pix)

    @Slot(bool)
    def set_loading(self, loading: bool) -> None:
        self.list.refreshing = loading
        self.busy.setVisible(loading)

    @Slot(str, QPixmap)
    def _on_poster_ready(self, url: str, pix: QPixmap) -> None:
        for card in self._items.get(url, ()):
            card.set_poster(pix)

    # ----- read helpers ----------------------------------------------------
    def row_keys(self) -> List[str]:
        return [self.list.item(i).data(Qt.UserRole) for i in range(self.list.count())]

    def row_titles(self) -> List[str]:
        return [self.list.itemWidget(self.list.item(i)).movie.title
                for i in range(self.list.count())]
