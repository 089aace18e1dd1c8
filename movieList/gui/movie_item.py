from __future__ import annotations
from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout
)

from ..settings import POSTER_SIZE
from ..metadata.core.models import Movie


def episode_caption(movie: Movie) -> str:
    return f"Episode {movie.episode_number}"


class MovieItem(QFrame):
    """One list row: poster thumbnail | title over episode number."""

    def __init__(self, movie: Movie, parent=None):
        super().__init__(parent)
        self.setObjectName("MovieItem")
        self.movie = movie

        root = QHBoxLayout(self)
        root.setContentsMargins(4, 2, 4, 2)

        # ── poster (grey square until the image arrives) ─────────────────
        self.poster = QLabel(alignment=Qt.AlignCenter)
        self.poster.setFixedSize(POSTER_SIZE, POSTER_SIZE)
        self.poster.setStyleSheet("background:#dddddd;")
        root.addWidget(self.poster)

        # ── text column ──────────────────────────────────────────────────
        content = QVBoxLayout()
        content.setContentsMargins(10, 0, 0, 0)

        self.title_label = QLabel(movie.title)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("font-size:16px;")

        self.episode_label = QLabel(episode_caption(movie))
        self.episode_label.setStyleSheet("font-size:12px; font-style:italic;")

        content.addWidget(self.title_label)
        content.addWidget(self.episode_label)
        content.addStretch()
        root.addLayout(content, 1)

    def set_poster(self, pix: QPixmap) -> None:
        self.poster.setPixmap(
            pix.scaled(POSTER_SIZE, POSTER_SIZE, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )
