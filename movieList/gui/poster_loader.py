"""
poster_loader
~~~~~~~~~~~~~
Fetch + cache poster pixmaps through Qt's own network stack so the GUI
thread never blocks on an image download.

    loader.poster_ready.connect(card_slot)
    pix = loader.request(poster_url("star_wars_episode_1.jpg"))
"""
from __future__ import annotations
from typing import Dict, Set

from PySide6.QtCore    import QObject, QUrl, Signal, Slot
from PySide6.QtGui     import QPixmap
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from movieList.settings import POSTER_BASE_URL
from movieList.utils    import log_debug


def poster_url(poster: str) -> str:
    """Absolute image address for a record's relative ``poster`` path."""
    return f"{POSTER_BASE_URL}{poster}"


class PosterLoader(QObject):
    """One GET per distinct URL; later requests are served from memory."""
    poster_ready = Signal(str, QPixmap)      # url, pixmap

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._nam = QNetworkAccessManager(self)
        self._nam.finished.connect(self._on_reply)
        self._cache: Dict[str, QPixmap] = {}
        self._pending: Set[str] = set()

    def request(self, url: str) -> QPixmap | None:
        """Return the cached pixmap, or start a download and return None."""
        if url in self._cache:
            return self._cache[url]
        if url not in self._pending:
            self._pending.add(url)
            reply = self._nam.get(QNetworkRequest(QUrl(url)))
            reply.setProperty("poster_url", url)     # QUrl may normalise the text
        return None

    @Slot(QNetworkReply)
    def _on_reply(self, reply: QNetworkReply) -> None:
        url = reply.property("poster_url")
        self._pending.discard(url)
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                log_debug(f"poster {url} failed: {reply.errorString()}")
                return
            pix = QPixmap()
            if not pix.loadFromData(reply.readAll()):
                log_debug(f"poster {url} is not a readable image")
                return
            self._cache[url] = pix
            self.poster_ready.emit(url, pix)
        finally:
            reply.deleteLater()
