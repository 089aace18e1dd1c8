from __future__ import annotations
import time
from typing import Dict, List

from PySide6.QtCore import QObject, QThread, Signal, Slot

from movieList.settings import ALERT_MESSAGE, REQUEST_TIMEOUT
from movieList.utils    import log_debug
from movieList.metadata.core.models import (
    Movie, SortField, SortOrder, SortDescriptor, ListState,
)
from movieList.metadata.sorting import sort_movies, next_order
from movieList.metadata.api_clients.movies_client import MoviesClient, client as default_client
from movieList.gui.workers import _FetchWorker


# ───────────────────────── Thread plumbing ────────────────────────────────
def _start_worker(worker: QObject, on_finished) -> QThread:
    """Move *worker* onto a fresh QThread and start it; returns the thread."""
    thr = QThread()
    worker.moveToThread(thr)

    worker.finished.connect(thr.quit)
    thr.finished.connect(on_finished)      # before start, a quick worker must not outrun it

    thr.started.connect(worker.run)
    thr.start()
    return thr


# ───────────────────────── Controller ─────────────────────────────────────
class MovieListController(QObject):
    """
    Sole owner of the movie list, the loading flag and the sort descriptor.

    Widgets never touch the list directly; they get an immutable
    ``ListState`` through ``state_changed`` or ``snapshot()``.

    * whole-state replacement when a fetch completes
    * in-place reorder on ``sort_by``
    * only the newest fetch may write; older replies are dropped
    """
    state_changed   = Signal(object)     # ListState
    loading_changed = Signal(bool)
    fetch_failed    = Signal(str)        # fixed apology text, one per failure

    def __init__(self, client: MoviesClient | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self._client = client or default_client

        self._movies: List[Movie] = []
        self._loading = False
        self._sort: SortDescriptor | None = None

        self._token = 0                  # id of the newest request
        self._alive = True
        self._workers: Dict[int, _FetchWorker] = {}
        self._threads: Dict[int, QThread] = {}

    # ------------------------------------------------------------------ state
    def snapshot(self) -> ListState:
        return ListState(tuple(self._movies), self._loading, self._sort)

    @property
    def loading(self) -> bool:
        return self._loading

    def _set_loading(self, value: bool) -> None:
        if value != self._loading:
            self._loading = value
            self.loading_changed.emit(value)

    def _publish(self) -> None:
        self.state_changed.emit(self.snapshot())

    # ------------------------------------------------------------------ fetch
    @Slot()
    def fetch_movies(self) -> int:
        """
        Start one GET of the movie list and return its request token.

        Overlapping calls each hit the network; whichever was issued last
        is the one whose result lands in the state.
        """
        if not self._alive:
            log_debug("fetch ignored: controller shut down")
            return self._token

        self._token += 1
        token = self._token
        log_debug(f"fetch #{token} → {self._client.url}")

        self._set_loading(True)
        self._publish()

        worker = _FetchWorker(token, self._client)
        worker.succeeded.connect(self._on_fetch_succeeded)
        worker.failed.connect(self._on_fetch_failed)
        thr = _start_worker(worker, self._on_thread_finished)
        # both stay referenced until the thread has really stopped
        self._workers[token] = worker
        self._threads[token] = thr
        return token

    def _accepts(self, token: int) -> bool:
        if not self._alive:
            log_debug(f"fetch #{token} result dropped: controller shut down")
            return False
        if token != self._token:
            log_debug(f"fetch #{token} result ignored: superseded by #{self._token}")
            return False
        return True

    @Slot(int, object)
    def _on_fetch_succeeded(self, token: int, movies: List[Movie]) -> None:
        if not self._accepts(token):
            return
        self._movies = list(movies)
        self._sort = None
        self._set_loading(False)
        log_debug(f"fetch #{token} ok: {len(self._movies)} movies")
        self._publish()

    @Slot(int, str)
    def _on_fetch_failed(self, token: int, detail: str) -> None:
        if not self._accepts(token):
            return
        self._movies = []
        self._sort = None
        self._set_loading(False)
        log_debug(f"fetch #{token} failed: {detail}")
        self._publish()
        self.fetch_failed.emit(ALERT_MESSAGE)

    @Slot()
    def _on_thread_finished(self) -> None:
        thr = self.sender()
        for token, running in list(self._threads.items()):
            if running is thr:
                thr.wait()
                del self._threads[token]
                self._workers.pop(token, None)

    # ------------------------------------------------------------------ sort
    def sort_by(self, field: SortField, order: SortOrder | None = None) -> SortDescriptor:
        """
        Reorder the list in place by *field*.

        Without *order* the direction toggles off the previous descriptor
        regardless of which field it was for: first call descending, then
        ascending, and so on.
        """
        applied = order or next_order(self._sort)
        sort_movies(self._movies, field, applied)
        self._sort = SortDescriptor(field, applied)
        self._publish()
        return self._sort

    # ------------------------------------------------------------------ teardown
    def shutdown(self) -> None:
        """Stop accepting results and wait for running fetch threads."""
        self._alive = False
        # one budget for all threads, not one per thread
        deadline = time.monotonic() + REQUEST_TIMEOUT + 0.5
        for token, thr in list(self._threads.items()):
            thr.quit()
            remaining_ms = max(0, int((deadline - time.monotonic()) * 1000))
            if not thr.wait(remaining_ms):
                # keep the reference, a running QThread must not be collected
                log_debug(f"fetch #{token} thread still running at shutdown")
                continue
            del self._threads[token]
            self._workers.pop(token, None)
