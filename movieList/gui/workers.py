from PySide6.QtCore import QObject, Signal, Slot

from movieList.metadata.api_clients.movies_client import MoviesClient
from movieList.utils import log_debug

# ───────────────────────── Worker skeletons ───────────────────────────────
class _FetchWorker(QObject):
    """
    One GET of the movie list. Reports exactly once:
    ``succeeded(token, movies)`` or ``failed(token, detail)``,
    then ``finished``.
    """
    succeeded = Signal(int, object)      # token, list[Movie]
    failed    = Signal(int, str)         # token, error detail
    finished  = Signal()

    def __init__(self, token: int, client: MoviesClient):
        super().__init__()
        self.token  = token
        self.client = client

    @Slot()
    def run(self):
        try:
            movies = self.client.fetch_movies()
        except Exception as e:
            self.failed.emit(self.token, str(e))
            log_debug(f"fetch-worker #{self.token} error: {e!r}")
        else:
            self.succeeded.emit(self.token, movies)
        finally:
            self.finished.emit()
