from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QPoint, QPointF, Qt
from PySide6.QtGui import QPixmap, QWheelEvent

from movieList.gui import controller as ctl_mod
from movieList.gui import poster_loader
from movieList.gui.main_window import MainWindow
from movieList.gui.movie_item import MovieItem, episode_caption
from movieList.gui.movie_list_page import MovieListPage
from movieList.metadata.api_clients.movies_client import MovieFetchError
from movieList.metadata.core.models import ListState, Movie
from movieList.settings import ALERT_MESSAGE, POSTER_BASE_URL, POSTER_SIZE


def _movies(payload: dict) -> tuple[Movie, ...]:
    return tuple(Movie.from_json(m) for m in payload["movies"])


@pytest.fixture
def no_poster_downloads(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    requested: list[str] = []

    def _request(self, url):
        requested.append(url)
        return None

    monkeypatch.setattr(poster_loader.PosterLoader, "request", _request)
    return requested


def _run_inline(worker, on_finished) -> MagicMock:
    worker.run()
    return MagicMock()


# ───────────────────────── renderer ──────────────────────────────────────
def test_episode_caption() -> None:
    assert episode_caption(Movie("A New Hope", "4", "d", "p.png")) == "Episode 4"


def test_movie_item_shows_title_and_episode(qapp) -> None:
    item = MovieItem(Movie("A New Hope", "4", "d", "p.png"))
    assert item.title_label.text() == "A New Hope"
    assert item.episode_label.text() == "Episode 4"
    assert item.poster.width() == POSTER_SIZE and item.poster.height() == POSTER_SIZE


def test_movie_item_set_poster_scales_to_thumbnail(qapp) -> None:
    item = MovieItem(Movie("A New Hope", "4", "d", "p.png"))
    pix = QPixmap(200, 300)
    pix.fill(Qt.red)

    item.set_poster(pix)

    shown = item.poster.pixmap()
    assert shown.height() == POSTER_SIZE
    assert shown.width() <= POSTER_SIZE


def test_poster_url_joins_base_and_relative_path() -> None:
    assert poster_loader.poster_url("ep4.png") == f"{POSTER_BASE_URL}ep4.png"


def test_poster_loader_serves_cached_pixmap_without_network(qapp) -> None:
    loader = poster_loader.PosterLoader()
    loader._nam = MagicMock()
    pix = QPixmap(4, 4)
    loader._cache["https://img.test/a.png"] = pix

    assert loader.request("https://img.test/a.png") is pix
    loader._nam.get.assert_not_called()


def test_poster_loader_coalesces_pending_requests(qapp) -> None:
    loader = poster_loader.PosterLoader()
    loader._nam = MagicMock()

    assert loader.request("https://img.test/b.png") is None
    assert loader.request("https://img.test/b.png") is None

    assert loader._nam.get.call_count == 1


# ───────────────────────── list page ─────────────────────────────────────
def test_render_one_row_per_movie_keyed_by_episode(qapp, movie_payload: dict, no_poster_downloads) -> None:
    page = MovieListPage(poster_loader.PosterLoader())
    movies = _movies(movie_payload)

    page.render(ListState(movies, False, None))

    assert page.row_keys() == ["4", "1", "5"]
    assert len(set(page.row_keys())) == page.list.count() == 3
    assert page.row_titles()[0] == "Star Wars: Episode IV - A New Hope"
    assert no_poster_downloads == [poster_loader.poster_url(m.poster) for m in movies]


def test_render_replaces_previous_rows(qapp, movie_payload: dict) -> None:
    page = MovieListPage()
    page.render(ListState(_movies(movie_payload), False, None))

    page.render(ListState((), False, None))

    assert page.list.count() == 0


def test_busy_bar_follows_loading_flag(qapp) -> None:
    page = MovieListPage()
    page.render(ListState((), True, None))
    assert not page.busy.isHidden()
    assert page.list.refreshing is True

    page.render(ListState((), False, None))
    assert page.busy.isHidden()


def test_poster_ready_updates_matching_rows(qapp, movie_payload: dict, no_poster_downloads) -> None:
    loader = poster_loader.PosterLoader()
    page = MovieListPage(loader)
    movies = _movies(movie_payload)
    page.render(ListState(movies, False, None))
    pix = QPixmap(64, 64)
    pix.fill(Qt.blue)

    loader.poster_ready.emit(poster_loader.poster_url(movies[1].poster), pix)

    cards = [page.list.itemWidget(page.list.item(i)) for i in range(page.list.count())]
    assert cards[1].poster.pixmap() is not None and not cards[1].poster.pixmap().isNull()
    assert cards[0].poster.pixmap() is None or cards[0].poster.pixmap().isNull()


def test_sort_button_emits_sort_requested(qapp) -> None:
    page = MovieListPage()
    seen: list[bool] = []
    page.sort_requested.connect(lambda: seen.append(True))

    page.sort_btn.click()

    assert seen == [True]


def _wheel_up(widget) -> QWheelEvent:
    return QWheelEvent(
        QPointF(5, 5), QPointF(widget.mapToGlobal(QPoint(5, 5))),
        QPoint(0, 0), QPoint(0, 120),
        Qt.NoButton, Qt.NoModifier, Qt.NoScrollPhase, False,
    )


def test_scrolling_up_at_top_requests_refresh(qapp) -> None:
    page = MovieListPage()
    seen: list[bool] = []
    page.refresh_requested.connect(lambda: seen.append(True))

    page.list.wheelEvent(_wheel_up(page.list))
    assert seen == [True]

    page.list.refreshing = True                 # already loading, no second request
    page.list.wheelEvent(_wheel_up(page.list))
    assert seen == [True]


# ───────────────────────── main window end-to-end ───────────────────────
def test_startup_then_failed_refresh(qapp, monkeypatch: pytest.MonkeyPatch, movie_payload: dict,
                                     no_poster_downloads) -> None:
    monkeypatch.setattr(ctl_mod, "_start_worker", _run_inline)

    client = MagicMock()
    client.url = "https://example.test/movies.json"
    client.fetch_movies.return_value = list(_movies(movie_payload))
    window = MainWindow(client)
    alerts: list[str] = []
    window.controller.fetch_failed.connect(alerts.append)

    window.show()                               # first show triggers the load

    assert client.fetch_movies.call_count == 1
    assert window.page.row_keys() == ["4", "1", "5"]
    assert window.controller.snapshot().loading is False
    assert alerts == []

    client.fetch_movies.side_effect = MovieFetchError("500 Server Error")
    window.refresh_action.trigger()

    assert window.page.list.count() == 0
    assert window.controller.snapshot().loading is False
    assert alerts == [ALERT_MESSAGE]
    assert window.alert.text() == ALERT_MESSAGE

    window.hide()
    window.show()                               # no second automatic load
    assert client.fetch_movies.call_count == 2

    window.close()


def test_sort_button_sorts_by_title(qapp, monkeypatch: pytest.MonkeyPatch, no_poster_downloads) -> None:
    monkeypatch.setattr(ctl_mod, "_start_worker", _run_inline)
    titles = ["Return of the Jedi", "A New Hope", "The Empire Strikes Back"]
    client = MagicMock()
    client.url = "https://example.test/movies.json"
    client.fetch_movies.return_value = [Movie(t, str(i), "d", "p.png") for i, t in enumerate(titles)]
    window = MainWindow(client)
    window.show()

    window.page.sort_btn.click()
    assert window.page.row_titles() == ["The Empire Strikes Back", "Return of the Jedi", "A New Hope"]

    window.page.sort_btn.click()
    assert window.page.row_titles() == ["A New Hope", "Return of the Jedi", "The Empire Strikes Back"]

    window.close()


def test_dark_palette_uses_accent_for_selection(qapp) -> None:
    from PySide6.QtGui import QColor, QPalette
    from movieList.utils import apply_dark_palette

    previous = qapp.palette()
    try:
        apply_dark_palette(qapp, accent="#ff8800")
        assert qapp.palette().color(QPalette.Highlight) == QColor("#ff8800")
        assert qapp.palette().color(QPalette.Link) == QColor("#ff8800")
    finally:
        qapp.setPalette(previous)
