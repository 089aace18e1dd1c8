from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep debug lines out of the package directory."""
    from movieList import utils

    log_path = tmp_path / "movie_list_debug.log"
    monkeypatch.setattr(utils, "LOG_PATH", log_path)
    return log_path


@pytest.fixture
def movie_payload() -> dict:
    return {
        "movies": [
            {
                "title": "Star Wars: Episode IV - A New Hope",
                "episode_number": "4",
                "main_characters": ["Luke Skywalker", "Han Solo"],
                "description": "Luke joins the Rebellion.",
                "poster": "star_wars_episode_4_poster.png",
                "hero_image": "star_wars_episode_4_hero.jpg",
            },
            {
                "title": "Star Wars: Episode I - The Phantom Menace",
                "episode_number": "1",
                "description": "Two Jedi escape a hostile blockade.",
                "poster": "star_wars_episode_1_poster.png",
            },
            {
                "title": "Star Wars: Episode V - The Empire Strikes Back",
                "episode_number": "5",
                "description": "The Empire strikes back.",
                "poster": "star_wars_episode_5_poster.png",
            },
        ]
    }
