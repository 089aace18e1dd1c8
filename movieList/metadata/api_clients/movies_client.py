# movieList/metadata/api_clients/movies_client.py
from __future__ import annotations

from typing import Any, List

import requests

from movieList.utils import log_debug
from movieList.settings import MOVIES_URL, REQUEST_TIMEOUT
from movieList.metadata.core.models import Movie


class MovieFetchError(RuntimeError):
    """Any failure to turn the endpoint response into a movie list."""


class MoviesClient:
    """
    Thin wrapper around the static ``movies.json`` endpoint.

    One GET per call, no auth, no params, no caching. Every failure mode
    (network, HTTP status, bad JSON, wrong shape) comes out as
    ``MovieFetchError`` with the original exception chained.
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(self, url: str | None = None, timeout: float | None = None):
        self.url = url or MOVIES_URL
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT

    def _get(self) -> requests.Response:
        return requests.get(self.url, timeout=self.timeout)

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def fetch_movies(self) -> List[Movie]:
        try:
            resp = self._get()
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise MovieFetchError(f"GET {self.url} failed: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:        # requests' JSONDecodeError subclasses it
            raise MovieFetchError(f"malformed JSON from {self.url}") from exc

        movies = self._parse(payload)
        log_debug(f"movies → {len(movies)} records from {self.url}")
        return movies

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _parse(payload: Any) -> List[Movie]:
        if not isinstance(payload, dict):
            raise MovieFetchError("response body is not a JSON object")
        raw = payload.get("movies")
        if not isinstance(raw, list):
            raise MovieFetchError("response body has no 'movies' array")
        try:
            return [Movie.from_json(entry) for entry in raw]
        except ValueError as exc:
            raise MovieFetchError(f"bad movie entry: {exc}") from exc


client = MoviesClient()
