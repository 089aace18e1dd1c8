"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST endpoints.
Import the *client* singleton if you only need one global instance.
"""

from movieList.metadata.api_clients.movies_client import (
    client as movies_client,
    MoviesClient,
    MovieFetchError,
)

__all__ = ["movies_client", "MoviesClient", "MovieFetchError"]
