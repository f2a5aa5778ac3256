"""Protocol movie catalog (TMDB today, anything answering the same questions tomorrow)."""

from typing import Protocol

from src.core.models import CastMember, Movie, MovieId


class MovieCatalog(Protocol):
    """Read-only movie information. Every method raises CatalogUnavailable on failure."""

    def search_movies(self, query: str) -> list[Movie]:
        """Movies matching a free-text query, best match first."""
        ...

    def get_movie_credits(self, movie_id: MovieId) -> list[CastMember]:
        """Full cast of a movie."""
        ...

    def get_movie_details(self, movie_id: MovieId) -> Movie:
        """Title and release year of a movie."""
        ...

    def top_rated_movies(self) -> list[Movie]:
        """Well known movies, suitable to start a game from."""
        ...
