"""Test doubles shared by the service and domain tests."""

from src.core.exceptions import CatalogUnavailable
from src.core.models import CastMember, Movie, MovieId


def cast_of(*actor_ids: int) -> list[CastMember]:
    """Cast list where every actor is simply called after their ID."""
    return [CastMember(id=actor_id, name=f"Actor {actor_id}") for actor_id in actor_ids]


class FakeCatalog:
    """Mock the MovieCatalog with a dictionary of movies and their cast."""

    def __init__(self) -> None:
        self.movies: dict[MovieId, Movie] = {}
        self.credits: dict[MovieId, list[CastMember]] = {}
        self.top_rated: list[Movie] = []
        self.unavailable = False
        self.calls: list[tuple[str, object]] = []

    def add_movie(
        self,
        movie_id: MovieId,
        cast: list[CastMember],
        title: str | None = None,
        year: int | None = 2000,
    ) -> Movie:
        movie = Movie(id=movie_id, title=title or f"Movie {movie_id}", year=year)
        self.movies[movie_id] = movie
        self.credits[movie_id] = cast
        return movie

    def search_movies(self, query: str) -> list[Movie]:
        self._record("search_movies", query)
        return [m for m in self.movies.values() if query.lower() in m.title.lower()]

    def get_movie_credits(self, movie_id: MovieId) -> list[CastMember]:
        self._record("get_movie_credits", movie_id)
        return list(self.credits.get(movie_id, []))

    def get_movie_details(self, movie_id: MovieId) -> Movie:
        self._record("get_movie_details", movie_id)
        if movie_id not in self.movies:
            raise CatalogUnavailable(f"Unknown movie {movie_id}")
        return self.movies[movie_id]

    def top_rated_movies(self) -> list[Movie]:
        self._record("top_rated_movies", None)
        return list(self.top_rated)

    def _record(self, method: str, argument: object) -> None:
        if self.unavailable:
            raise CatalogUnavailable("Catalog is down.")
        self.calls.append((method, argument))


