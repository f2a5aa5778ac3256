"""Implementation of MovieCatalog on top of The Movie Database (TMDB) REST API."""

import logging
from typing import Any, Optional, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from src.catalog.schemas import ApiCredits, ApiMovie, ApiMovieList
from src.core.config import settings
from src.core.exceptions import CatalogUnavailable
from src.core.models import CastMember, Movie, MovieId

logger = logging.getLogger(__name__)

Payload = TypeVar("Payload", bound=BaseModel)


class TMDBCatalog:
    """Movie information fetched from TMDB (v3 API, bearer token auth)."""

    def __init__(
        self,
        api_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_token = api_token if api_token is not None else settings.tmdb_api_token
        self.base_url = (base_url or settings.tmdb_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.tmdb_timeout_seconds

    def search_movies(self, query: str) -> list[Movie]:
        params = {
            "query": query,
            "include_adult": "false",
            "language": "en-US",
            "page": 1,
        }
        payload = self._get("/search/movie", ApiMovieList, params)
        return [movie.to_movie() for movie in payload.results]

    def get_movie_credits(self, movie_id: MovieId) -> list[CastMember]:
        payload = self._get(f"/movie/{movie_id}/credits", ApiCredits)
        return [member.to_cast_member() for member in payload.cast]

    def get_movie_details(self, movie_id: MovieId) -> Movie:
        payload = self._get(f"/movie/{movie_id}", ApiMovie, {"language": "en-US"})
        return payload.to_movie()

    def top_rated_movies(self) -> list[Movie]:
        params = {"language": "en-US", "page": 1}
        payload = self._get("/movie/top_rated", ApiMovieList, params)
        return [movie.to_movie() for movie in payload.results]

    # -- Internal helpers --
    def _get_headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "Authorization": f"Bearer {self.api_token}",
        }

    def _get(
        self, path: str, schema: type[Payload], params: Optional[dict[str, Any]] = None
    ) -> Payload:
        """GET + validation. Whatever goes wrong on the way is reported as CatalogUnavailable."""
        url = f"{self.base_url}{path}"
        try:
            response = requests.get(
                url, headers=self._get_headers(), params=params, timeout=self.timeout
            )
            response.raise_for_status()
            return schema.model_validate(response.json())
        except requests.RequestException as e:
            logger.error(f"TMDB request to {path} failed: {e}")
            raise CatalogUnavailable(f"Movie catalog request failed: {path}") from e
        except (ValueError, ValidationError) as e:
            logger.error(f"TMDB returned an unexpected payload for {path}: {e}")
            raise CatalogUnavailable(
                f"Movie catalog returned an invalid payload: {path}"
            ) from e
