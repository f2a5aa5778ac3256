"""Choosing the starting movie of a game that was not started from a player's pick (e.g. a rematch)."""

from random import Random
from typing import Sequence

from src.core.exceptions import CatalogUnavailable
from src.core.models import Movie


def pick_seed_movie(movies: Sequence[Movie], rng: Random) -> Movie:
    """Pick one of the candidate movies. The random source is injected so the choice is reproducible."""
    if not movies:
        raise CatalogUnavailable("Catalog returned no movies to start a game from.")
    return movies[rng.randrange(len(movies))]
