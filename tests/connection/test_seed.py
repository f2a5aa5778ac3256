"""Unit tests for src/connection/seed.py"""

from random import Random

import pytest

from src.connection.seed import pick_seed_movie
from src.core.exceptions import CatalogUnavailable
from src.core.models import Movie

TOP_RATED = [
    Movie(id=238, title="The Godfather", year=1972),
    Movie(id=278, title="The Shawshank Redemption", year=1994),
    Movie(id=240, title="The Godfather Part II", year=1974),
]


def test_same_seed_same_movie() -> None:
    first = pick_seed_movie(TOP_RATED, Random(42))
    second = pick_seed_movie(TOP_RATED, Random(42))
    assert first == second
    assert first in TOP_RATED


def test_every_movie_can_be_picked() -> None:
    rng = Random(0)
    picked = {pick_seed_movie(TOP_RATED, rng).id for _ in range(200)}
    assert picked == {238, 278, 240}


def test_no_candidates() -> None:
    with pytest.raises(CatalogUnavailable):
        pick_seed_movie([], Random(1))
