"""Unit tests for src/connection/engine.py"""

from uuid import uuid4

import pytest

from src.connection.engine import Verdict, evaluate_guess, shared_cast
from src.connection.outcomes import NoOp
from src.core.exceptions import CatalogUnavailable
from src.core.models import CastMember, TurnModel
from src.core.shared_types import TurnStatus
from tests.fakes import FakeCatalog, cast_of


def make_turn(movie_id: int = 105, cast_ids: list[int] | None = None) -> TurnModel:
    return TurnModel(
        id=uuid4(),
        game_id=uuid4(),
        user_id="player2",
        movie_id=movie_id,
        movie_title="Back to the Future",
        movie_year=1985,
        cast_ids=cast_ids if cast_ids is not None else [1, 2, 3],
        status=TurnStatus.IN_PROGRESS,
    )


def test_guess_sharing_one_actor(catalog: FakeCatalog) -> None:
    """Turn cast {1,2,3} against guessed cast {3,4,5}: connects through actor 3 only."""
    catalog.add_movie(200, cast_of(3, 4, 5))

    verdict = evaluate_guess(make_turn(), 200, catalog)

    assert isinstance(verdict, Verdict)
    assert verdict.success
    assert verdict.common_cast == [CastMember(id=3, name="Actor 3")]
    assert verdict.guess_cast_ids == [3, 4, 5]


def test_guess_sharing_nobody(catalog: FakeCatalog) -> None:
    catalog.add_movie(200, cast_of(4, 5))

    verdict = evaluate_guess(make_turn(), 200, catalog)

    assert isinstance(verdict, Verdict)
    assert not verdict.success
    assert verdict.common_cast == []


def test_evaluation_is_deterministic(catalog: FakeCatalog) -> None:
    catalog.add_movie(200, cast_of(3, 1, 9))
    turn = make_turn()

    first = evaluate_guess(turn, 200, catalog)
    second = evaluate_guess(turn, 200, catalog)
    assert first == second


def test_common_cast_keeps_guessed_movie_order() -> None:
    guess_cast = cast_of(3, 9, 1)
    assert [m.id for m in shared_cast([1, 2, 3], guess_cast)] == [3, 1]


def test_same_movie_is_a_no_op_without_catalog_call(catalog: FakeCatalog) -> None:
    """Guessing the movie of the turn is decided before asking the catalog anything."""
    catalog.unavailable = True

    verdict = evaluate_guess(make_turn(movie_id=105), 105, catalog)

    assert isinstance(verdict, NoOp)
    assert catalog.calls == []


def test_catalog_failure_propagates(catalog: FakeCatalog) -> None:
    catalog.unavailable = True
    with pytest.raises(CatalogUnavailable):
        evaluate_guess(make_turn(), 200, catalog)


def test_movie_without_known_cast_does_not_connect(catalog: FakeCatalog) -> None:
    verdict = evaluate_guess(make_turn(), 999, catalog)
    assert isinstance(verdict, Verdict)
    assert not verdict.success
