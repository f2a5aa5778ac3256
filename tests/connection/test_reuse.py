"""Unit tests for src/connection/reuse.py"""

from src.connection.reuse import actor_usage, check_reuse
from tests.fakes import cast_of


def test_actor_counted_once_per_turn() -> None:
    """Duplicates within the same turn's common cast do not add up."""
    usage = actor_usage([cast_of(1, 1, 2), cast_of(1)])
    assert usage[1] == 2
    assert usage[2] == 1


def test_allowed_below_the_cap() -> None:
    prior = [cast_of(3), cast_of(3, 4)]
    check = check_reuse(prior, cast_of(3))
    assert check.allowed
    assert check.overused_actor_name is None


def test_rejected_once_actor_connected_three_turns() -> None:
    prior = [cast_of(3), cast_of(3, 4), cast_of(3)]
    check = check_reuse(prior, cast_of(9, 3))
    assert not check.allowed
    assert check.overused_actor_name == "Actor 3"


def test_any_overused_actor_rejects_the_guess() -> None:
    """Even if another shared actor is still fresh, the over-used one blocks the guess."""
    prior = [cast_of(7), cast_of(7), cast_of(7)]
    check = check_reuse(prior, cast_of(1, 7))
    assert not check.allowed
    assert check.overused_actor_name == "Actor 7"


def test_failed_guess_is_never_rejected() -> None:
    prior = [cast_of(3), cast_of(3), cast_of(3)]
    assert check_reuse(prior, []).allowed


def test_custom_cap() -> None:
    assert not check_reuse([cast_of(5)], cast_of(5), cap=1).allowed
