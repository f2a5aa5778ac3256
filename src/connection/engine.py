"""
Turn Resolution Engine.

Judges a guess against the active turn without committing anything.
Deciding what happens to the turn / game is left to the service, after the actor reuse check had its say.
"""

import logging
from dataclasses import dataclass

from src.catalog.catalog import MovieCatalog
from src.connection.outcomes import NoOp
from src.core.models import ActorId, CastMember, MovieId, TurnModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verdict:
    """Raw judgement of a guess, before the actor reuse cap is applied."""

    common_cast: list[CastMember]
    guess_cast_ids: list[ActorId]

    @property
    def success(self) -> bool:
        return len(self.common_cast) > 0


def shared_cast(
    turn_cast_ids: list[ActorId], guess_cast: list[CastMember]
) -> list[CastMember]:
    """Cast members of the guessed movie that also played in the turn's movie (guessed movie's order)."""
    turn_cast = set(turn_cast_ids)
    return [
        CastMember(id=member.id, name=member.name)
        for member in guess_cast
        if member.id in turn_cast
    ]


def evaluate_guess(
    active_turn: TurnModel, guess_movie_id: MovieId, catalog: MovieCatalog
) -> Verdict | NoOp:
    """
    Compare the guessed movie's cast with the cast of the active turn's movie.
    ----

    1. Same movie as the turn's movie? --> NoOp, and the catalog is not even asked.
    2. Fetch the guessed movie's cast (CatalogUnavailable propagates).
    3. Intersect with the turn's cast ids.
    """
    if guess_movie_id == active_turn.movie_id:
        return NoOp()

    guess_cast = catalog.get_movie_credits(guess_movie_id)
    common_cast = shared_cast(active_turn.cast_ids, guess_cast)

    logger.debug(
        f"Guess {guess_movie_id} against turn {active_turn.id}: {len(common_cast)} shared cast member(s)"
    )
    return Verdict(
        common_cast=common_cast,
        guess_cast_ids=[member.id for member in guess_cast],
    )
