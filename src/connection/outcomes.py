"""
Final result of a guess submission, as seen by the caller.

Expected business-rule outcomes (same movie, over-used actor, movie already played) are values here, not exceptions.
"""

from dataclasses import dataclass

from src.core.models import UserId


@dataclass(frozen=True)
class NoOp:
    """Guess named the movie of the active turn. Nothing was recorded."""


@dataclass(frozen=True)
class AlreadyUsed:
    """Movie was already played earlier in this game. Nothing was recorded."""

    movie_title: str


@dataclass(frozen=True)
class Rejected:
    """Connecting actor has been used too often. Nothing was recorded, the player was notified."""

    actor_name: str


@dataclass(frozen=True)
class Advanced:
    """Guess connected. A new turn was created for the other player."""

    next_user_id: UserId


@dataclass(frozen=True)
class Miss:
    """Guess did not connect, the turn continues."""

    guesses_remaining: int


@dataclass(frozen=True)
class GameOver:
    """Third failed guess on the turn. The game is completed."""

    winner_id: UserId


Outcome = NoOp | AlreadyUsed | Rejected | Advanced | Miss | GameOver
