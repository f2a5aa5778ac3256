"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The API layer (higher) and the domain, catalog and db layers (lower) all send / receive these,
so none of them depends on another layer's internal representation (SQLAlchemy rows, TMDB payloads, pydantic requests).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.core.shared_types import GameResult, GameStatus, TurnStatus, WinCondition

# Type aliases to make the models easier to read
UserId = str
MovieId = int
ActorId = int


@dataclass(frozen=True)
class CastMember:
    id: ActorId
    name: str


@dataclass(frozen=True)
class Movie:
    """A movie as the catalog knows it. Year is unknown for unreleased / undated entries."""

    id: MovieId
    title: str
    year: Optional[int]


@dataclass
class GuessModel:
    id: UUID
    turn_id: UUID
    movie_id: MovieId
    movie_title: str
    movie_year: Optional[int]
    result: bool


@dataclass
class TurnModel:
    """One player's slot: the movie to connect from and up to 3 guesses against it."""

    id: UUID
    game_id: UUID
    user_id: UserId
    movie_id: MovieId
    movie_title: str
    movie_year: Optional[int]
    cast_ids: list[ActorId]
    status: TurnStatus
    common_cast: Optional[list[CastMember]] = None
    guess_count: int = 0
    guesses: list[GuessModel] = field(default_factory=list)


@dataclass
class GameModel:
    """Transport-safe representation of a game. Turns are ordered newest first."""

    id: UUID
    player1_id: UserId
    player2_id: UserId
    current_turn_user_id: UserId
    status: GameStatus
    result: Optional[GameResult] = None
    win_condition: Optional[WinCondition] = None
    destination_movie: Optional[Movie] = None
    turns: list[TurnModel] = field(default_factory=list)
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class GameUpdate:
    """Partial update of a game record. Fields left as None are not touched."""

    current_turn_user_id: Optional[UserId] = None
    status: Optional[GameStatus] = None
    result: Optional[GameResult] = None
    win_condition: Optional[WinCondition] = None
