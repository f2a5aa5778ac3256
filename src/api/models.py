"""Requests and Response models"""

from typing import Literal, Optional, Self
from uuid import UUID

from pydantic import BaseModel, field_validator, model_validator

from src.connection.outcomes import (
    Advanced,
    AlreadyUsed,
    GameOver,
    Miss,
    Outcome,
    Rejected,
)
from src.core.exceptions import InvalidRequestError
from src.core.models import CastMember, GameModel, GuessModel, Movie, TurnModel
from src.core.shared_types import GameResult, GameStatus, TurnStatus, WinCondition

UserId = str


def _require_user_id(value: str) -> str:
    if not value.strip():
        raise InvalidRequestError("User ID cannot be empty.")
    return value


def _require_movie_id(value: int) -> int:
    if value <= 0:
        raise InvalidRequestError(f"Invalid movie ID: {value!r}")
    return value


def _validate_movie_year(value: Optional[int]) -> Optional[int]:
    # first movies ever made are from the 1880s
    if value is not None and not 1870 <= value <= 2200:
        raise InvalidRequestError(f"Implausible movie year: {value!r}")
    return value


# --- REQUEST MODELS ---
class SubmitGuessRequest(BaseModel):
    game_id: UUID
    turn_id: UUID
    user_id: UserId
    movie_id: int
    movie_title: Optional[str] = None
    movie_year: Optional[int] = None

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, value: str) -> str:
        return _require_user_id(value)

    @field_validator("movie_id")
    @classmethod
    def validate_movie_id(cls, value: int) -> int:
        return _require_movie_id(value)

    @field_validator("movie_year")
    @classmethod
    def validate_movie_year(cls, value: Optional[int]) -> Optional[int]:
        return _validate_movie_year(value)


class CreateGameRequest(BaseModel):
    player_id: UserId
    opponent_id: UserId
    movie_id: int
    movie_title: Optional[str] = None
    movie_year: Optional[int] = None

    @field_validator(*["player_id", "opponent_id"])
    @classmethod
    def validate_user_ids(cls, value: str) -> str:
        return _require_user_id(value)

    @field_validator("movie_id")
    @classmethod
    def validate_movie_id(cls, value: int) -> int:
        return _require_movie_id(value)

    @field_validator("movie_year")
    @classmethod
    def validate_movie_year(cls, value: Optional[int]) -> Optional[int]:
        return _validate_movie_year(value)

    @model_validator(mode="after")
    def validate_distinct_players(self) -> Self:
        if self.player_id == self.opponent_id:
            raise InvalidRequestError("Cannot start a game against yourself.")
        return self


class RematchRequest(BaseModel):
    game_id: UUID
    user_id: UserId

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, value: str) -> str:
        return _require_user_id(value)


class GetGameRequest(BaseModel):
    game_id: UUID


class ListGamesRequest(BaseModel):
    user_id: UserId

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, value: str) -> str:
        return _require_user_id(value)


class SearchMoviesRequest(BaseModel):
    query: str

    @field_validator("query")
    @classmethod
    def validate_query(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Query is required.")
        return value.strip()


# --- RESPONSE MODELS ---
class MovieResponse(BaseModel):
    id: int
    title: str
    year: Optional[int]

    @classmethod
    def from_movie(cls, movie: Movie) -> Self:
        return cls(id=movie.id, title=movie.title, year=movie.year)


class CastMemberResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_cast_member(cls, member: CastMember) -> Self:
        return cls(id=member.id, name=member.name)


class GuessResponse(BaseModel):
    id: UUID
    movie_id: int
    movie_title: str
    movie_year: Optional[int]
    result: bool

    @classmethod
    def from_model(cls, guess: GuessModel) -> Self:
        return cls(
            id=guess.id,
            movie_id=guess.movie_id,
            movie_title=guess.movie_title,
            movie_year=guess.movie_year,
            result=guess.result,
        )


class TurnResponse(BaseModel):
    id: UUID
    user_id: UserId
    movie_id: int
    movie_title: str
    movie_year: Optional[int]
    status: TurnStatus
    common_cast: Optional[list[CastMemberResponse]]
    guesses: list[GuessResponse]

    @classmethod
    def from_model(cls, turn: TurnModel) -> Self:
        return cls(
            id=turn.id,
            user_id=turn.user_id,
            movie_id=turn.movie_id,
            movie_title=turn.movie_title,
            movie_year=turn.movie_year,
            status=turn.status,
            common_cast=(
                [CastMemberResponse.from_cast_member(m) for m in turn.common_cast]
                if turn.common_cast is not None
                else None
            ),
            guesses=[GuessResponse.from_model(guess) for guess in turn.guesses],
        )


class GameResponse(BaseModel):
    """Full game. Turns are ordered newest first, so turns[0] is the one being played."""

    game_id: UUID
    player1_id: UserId
    player2_id: UserId
    current_turn_user_id: UserId
    status: GameStatus
    result: Optional[GameResult]
    win_condition: Optional[WinCondition]
    turns: list[TurnResponse]

    @classmethod
    def from_model(cls, game: GameModel) -> Self:
        return cls(
            game_id=game.id,
            player1_id=game.player1_id,
            player2_id=game.player2_id,
            current_turn_user_id=game.current_turn_user_id,
            status=game.status,
            result=game.result,
            win_condition=game.win_condition,
            turns=[TurnResponse.from_model(turn) for turn in game.turns],
        )


class GameSummaryResponse(BaseModel):
    game_id: UUID
    player1_id: UserId
    player2_id: UserId
    current_turn_user_id: UserId
    status: GameStatus
    result: Optional[GameResult]
    result_label: Optional[str]


OutcomeKind = Literal["no_op", "already_used", "rejected", "advanced", "miss", "game_over"]


class GuessOutcomeResponse(BaseModel):
    outcome: OutcomeKind
    message: Optional[str] = None
    next_user_id: Optional[UserId] = None
    guesses_remaining: Optional[int] = None
    winner_id: Optional[UserId] = None

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> Self:
        if isinstance(outcome, AlreadyUsed):
            return cls(
                outcome="already_used",
                message=f"{outcome.movie_title} has already been used.",
            )
        if isinstance(outcome, Rejected):
            return cls(
                outcome="rejected",
                message=f"{outcome.actor_name} has already been used three times!",
            )
        if isinstance(outcome, Advanced):
            return cls(outcome="advanced", next_user_id=outcome.next_user_id)
        if isinstance(outcome, Miss):
            return cls(outcome="miss", guesses_remaining=outcome.guesses_remaining)
        if isinstance(outcome, GameOver):
            return cls(outcome="game_over", winner_id=outcome.winner_id)
        return cls(outcome="no_op")
