"""Protocol store (implemented with SQLAlchemy, but the service only knows this contract)."""

from contextlib import AbstractContextManager
from typing import Optional, Protocol
from uuid import UUID

from src.core.models import (
    ActorId,
    CastMember,
    GameModel,
    GameUpdate,
    GuessModel,
    Movie,
    TurnModel,
    UserId,
)
from src.core.shared_types import TurnStatus


class GameStore(Protocol):
    """
    Persistence layer orchestration.

    Readers return None when the record does not exist; it is up to the caller to decide what that means.
    Writers only stage their changes. They become visible once the surrounding atomic() block exits without error.
    """

    def atomic(self) -> AbstractContextManager[None]:
        """Commit everything written inside the block at once, or nothing at all."""
        ...

    # -- Readers --
    def get_game(self, game_id: UUID) -> Optional[GameModel]:
        """Game with all its turns (newest first) and their guesses."""
        ...

    def get_active_turn(self, game_id: UUID) -> Optional[TurnModel]:
        """The unique turn in progress of a game."""
        ...

    def get_turn(self, turn_id: UUID) -> Optional[TurnModel]:
        """Any turn, whatever its status, with its guesses."""
        ...

    def list_success_turns_with_common_cast(
        self, game_id: UUID
    ) -> list[list[CastMember]]:
        """Common cast of every successful turn of the game."""
        ...

    def list_player_games(self, user_id: UserId) -> list[GameModel]:
        """Games the user plays in, most recently updated first. Turns are not loaded."""
        ...

    def latest_notification(self, user_id: UserId) -> Optional[str]:
        ...

    # -- Writers --
    def create_game(
        self,
        player1_id: UserId,
        player2_id: UserId,
        first_turn_user_id: UserId,
        movie: Movie,
        cast_ids: list[ActorId],
    ) -> GameModel:
        """New pending game together with its first turn."""
        ...

    def claim_turn(self, turn_id: UUID, expected_guess_count: int) -> bool:
        """
        Compare-and-swap on the turn: bump its guess count if it is still in progress with 'expected_guess_count' guesses.
        Returns False if another guess got there first.
        """
        ...

    def create_guess(
        self, turn_id: UUID, number: int, movie: Movie, result: bool
    ) -> GuessModel:
        ...

    def update_turn_status(
        self,
        turn_id: UUID,
        status: TurnStatus,
        common_cast: Optional[list[CastMember]] = None,
    ) -> None:
        ...

    def create_turn(
        self, game_id: UUID, user_id: UserId, movie: Movie, cast_ids: list[ActorId]
    ) -> TurnModel:
        ...

    def update_game(self, game_id: UUID, changes: GameUpdate) -> Optional[GameModel]:
        ...

    def create_notification(self, user_id: UserId, message: str) -> None:
        ...
