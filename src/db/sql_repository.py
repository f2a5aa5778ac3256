"""Implementation of GameStore using SQLAlchemy"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional
from uuid import UUID, uuid4

from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session

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
from src.core.shared_types import GameResult, GameStatus, TurnStatus, WinCondition
from src.db.schema import DBGame, DBGuess, DBNotification, DBTurn, utc_now


class SQLGameStore:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Commit everything written inside the block at once, or nothing at all."""
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # -- Readers --
    def get_game(self, game_id: UUID) -> Optional[GameModel]:
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        return self._to_game_model(game_db, self.list_turns(game_id))

    def get_active_turn(self, game_id: UUID) -> Optional[TurnModel]:
        query = select(DBTurn).where(
            DBTurn.game_id == game_id, DBTurn.status == TurnStatus.IN_PROGRESS
        )
        turn_db = self.db.scalar(query)
        if not turn_db:
            return None
        return self._to_turn_model(turn_db, self._fetch_guesses([turn_db.id]))

    def get_turn(self, turn_id: UUID) -> Optional[TurnModel]:
        turn_db = self.db.get(DBTurn, turn_id)
        if not turn_db:
            return None
        return self._to_turn_model(turn_db, self._fetch_guesses([turn_db.id]))

    def list_turns(self, game_id: UUID) -> list[TurnModel]:
        """All turns of a game, newest first."""
        query = (
            select(DBTurn)
            .where(DBTurn.game_id == game_id)
            .order_by(DBTurn.sequence.desc())
        )
        turns_db = list(self.db.scalars(query))
        guesses = self._fetch_guesses([turn.id for turn in turns_db])
        return [self._to_turn_model(turn, guesses) for turn in turns_db]

    def list_success_turns_with_common_cast(
        self, game_id: UUID
    ) -> list[list[CastMember]]:
        query = select(DBTurn.common_cast).where(
            DBTurn.game_id == game_id, DBTurn.status == TurnStatus.SUCCESS
        )
        return [self._to_cast(common_cast or []) for common_cast in self.db.scalars(query)]

    def list_player_games(self, user_id: UserId) -> list[GameModel]:
        query = (
            select(DBGame)
            .where(or_(DBGame.player1_id == user_id, DBGame.player2_id == user_id))
            .order_by(DBGame.updated_at.desc())
        )
        return [self._to_game_model(game_db, []) for game_db in self.db.scalars(query)]

    def latest_notification(self, user_id: UserId) -> Optional[str]:
        query = (
            select(DBNotification.message)
            .where(DBNotification.user_id == user_id)
            .order_by(DBNotification.created_at.desc())
            .limit(1)
        )
        return self.db.scalar(query)

    # -- Writers --
    def create_game(
        self,
        player1_id: UserId,
        player2_id: UserId,
        first_turn_user_id: UserId,
        movie: Movie,
        cast_ids: list[ActorId],
    ) -> GameModel:
        game_db = DBGame(
            id=uuid4(),
            player1_id=player1_id,
            player2_id=player2_id,
            current_turn_user_id=first_turn_user_id,
            status=GameStatus.PENDING,
        )
        self.db.add(game_db)
        self.db.flush()
        first_turn = self.create_turn(game_db.id, first_turn_user_id, movie, cast_ids)
        return self._to_game_model(game_db, [first_turn])

    def claim_turn(self, turn_id: UUID, expected_guess_count: int) -> bool:
        statement = (
            update(DBTurn)
            .where(
                DBTurn.id == turn_id,
                DBTurn.status == TurnStatus.IN_PROGRESS,
                DBTurn.guess_count == expected_guess_count,
            )
            .values(guess_count=DBTurn.guess_count + 1)
        )
        result = self.db.execute(statement)
        return result.rowcount == 1

    def create_guess(
        self, turn_id: UUID, number: int, movie: Movie, result: bool
    ) -> GuessModel:
        guess_db = DBGuess(
            id=uuid4(),
            turn_id=turn_id,
            number=number,
            movie_id=movie.id,
            movie_title=movie.title,
            movie_year=movie.year,
            result=result,
        )
        self.db.add(guess_db)
        self.db.flush()
        return self._to_guess_model(guess_db)

    def update_turn_status(
        self,
        turn_id: UUID,
        status: TurnStatus,
        common_cast: Optional[list[CastMember]] = None,
    ) -> None:
        turn_db = self.db.get(DBTurn, turn_id)
        if not turn_db:
            return
        turn_db.status = status
        if common_cast is not None:
            turn_db.common_cast = [
                {"id": member.id, "name": member.name} for member in common_cast
            ]
        self.db.flush()

    def create_turn(
        self, game_id: UUID, user_id: UserId, movie: Movie, cast_ids: list[ActorId]
    ) -> TurnModel:
        last_sequence = self.db.scalar(
            select(func.max(DBTurn.sequence)).where(DBTurn.game_id == game_id)
        )
        turn_db = DBTurn(
            id=uuid4(),
            game_id=game_id,
            user_id=user_id,
            sequence=(last_sequence or 0) + 1,
            movie_id=movie.id,
            movie_title=movie.title,
            movie_year=movie.year,
            cast_ids=list(cast_ids),
            status=TurnStatus.IN_PROGRESS,
            common_cast=None,
            guess_count=0,
        )
        self.db.add(turn_db)
        self.db.flush()
        return self._to_turn_model(turn_db, {})

    def update_game(self, game_id: UUID, changes: GameUpdate) -> Optional[GameModel]:
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        if changes.current_turn_user_id is not None:
            game_db.current_turn_user_id = changes.current_turn_user_id
        if changes.status is not None:
            game_db.status = changes.status
        if changes.result is not None:
            game_db.result = changes.result
        if changes.win_condition is not None:
            game_db.win_condition = changes.win_condition
        game_db.updated_at = utc_now()
        self.db.flush()
        return self._to_game_model(game_db, [])

    def create_notification(self, user_id: UserId, message: str) -> None:
        self.db.add(DBNotification(id=uuid4(), user_id=user_id, message=message))
        self.db.flush()

    # -- Internal helpers --
    def _fetch_game(self, game_id: UUID) -> Optional[DBGame]:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _fetch_guesses(self, turn_ids: list[UUID]) -> dict[UUID, list[GuessModel]]:
        """Guesses per turn, in the order they were made."""
        guesses: dict[UUID, list[GuessModel]] = {turn_id: [] for turn_id in turn_ids}
        if not turn_ids:
            return guesses
        query = (
            select(DBGuess)
            .where(DBGuess.turn_id.in_(turn_ids))
            .order_by(DBGuess.number)
        )
        for guess_db in self.db.scalars(query):
            guesses[guess_db.turn_id].append(self._to_guess_model(guess_db))
        return guesses

    def _to_game_model(self, game_db: DBGame, turns: list[TurnModel]) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        destination = (
            Movie(
                id=game_db.destination_movie_id,
                title=game_db.destination_movie_title or "",
                year=game_db.destination_movie_year,
            )
            if game_db.destination_movie_id is not None
            else None
        )
        return GameModel(
            id=game_db.id,
            player1_id=game_db.player1_id,
            player2_id=game_db.player2_id,
            current_turn_user_id=game_db.current_turn_user_id,
            status=GameStatus(game_db.status),
            result=GameResult(game_db.result) if game_db.result else None,
            win_condition=(
                WinCondition(game_db.win_condition) if game_db.win_condition else None
            ),
            destination_movie=destination,
            turns=turns,
            updated_at=game_db.updated_at,
        )

    def _to_turn_model(
        self, turn_db: DBTurn, guesses: dict[UUID, list[GuessModel]]
    ) -> TurnModel:
        return TurnModel(
            id=turn_db.id,
            game_id=turn_db.game_id,
            user_id=turn_db.user_id,
            movie_id=turn_db.movie_id,
            movie_title=turn_db.movie_title,
            movie_year=turn_db.movie_year,
            cast_ids=list(turn_db.cast_ids),
            status=TurnStatus(turn_db.status),
            common_cast=(
                self._to_cast(turn_db.common_cast)
                if turn_db.common_cast is not None
                else None
            ),
            guess_count=turn_db.guess_count,
            guesses=guesses.get(turn_db.id, []),
        )

    def _to_guess_model(self, guess_db: DBGuess) -> GuessModel:
        return GuessModel(
            id=guess_db.id,
            turn_id=guess_db.turn_id,
            movie_id=guess_db.movie_id,
            movie_title=guess_db.movie_title,
            movie_year=guess_db.movie_year,
            result=guess_db.result,
        )

    @staticmethod
    def _to_cast(raw: list[dict[str, Any]]) -> list[CastMember]:
        return [CastMember(id=member["id"], name=member["name"]) for member in raw]
