"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    player1_id: Mapped[str] = mapped_column(index=True)
    player2_id: Mapped[str] = mapped_column(index=True)
    current_turn_user_id: Mapped[str]
    status: Mapped[str]
    result: Mapped[Optional[str]]
    win_condition: Mapped[Optional[str]]
    destination_movie_id: Mapped[Optional[int]]
    destination_movie_title: Mapped[Optional[str]]
    destination_movie_year: Mapped[Optional[int]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class DBTurn(Base):
    __tablename__ = "turns"
    # a movie can only be played once per game
    __table_args__ = (
        UniqueConstraint("game_id", "movie_id"),
        UniqueConstraint("game_id", "sequence"),
    )
    id: Mapped[UUID] = mapped_column(primary_key=True)
    game_id: Mapped[UUID] = mapped_column(ForeignKey("games.id"), index=True)
    user_id: Mapped[str]
    sequence: Mapped[int]
    movie_id: Mapped[int]
    movie_title: Mapped[str]
    movie_year: Mapped[Optional[int]]
    cast_ids: Mapped[list[int]] = mapped_column(JSON, default=list)
    status: Mapped[str]
    common_cast: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(JSON)
    guess_count: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)


class DBGuess(Base):
    __tablename__ = "guesses"
    __table_args__ = (UniqueConstraint("turn_id", "number"),)
    id: Mapped[UUID] = mapped_column(primary_key=True)
    turn_id: Mapped[UUID] = mapped_column(ForeignKey("turns.id"), index=True)
    number: Mapped[int]
    movie_id: Mapped[int]
    movie_title: Mapped[str]
    movie_year: Mapped[Optional[int]]
    result: Mapped[bool]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)


class DBNotification(Base):
    __tablename__ = "notifications"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(index=True)
    message: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
