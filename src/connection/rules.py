"""Turn / game rules that are independent from the catalog and the store.

Rule of thumb:
- OK: counting, validation, choosing the next player, pure transformations.
- Not OK: touching DB sessions, HTTP calls, datetime.now(), etc.
"""

from typing import Iterable

from src.core.models import GameModel, MovieId, TurnModel, UserId
from src.core.shared_types import GameResult

MAX_GUESSES_PER_TURN = 3

# An actor may connect at most this many successful turns within one game
ACTOR_REUSE_CAP = 3
ACTOR_REUSE_MESSAGE = "Actor has already been used three times!"


def opponent_of(game: GameModel, user_id: UserId) -> UserId:
    """The other player of the game."""
    return game.player2_id if user_id == game.player1_id else game.player1_id


def is_player(game: GameModel, user_id: UserId) -> bool:
    return user_id in (game.player1_id, game.player2_id)


def winning_result(game: GameModel, winner_id: UserId) -> GameResult:
    return (
        GameResult.PLAYER1_WINS
        if winner_id == game.player1_id
        else GameResult.PLAYER2_WINS
    )


def guesses_remaining(guess_count: int) -> int:
    """Guesses left on a turn that has already recorded 'guess_count' guesses."""
    return max(MAX_GUESSES_PER_TURN - guess_count, 0)


def is_last_guess(prior_guess_count: int) -> bool:
    """True when the guess about to be recorded is the final one the turn allows."""
    return prior_guess_count + 1 >= MAX_GUESSES_PER_TURN


def is_movie_already_used(turns: Iterable[TurnModel], movie_id: MovieId) -> bool:
    """A movie may be the subject of at most one turn per game."""
    return any(turn.movie_id == movie_id for turn in turns)


def result_label_for_user(
    result: GameResult | None, user_id: UserId, player1_id: UserId, player2_id: UserId
) -> str:
    """Describe a finished game's result from the point of view of one user."""
    if result == GameResult.CANCELED:
        return "Canceled"

    if result == GameResult.DRAW:
        return "Draw"

    if user_id == player1_id:
        return "You Won" if result == GameResult.PLAYER1_WINS else "You Lost"

    if user_id == player2_id:
        return "You Won" if result == GameResult.PLAYER2_WINS else "You Lost"

    return "Draw"
