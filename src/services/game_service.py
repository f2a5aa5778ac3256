"""Orchestration of communication from API layer to game rules, movie catalog and persistence (and the reverse direction)."""

import logging
from random import Random
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    GameSummaryResponse,
    GetGameRequest,
    GuessOutcomeResponse,
    ListGamesRequest,
    MovieResponse,
    RematchRequest,
    SearchMoviesRequest,
    SubmitGuessRequest,
)
from src.catalog.catalog import MovieCatalog
from src.connection.engine import Verdict, evaluate_guess
from src.connection.outcomes import (
    Advanced,
    AlreadyUsed,
    GameOver,
    Miss,
    NoOp,
    Outcome,
    Rejected,
)
from src.connection.reuse import check_reuse
from src.connection.rules import (
    ACTOR_REUSE_MESSAGE,
    guesses_remaining,
    is_last_guess,
    is_movie_already_used,
    is_player,
    opponent_of,
    result_label_for_user,
    winning_result,
)
from src.connection.seed import pick_seed_movie
from src.core.config import settings
from src.core.exceptions import (
    ConcurrencyConflict,
    GameStateError,
    NotFoundError,
    NotYourTurnError,
)
from src.core.models import GameModel, GameUpdate, Movie, MovieId, TurnModel, UserId
from src.core.shared_types import GameStatus, TurnStatus, WinCondition
from src.db.repository import GameStore

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for the movie connection game."""

    def __init__(
        self,
        store: GameStore,
        catalog: MovieCatalog,
        rng: Optional[Random] = None,
        search_limit: Optional[int] = None,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.rng = rng or Random()
        self.search_limit = (
            search_limit if search_limit is not None else settings.search_result_limit
        )

    # -- API routes logic ---
    def submit_guess(self, request: SubmitGuessRequest) -> GuessOutcomeResponse:
        """
        A player names a movie to connect with the movie of the turn in progress.
        ----

        1. Load game and turn in progress, same movie as the turn's movie? --> NoOp
        2. Check it is the player's turn and the movie was not played before in this game
        3. Compare casts (catalog) and, when they connect, check the actor reuse cap
        4. Record the guess and its consequences for turn and game in one transaction

        NOTE all catalog calls happen before the transaction, so a catalog failure never leaves a partial write.
        """
        return GuessOutcomeResponse.from_outcome(self._play_guess(request))

    def _play_guess(self, request: SubmitGuessRequest) -> Outcome:
        game = self._fetch_game(request.game_id)
        if game.status == GameStatus.COMPLETED:
            raise GameStateError(f"Game is over. status: {game.status}")

        self._fetch_turn(game.id, request.turn_id)
        active_turn = self._fetch_active_turn(game.id)
        if active_turn.id != request.turn_id:
            raise ConcurrencyConflict(
                f"Turn {request.turn_id} is no longer in progress. Reload the game."
            )

        if request.movie_id == active_turn.movie_id:
            return NoOp()

        self._assert_your_turn(game, active_turn, request.user_id)

        if is_movie_already_used(game.turns, request.movie_id):
            title = request.movie_title or f"Movie {request.movie_id}"
            return AlreadyUsed(movie_title=title)

        verdict = evaluate_guess(active_turn, request.movie_id, self.catalog)
        if isinstance(verdict, NoOp):
            return verdict

        if verdict.success:
            prior_common_casts = self.store.list_success_turns_with_common_cast(game.id)
            reuse = check_reuse(prior_common_casts, verdict.common_cast)
            if not reuse.allowed:
                actor_name = reuse.overused_actor_name or ""
                with self.store.atomic():
                    self.store.create_notification(request.user_id, ACTOR_REUSE_MESSAGE)
                logger.info(f"Guess rejected in game {game.id}: {actor_name} used too often")
                return Rejected(actor_name=actor_name)

        guess_movie = self._resolve_movie(
            request.movie_id, request.movie_title, request.movie_year
        )

        with self.store.atomic():
            if not self.store.claim_turn(active_turn.id, active_turn.guess_count):
                raise ConcurrencyConflict(
                    f"Another guess was recorded on turn {active_turn.id} first."
                )
            self.store.create_guess(
                active_turn.id,
                active_turn.guess_count + 1,
                guess_movie,
                verdict.success,
            )
            if verdict.success:
                outcome = self._advance_turn(game, active_turn, guess_movie, verdict)
            else:
                outcome = self._miss_turn(game, active_turn)

        logger.info(f"Guess {guess_movie.id} in game {game.id}: {outcome}")
        return outcome

    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """First player picked a starting movie. The opponent gets the first turn."""
        movie = self._resolve_movie(
            request.movie_id, request.movie_title, request.movie_year
        )
        cast = self.catalog.get_movie_credits(movie.id)

        with self.store.atomic():
            game = self.store.create_game(
                player1_id=request.player_id,
                player2_id=request.opponent_id,
                first_turn_user_id=request.opponent_id,
                movie=movie,
                cast_ids=[member.id for member in cast],
            )
        logger.info(f"Created game {game.id} starting from {movie.title!r}")
        return GameResponse.from_model(game)

    def rematch(self, request: RematchRequest) -> GameResponse:
        """Start a new game between the same players, from a random well known movie."""
        finished = self._fetch_game(request.game_id)
        if not is_player(finished, request.user_id):
            raise GameStateError(f"User {request.user_id} did not play this game.")
        if finished.status != GameStatus.COMPLETED:
            raise GameStateError(
                f"Cannot ask for a rematch before the game is over. status: {finished.status}"
            )

        movie = pick_seed_movie(self.catalog.top_rated_movies(), self.rng)
        cast = self.catalog.get_movie_credits(movie.id)
        opponent = opponent_of(finished, request.user_id)

        with self.store.atomic():
            game = self.store.create_game(
                player1_id=request.user_id,
                player2_id=opponent,
                first_turn_user_id=opponent,
                movie=movie,
                cast_ids=[member.id for member in cast],
            )
        logger.info(f"Rematch of game {finished.id} created as game {game.id}")
        return GameResponse.from_model(game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state, with the turn being played first."""
        return GameResponse.from_model(self._fetch_game(request.game_id))

    def list_games(self, request: ListGamesRequest) -> list[GameSummaryResponse]:
        """All games of a player, most recent activity first."""
        return [
            GameSummaryResponse(
                game_id=game.id,
                player1_id=game.player1_id,
                player2_id=game.player2_id,
                current_turn_user_id=game.current_turn_user_id,
                status=game.status,
                result=game.result,
                result_label=(
                    result_label_for_user(
                        game.result, request.user_id, game.player1_id, game.player2_id
                    )
                    if game.status == GameStatus.COMPLETED
                    else None
                ),
            )
            for game in self.store.list_player_games(request.user_id)
        ]

    def search_movies(self, request: SearchMoviesRequest) -> list[MovieResponse]:
        movies = self.catalog.search_movies(request.query)
        return [MovieResponse.from_movie(movie) for movie in movies[: self.search_limit]]

    def latest_notification(self, user_id: UserId) -> Optional[str]:
        return self.store.latest_notification(user_id)

    # -- Internal helpers --
    def _advance_turn(
        self, game: GameModel, turn: TurnModel, guess_movie: Movie, verdict: Verdict
    ) -> Advanced:
        """Connected: close the turn and hand a new one, on the guessed movie, to the other player."""
        self.store.update_turn_status(turn.id, TurnStatus.SUCCESS, verdict.common_cast)
        next_user_id = opponent_of(game, turn.user_id)
        self.store.create_turn(game.id, next_user_id, guess_movie, verdict.guess_cast_ids)
        self.store.update_game(
            game.id,
            GameUpdate(current_turn_user_id=next_user_id, status=GameStatus.ONGOING),
        )
        return Advanced(next_user_id=next_user_id)

    def _miss_turn(self, game: GameModel, turn: TurnModel) -> Miss | GameOver:
        """No connection: the turn continues, unless that was its last guess. Then the turn's player lost."""
        if not is_last_guess(turn.guess_count):
            return Miss(guesses_remaining=guesses_remaining(turn.guess_count + 1))

        self.store.update_turn_status(turn.id, TurnStatus.FAIL)
        winner_id = opponent_of(game, turn.user_id)
        self.store.update_game(
            game.id,
            GameUpdate(
                status=GameStatus.COMPLETED,
                result=winning_result(game, winner_id),
                win_condition=WinCondition.WRONG_GUESS,
            ),
        )
        return GameOver(winner_id=winner_id)

    def _assert_your_turn(
        self, game: GameModel, turn: TurnModel, user_id: UserId
    ) -> None:
        """Only the owner of the turn in progress may guess."""
        if not is_player(game, user_id):
            raise NotYourTurnError(f"User {user_id} is not playing in this game.")
        if user_id != turn.user_id:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {turn.user_id} to guess first."
            )

    def _resolve_movie(
        self, movie_id: MovieId, title: Optional[str], year: Optional[int]
    ) -> Movie:
        """Fill in title and year from the catalog when the caller did not send a title."""
        if title:
            return Movie(id=movie_id, title=title, year=year)
        details = self.catalog.get_movie_details(movie_id)
        return Movie(
            id=movie_id,
            title=details.title,
            year=year if year is not None else details.year,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the store and raise error if it fails."""
        game = self.store.get_game(game_id)
        if game is None:
            raise NotFoundError(f"Game with {game_id=} not found.")
        return game

    def _fetch_turn(self, game_id: UUID, turn_id: UUID) -> TurnModel:
        """The turn must exist and belong to the game, whatever its status."""
        turn = self.store.get_turn(turn_id)
        if turn is None or turn.game_id != game_id:
            raise NotFoundError(f"Turn with {turn_id=} not found in game {game_id}.")
        return turn

    def _fetch_active_turn(self, game_id: UUID) -> TurnModel:
        turn = self.store.get_active_turn(game_id)
        if turn is None:
            raise NotFoundError(f"Game with {game_id=} has no turn in progress.")
        return turn
