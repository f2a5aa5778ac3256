"""
Type definitions used across layers
"""

from enum import StrEnum


class GameStatus(StrEnum):
    PENDING = "Pending"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"


class GameResult(StrEnum):
    PLAYER1_WINS = "Player1Wins"
    PLAYER2_WINS = "Player2Wins"
    DRAW = "Draw"
    CANCELED = "Canceled"


# --- NOTE only WRONG_GUESS is ever set by the turn logic. The other conditions are stored, but triggered elsewhere.
class WinCondition(StrEnum):
    DRAW = "Draw"
    DESTINATION_MOVIE = "DestinationMovie"
    FORFEIT = "Forfeit"
    WRONG_GUESS = "WrongGuess"


class TurnStatus(StrEnum):
    IN_PROGRESS = "InProgress"
    SUCCESS = "Success"
    FAIL = "Fail"
