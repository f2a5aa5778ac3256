"""Custom exceptions shared across layers."""


class GameError(Exception):
    """Top-level exception for anything the game backend raises on purpose."""


class InvalidRequestError(GameError):
    """Malformed or missing request fields. Raised before any collaborator is called."""


class GameStateError(GameError):
    """Request is not allowed in the current state of the game."""


class NotYourTurnError(GameError):
    """Guess submitted by the player who is not expected to guess."""


class RepositoryError(GameError):
    """Problems with finding / storing records."""


class NotFoundError(RepositoryError):
    """Referenced game or turn does not exist (or has no turn in progress)."""


class ConcurrencyConflict(RepositoryError):
    """Another guess on the same turn was committed first. Retry from loading the active turn."""


class CatalogUnavailable(GameError):
    """The movie catalog failed, timed out, or answered with a payload we cannot interpret."""
