"""
Custom exceptions shared by all layers.

Every exception derives from GameError, so the outer layers can catch a single type and leave the specifics to the layer that raised it.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game"""


class GameStateError(GameError):
    """The game is not in a state that allows the requested operation"""


class IllegalMoveError(GameError):
    """The move is not part of the legal move set"""


class NotYourTurnError(GameError):
    """A player attempted to move while the opponent is to move"""


class InvalidNotationError(GameError):
    """Text could not be parsed as a move"""


class InvalidRequestError(GameError):
    """Request data failed validation"""


class RepositoryError(GameError):
    """Problem finding a game in the repository"""


class ConfigError(GameError):
    """Settings could not be loaded"""
