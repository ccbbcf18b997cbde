"""Rejections raised by the turn engine."""


class RuleViolation(ValueError):
    """An action was rejected. The table is unchanged."""


class InvalidPlay(RuleViolation):
    """The card cannot be played right now."""


class InvalidDraw(RuleViolation):
    """Drawing is not allowed while a legal play exists and nothing is owed."""


class OutOfTurnAction(RuleViolation):
    """The seat is not permitted to act in the current state."""


class NoColorChoicePending(RuleViolation):
    """choose_color was called without a wild card waiting for a color."""


class DeckExhaustedError(RuntimeError):
    """Both piles are empty while a draw is required.

    Cannot happen while all 108 cards are in play; treated as a bug.
    """
