"""Blackjack rule violations.

All errors are raised synchronously before any state is mutated.
"""


class BlackjackError(Exception):
    """Base class for blackjack rule errors."""


class InvalidOperationError(BlackjackError):
    """Operation not allowed in the current state (e.g. hitting a busted hand)."""


class InsufficientFundsError(BlackjackError):
    """A bet exceeds the player's bankroll."""

    def __init__(self, required, available) -> None:
        super().__init__(f"Bet of {required} exceeds bankroll of {available}")
        self.required = required
        self.available = available


class InsufficientSupplyError(BlackjackError):
    """More cards requested than the deck holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Cannot take {requested} cards from a deck of {available}"
        )
        self.requested = requested
        self.available = available
