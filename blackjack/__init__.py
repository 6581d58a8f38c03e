"""Blackjack rules engine - cards, deck, hand scoring and bankrolls."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.events import EventEmitter, EventType, GameEvent
from blackjack.exceptions import (
    BlackjackError,
    InsufficientFundsError,
    InsufficientSupplyError,
    InvalidOperationError,
)
from blackjack.hand import Hand
from blackjack.player import Dealer, Player

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Player",
    "Dealer",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "BlackjackError",
    "InvalidOperationError",
    "InsufficientFundsError",
    "InsufficientSupplyError",
]
