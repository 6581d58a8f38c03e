"""Hand scoring for blackjack."""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from blackjack.cards import Card, Deck
from blackjack.events import EventEmitter, EventType
from blackjack.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)

BUST_LIMIT = 21
INITIAL_CARDS = 2
ACE_HIGH = 11
ACE_LOW = 1


@dataclass
class Hand:
    """The cards held by one participant."""

    cards: list[Card] = field(default_factory=list)
    events: EventEmitter | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.cards = list(self.cards)

    def deal(self, deck: Deck) -> list[Card]:
        """
        Replace the hand with two cards taken from the deck.

        Returns:
            The dealt cards
        """
        self.cards = deck.take_out(INITIAL_CARDS)

        logger.debug("Dealt %s", self)
        if self.events is not None:
            self.events.emit_new(
                EventType.HAND_DEALT,
                cards=[str(card) for card in self.cards],
                points=self.points(),
            )
        return self.cards.copy()

    def hit(self, deck: Deck) -> Card:
        """
        Take one more card from the deck.

        Raises:
            InvalidOperationError: if the hand is already busted
            InsufficientSupplyError: if the deck is empty
        """
        if self.busted():
            raise InvalidOperationError("Hand already resolved: busted")

        (card,) = deck.take_out(1)
        self.cards.append(card)

        logger.debug("Hit %s, hand is now %s", card, self)
        if self.events is not None:
            self.events.emit_new(
                EventType.PLAYER_HIT, card=str(card), points=self.points()
            )
            if self.busted():
                self.events.emit_new(EventType.PLAYER_BUSTS, points=self.points())
        return card

    def points(self) -> int:
        """
        Calculate the hand total.

        Each Ace counts 11 unless that would take the running total over 21,
        in which case it counts 1. The check is repeated Ace by Ace, after all
        other cards have been counted.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            else:
                total += card.blackjack_value()

        for _ in range(aces):
            total += ACE_HIGH
            if total > BUST_LIMIT:
                total -= ACE_HIGH - ACE_LOW

        return total

    def busted(self) -> bool:
        """Check if the hand total is over 21."""
        return self.points() > BUST_LIMIT

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = "(BUST)" if self.busted() else f"({self.points()})"
        return f"{cards_str} {value_str}"
