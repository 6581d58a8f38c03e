"""Card and Deck classes - immutable cards, mutable deck."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from blackjack.config import config
from blackjack.events import EventEmitter, EventType
from blackjack.exceptions import InsufficientSupplyError, InvalidOperationError

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    @property
    def symbol(self) -> str:
        return {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }[self]

    def __str__(self) -> str:
        return self.symbol


class Rank(Enum):
    """Card ranks, valued by pip count (face cards and Ace above ten)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def display(self) -> str:
        """Short display value: "2".."10", "J", "Q", "K", "A"."""
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    def blackjack_value(self) -> int:
        """
        Return the fixed blackjack point value of a non-Ace card.

        Face cards count 10. An Ace has no single value (1 or 11 depending on
        the rest of the hand), so asking for it is an error.

        Raises:
            InvalidOperationError: if the card is an Ace
        """
        if self.is_ace:
            raise InvalidOperationError("Ace has a special value")
        return min(self.rank.value, 10)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.display: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {suit.name[0]: suit for suit in Suit}
        suit_map.update({suit.symbol: suit for suit in Suit})

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Deck:
    """
    An ordered supply of cards.

    The end of the sequence is the top of the deck: cards are taken from the
    end and returned to the front.
    """

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            cards: Initial ordering (copied, not checked for duplicates);
                a full 52-card deck when omitted
            rng: Random number generator for shuffling
            events: Optional emitter notified of deck changes
        """
        self._cards: list[Card] = (
            list(cards) if cards is not None else self.all_cards()
        )
        self._rng = rng or Random(config.deck.seed)
        self._events = events

    @staticmethod
    def all_cards() -> list[Card]:
        """Return the 52 distinct cards, suit by suit."""
        return [Card(rank, suit) for suit in Suit for rank in Rank]

    def take_out(self, n: int) -> list[Card]:
        """
        Remove and return the top ``n`` cards, in deck order.

        Raises:
            ValueError: if n is negative
            InsufficientSupplyError: if the deck holds fewer than n cards
        """
        if n < 0:
            raise ValueError(f"Cannot take a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientSupplyError(n, len(self._cards))

        taken = self._cards[len(self._cards) - n:]
        del self._cards[len(self._cards) - n:]

        logger.debug("Took %d cards, %d remaining", n, len(self._cards))
        if self._events is not None:
            self._events.emit_new(
                EventType.CARDS_TAKEN,
                cards=[str(card) for card in taken],
                remaining=len(self._cards),
            )
        return taken

    def return_cards(self, cards: Iterable[Card]) -> None:
        """Put cards back on the bottom of the deck, keeping their order."""
        returned = list(cards)
        self._cards[:0] = returned

        logger.debug("Returned %d cards, %d in deck", len(returned), len(self._cards))
        if self._events is not None:
            self._events.emit_new(
                EventType.CARDS_RETURNED,
                cards=[str(card) for card in returned],
                remaining=len(self._cards),
            )

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self._rng.shuffle(self._cards)

        logger.debug("Shuffled %d cards", len(self._cards))
        if self._events is not None:
            self._events.emit_new(EventType.DECK_SHUFFLED, size=len(self._cards))

    @property
    def cards(self) -> list[Card]:
        """Return a copy of the current ordering, bottom first."""
        return self._cards.copy()

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
