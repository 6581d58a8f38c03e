"""Pytest fixtures for blackjack rules engine tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.events import EventEmitter
from blackjack.hand import Hand
from blackjack.player import Dealer, Player


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A full, unshuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def events():
    """An event emitter that records history."""
    return EventEmitter()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_21_hand():
    """A ten and an ace (21)."""
    return Hand(cards=[Card(Rank.TEN, Suit.CLUBS), Card(Rank.ACE, Suit.CLUBS)])


@pytest.fixture
def bust_hand():
    """A busted hand (10-10-3 = 23)."""
    return Hand(
        cards=[
            Card(Rank.TEN, Suit.CLUBS),
            Card(Rank.TEN, Suit.SPADES),
            Card(Rank.THREE, Suit.HEARTS),
        ]
    )


@pytest.fixture
def player():
    """A player with a bankroll of 100."""
    return Player("Kriti", 100)


@pytest.fixture
def dealer():
    """The house."""
    return Dealer()


def stacked_deck(*cards: str) -> Deck:
    """
    Build a deck with the given cards on top, first card topmost.

    Cards are written as for Card.from_string.
    """
    return Deck([Card.from_string(s) for s in reversed(cards)])


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=0, max_cards=8):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    return Hand(cards=cards)
