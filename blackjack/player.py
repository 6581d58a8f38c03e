"""Players, the dealer, and their bankrolls."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Mapping

from blackjack.cards import Card, Deck
from blackjack.events import EventEmitter, EventType
from blackjack.exceptions import InsufficientFundsError
from blackjack.hand import Hand

logger = logging.getLogger(__name__)

Amount = int | Decimal

DEALER_NAME = "dealer"


@dataclass(eq=False)
class Player:
    """
    A participant with a bankroll and at most one hand.

    Players compare by identity, so they can key the dealer's bet record.
    The bankroll only changes through bet() and collect_winnings().
    """

    name: str
    bankroll: Amount
    hand: Hand | None = field(default=None, init=False)
    events: EventEmitter | None = field(default=None, repr=False)

    def bet(self, amount: Amount) -> Amount:
        """
        Commit part of the bankroll to a bet.

        Args:
            amount: Bet amount

        Returns:
            The amount committed

        Raises:
            ValueError: if amount is negative
            InsufficientFundsError: if amount exceeds the bankroll
        """
        if amount < 0:
            raise ValueError(f"Bet must not be negative: {amount}")
        if amount > self.bankroll:
            logger.warning(
                "%s cannot bet %s with a bankroll of %s", self.name, amount, self.bankroll
            )
            if self.events is not None:
                self.events.emit_new(
                    EventType.INSUFFICIENT_FUNDS,
                    player=self.name,
                    required=amount,
                    available=self.bankroll,
                )
            raise InsufficientFundsError(amount, self.bankroll)

        self.bankroll -= amount

        logger.debug("%s bet %s, bankroll %s", self.name, amount, self.bankroll)
        if self.events is not None:
            self.events.emit_new(
                EventType.BET_PLACED,
                player=self.name,
                amount=amount,
                bankroll=self.bankroll,
            )
        return amount

    def collect_winnings(self, amount: Amount) -> None:
        """Add winnings to the bankroll."""
        self.bankroll += amount

        logger.debug("%s collected %s, bankroll %s", self.name, amount, self.bankroll)
        if self.events is not None:
            self.events.emit_new(
                EventType.WINNINGS_COLLECTED,
                player=self.name,
                amount=amount,
                bankroll=self.bankroll,
            )

    def new_hand(self, deck: Deck) -> list[Card]:
        """Discard the current hand and deal a fresh one from the deck."""
        hand = Hand(events=self.events)
        dealt = hand.deal(deck)
        self.hand = hand
        return dealt


@dataclass(eq=False)
class Dealer(Player):
    """
    The house: a player named "dealer" that starts with no bankroll.

    Also collects the players' bets at the start of a round.
    """

    name: str = field(default=DEALER_NAME, init=False)
    bankroll: Amount = field(default=0, init=False)
    _bets: dict[Player, Amount] = field(default_factory=dict, init=False, repr=False)

    def take_bets(
        self,
        player_bets: Mapping[Player, Amount] | Iterable[tuple[Player, Amount]],
    ) -> dict[Player, Amount]:
        """
        Collect a bet from each player, in order.

        The record from the previous round is discarded first. Collection is
        best effort with no rollback: if a player cannot cover their bet the
        InsufficientFundsError propagates, players already charged stay
        charged and recorded, and later players are not charged.

        Args:
            player_bets: {player: amount} or (player, amount) pairs

        Returns:
            A copy of the amounts committed per player
        """
        pairs = player_bets.items() if isinstance(player_bets, Mapping) else player_bets

        self._bets = {}
        for player, amount in pairs:
            self._bets[player] = player.bet(amount)

        logger.debug("Collected bets from %d players", len(self._bets))
        if self.events is not None:
            self.events.emit_new(
                EventType.BETS_COLLECTED,
                bets={player.name: amount for player, amount in self._bets.items()},
                total=sum(self._bets.values()),
            )
        return self.bets

    @property
    def bets(self) -> dict[Player, Amount]:
        """Return the bets collected in the current round."""
        return self._bets.copy()
