"""
This module defines the `Card` enum, which is used to represent playing cards.

In blackjack the suit of a card never matters, so a card is nothing more than
its rank. Each rank carries a base blackjack value: number cards are worth
their face value, Jack, Queen and King are worth 10 and the Ace is worth 1.
Counting an Ace as 11 is the job of the hand valuation, not of the card.

This module is part of the `bjsim` package.
"""

from enum import Enum, unique


@unique
class Card(Enum):
    """
    Enum for the thirteen ranks of a standard deck.

    >>> Card.KING.rank_value
    10
    >>> Card.ACE.rank_value
    1
    >>> Card.ACE.max_value
    11
    >>> print(Card.QUEEN)
    Q
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def rank_value(self) -> int:
        """The base value of the rank, used for scoring. Aces count as 1."""
        return _RANK_VALUES[self]

    @property
    def max_value(self) -> int:
        """The largest value the rank can take. Aces count as 11."""
        if self is Card.ACE:
            return 11
        return self.rank_value

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        return self.value

    def __str__(self) -> str:
        return self.rank_str


_RANK_VALUES = {
    Card.ACE: 1,
    Card.TWO: 2,
    Card.THREE: 3,
    Card.FOUR: 4,
    Card.FIVE: 5,
    Card.SIX: 6,
    Card.SEVEN: 7,
    Card.EIGHT: 8,
    Card.NINE: 9,
    Card.TEN: 10,
    Card.JACK: 10,
    Card.QUEEN: 10,
    Card.KING: 10,
}
