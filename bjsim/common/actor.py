"""
This module contains the Actor abstract base class.

Actor serves as a blueprint for any participant in a simulated card game. It
holds the participant's name and a bank that persists across rounds, and it
leaves resetting that state to the concrete classes.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class Actor(ABC):
    """
    Abstract base class representing an actor in a card game.

    :param name: Name of the actor
    :param initial_money: Bank the actor starts every game with
    """

    def __init__(self, name: str, initial_money: Decimal = Decimal("0")):
        self.name = name
        self.initial_money = Decimal(initial_money)
        self.bank = self.initial_money

    @abstractmethod
    def reset(self):
        """
        Reset the actor's state for a new game.

        :return: None
        """

    def pay(self, amount: Decimal):
        """
        Credit the actor's bank with a specified amount.

        :param amount: The amount to add to the actor's bank
        :return: None
        """
        self.bank += amount

    def charge(self, amount: Decimal):
        """
        Debit the actor's bank by a specified amount.

        :param amount: The amount to remove from the actor's bank
        :return: None
        """
        self.bank -= amount

    def can_afford(self, amount: Decimal) -> bool:
        """Check if the actor has enough money to afford a certain amount."""
        return self.bank >= amount
