"""
Pytest configuration and fixtures for blackjack tests.
"""

import random
from decimal import Decimal

import pytest

from bjsim.blackjack.hand import BlackjackHand
from bjsim.blackjack.hand_state import HandState
from bjsim.common.shoe import Shoe


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "strategy: mark test as testing strategy decisions"
    )
    config.addinivalue_line(
        "markers", "split: mark test as testing split scenarios"
    )
    config.addinivalue_line(
        "markers", "surrender: mark test as testing surrender scenarios"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


def make_hand_state(*cards, bet="1.00") -> HandState:
    return HandState(BlackjackHand(cards), Decimal(bet))


def stack_shoe(*cards) -> Shoe:
    """A shoe that deals exactly the given cards, in order."""
    shoe = Shoe(num_decks=1, rng=random.Random(0))
    shoe.cards = list(cards)
    shoe.next_card_index = 0
    return shoe


@pytest.fixture
def hand_state():
    return make_hand_state


@pytest.fixture
def stacked_shoe():
    return stack_shoe
