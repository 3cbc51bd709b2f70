"""Defines the Move enum for the possible moves a hand can make in a game of blackjack."""
from enum import Enum


class Move(Enum):
    """Enum for the possible moves a player can make on a hand."""

    HIT = "hit"
    STAND = "stand"
    SPLIT = "split"
    DOUBLE_DOWN = "double"
    SURRENDER = "surrender"
