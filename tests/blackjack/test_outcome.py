import pytest

from bjsim.blackjack.outcome import HandOutcome, get_outcome
from bjsim.common.card import Card


def test_dealer_and_player_blackjack_push(hand_state):
    player = hand_state(Card.ACE, Card.KING)
    dealer = hand_state(Card.QUEEN, Card.ACE)
    assert get_outcome(player, dealer) is HandOutcome.PUSH


def test_dealer_blackjack_beats_player_21(hand_state):
    player = hand_state(Card.SEVEN, Card.SEVEN, Card.SEVEN)
    dealer = hand_state(Card.ACE, Card.TEN)
    assert get_outcome(player, dealer) is HandOutcome.LOSS


@pytest.mark.surrender
def test_dealer_blackjack_outranks_surrender(hand_state):
    player = hand_state(Card.TEN, Card.SIX)
    player.surrender()
    dealer = hand_state(Card.ACE, Card.TEN)
    assert get_outcome(player, dealer) is HandOutcome.LOSS


@pytest.mark.surrender
def test_surrender(hand_state):
    player = hand_state(Card.TEN, Card.SIX)
    player.surrender()
    dealer = hand_state(Card.TEN, Card.SEVEN)
    assert get_outcome(player, dealer) is HandOutcome.SURRENDER


def test_player_blackjack_wins(hand_state):
    player = hand_state(Card.ACE, Card.KING)
    dealer = hand_state(Card.TEN, Card.SEVEN)
    assert get_outcome(player, dealer) is HandOutcome.BLACKJACK_WIN


def test_player_bust_loses_even_if_dealer_busts(hand_state):
    player = hand_state(Card.TEN, Card.SIX, Card.NINE)
    dealer = hand_state(Card.TEN, Card.SIX, Card.EIGHT)
    assert get_outcome(player, dealer) is HandOutcome.LOSS


def test_dealer_bust_player_wins(hand_state):
    player = hand_state(Card.TEN, Card.TWO)
    dealer = hand_state(Card.TEN, Card.SIX, Card.EIGHT)
    assert get_outcome(player, dealer) is HandOutcome.WIN


@pytest.mark.parametrize(
    "player_cards, expected",
    [
        ((Card.TEN, Card.EIGHT), HandOutcome.WIN),
        ((Card.TEN, Card.SEVEN), HandOutcome.PUSH),
        ((Card.TEN, Card.SIX), HandOutcome.LOSS),
    ],
)
def test_totals_compared(hand_state, player_cards, expected):
    dealer = hand_state(Card.TEN, Card.SEVEN)
    assert get_outcome(hand_state(*player_cards), dealer) is expected


def test_three_card_21_against_dealer_20_wins(hand_state):
    player = hand_state(Card.FIVE, Card.SIX, Card.KING)
    dealer = hand_state(Card.KING, Card.QUEEN)
    assert get_outcome(player, dealer) is HandOutcome.WIN
