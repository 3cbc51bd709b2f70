from decimal import Decimal
from unittest.mock import Mock

import pytest

from bjsim.blackjack.action import Move
from bjsim.blackjack.actor import (
    Dealer,
    DoubleRoundStartError,
    Player,
    UninitializedRoundError,
)
from bjsim.blackjack.decision_logger import decision_logger
from bjsim.blackjack.hand import BlackjackHand, InvalidSplitError
from bjsim.blackjack.hand_state import IllegalMoveError
from bjsim.blackjack.strategy import DealerStrategy, Strategy
from bjsim.common.card import Card

BET = Decimal("1.00")


@pytest.fixture
def strategy():
    strategy = Mock(spec=Strategy)
    strategy.next_move.return_value = Move.STAND
    return strategy


@pytest.fixture
def player(strategy):
    return Player(strategy, Decimal("10.00"), name="Alice")


@pytest.fixture
def dealer():
    return Dealer(DealerStrategy())


def deal(player, *cards, bet=BET, up_card=Card.SEVEN):
    player.start_round(BlackjackHand(cards), bet, up_card)


class TestRoundLifecycle:
    def test_start_round_debits_bet(self, player):
        deal(player, Card.TEN, Card.SEVEN)
        assert player.bank == Decimal("9.00")
        assert len(player.hands) == 1
        assert player.active_hand_index == 0

    def test_cannot_start_twice(self, player):
        deal(player, Card.TEN, Card.SEVEN)
        with pytest.raises(DoubleRoundStartError):
            deal(player, Card.TWO, Card.THREE)

    def test_start_after_end_succeeds(self, player):
        deal(player, Card.TEN, Card.SEVEN)
        player.stand()
        player.end_round()
        deal(player, Card.TWO, Card.THREE)
        assert player.round_started

    @pytest.mark.parametrize(
        "action",
        [
            lambda p: p.next_move(),
            lambda p: p.hit(Card.TWO),
            lambda p: p.stand(),
            lambda p: p.split(),
            lambda p: p.double_down(Card.TWO),
            lambda p: p.surrender(),
            lambda p: p.has_unfinished_hands(),
            lambda p: p.end_round(),
        ],
    )
    def test_actions_before_start_raise(self, player, action):
        with pytest.raises(UninitializedRoundError):
            action(player)

    def test_end_round_returns_snapshot_and_clears(self, player):
        deal(player, Card.TEN, Card.SEVEN)
        player.stand()
        hands = player.end_round()
        assert isinstance(hands, tuple)
        assert len(hands) == 1
        assert hands[0].finished
        assert not player.round_started

    def test_reset_restores_bank_and_clears_round(self, player):
        deal(player, Card.TEN, Card.SEVEN)
        player.reset()
        assert player.bank == Decimal("10.00")
        assert not player.round_started
        deal(player, Card.TWO, Card.THREE)


class TestMoves:
    def test_next_move_delegates_to_strategy(self, player, strategy):
        deal(player, Card.TEN, Card.SEVEN, up_card=Card.NINE)
        assert player.next_move() is Move.STAND
        hand, up_card, bank = strategy.next_move.call_args.args
        assert hand is player.active_hand
        assert up_card is Card.NINE
        assert bank == Decimal("9.00")

    def test_next_move_is_logged(self, player):
        deal(player, Card.TEN, Card.SEVEN)
        player.next_move()
        assert decision_logger.move_counts[Move.STAND] == 1

    def test_hit_keeps_hand_active_until_bust(self, player):
        deal(player, Card.TEN, Card.TWO)
        player.hit(Card.FIVE)
        assert player.has_unfinished_hands()
        player.hit(Card.KING)
        assert not player.has_unfinished_hands()

    def test_double_down_debits_bank(self, player):
        deal(player, Card.FIVE, Card.SIX)
        player.double_down(Card.TWO)
        hand = player.end_round()[0]
        assert hand.bet == Decimal("2.00")
        assert hand.finished
        assert player.bank == Decimal("8.00")

    def test_illegal_double_down_leaves_bank_untouched(self, player):
        deal(player, Card.FIVE, Card.SIX)
        player.hit(Card.TWO)
        with pytest.raises(IllegalMoveError):
            player.double_down(Card.TWO)
        assert player.bank == Decimal("9.00")

    def test_surrender_finishes_hand(self, player):
        deal(player, Card.TEN, Card.SIX)
        player.surrender()
        assert not player.has_unfinished_hands()
        assert player.bank == Decimal("9.00")

    def test_acting_after_all_hands_finished_raises(self, player):
        deal(player, Card.TEN, Card.SIX)
        player.stand()
        with pytest.raises(IllegalMoveError):
            player.hit(Card.TWO)


@pytest.mark.split
class TestSplit:
    def test_split_debits_and_appends_hand(self, player):
        deal(player, Card.EIGHT, Card.EIGHT)
        player.split()
        assert player.bank == Decimal("8.00")
        assert len(player.hands) == 2
        assert player.active_hand_index == 0
        assert all(hand.bet == BET for hand in player.hands)

    def test_split_hand_is_forced_to_hit(self, player, strategy):
        deal(player, Card.EIGHT, Card.EIGHT)
        player.split()
        assert player.next_move() is Move.HIT
        strategy.next_move.assert_not_called()

    def test_cursor_moves_through_split_hands(self, player):
        deal(player, Card.EIGHT, Card.EIGHT)
        player.split()
        player.hit(Card.THREE)
        player.stand()
        assert player.active_hand_index == 1
        assert player.active_hand.just_split
        player.hit(Card.TEN)
        player.stand()
        assert not player.has_unfinished_hands()

        hands = player.end_round()
        assert [hand.total_value() for hand in hands] == [11, 18]

    def test_end_round_size_counts_splits(self, player):
        deal(player, Card.EIGHT, Card.EIGHT)
        player.split()
        player.hit(Card.EIGHT)
        player.split()
        player.hit(Card.TWO)
        player.stand()
        player.hit(Card.TEN)
        player.stand()
        player.hit(Card.NINE)
        player.stand()

        hands = player.end_round()

        assert len(hands) == 1 + 2
        assert player.bank == Decimal("7.00")

    def test_split_unsplittable_hand_keeps_bank(self, player):
        deal(player, Card.EIGHT, Card.SEVEN)
        with pytest.raises(InvalidSplitError):
            player.split()
        assert player.bank == Decimal("9.00")


class TestDealer:
    def test_dealer_has_no_bank_and_no_bet(self, dealer):
        dealer.start_round(BlackjackHand([Card.TEN, Card.SEVEN]))
        assert dealer.bank == Decimal("0")
        assert dealer.hands[0].bet == Decimal("0")

    def test_face_up_card_is_first_card(self, dealer):
        dealer.start_round(BlackjackHand([Card.NINE, Card.ACE]))
        assert dealer.face_up_card is Card.NINE

    def test_has_blackjack(self, dealer):
        dealer.start_round(BlackjackHand([Card.ACE, Card.QUEEN]))
        assert dealer.has_blackjack()

    def test_dealer_plays_to_seventeen(self, dealer):
        dealer.start_round(BlackjackHand([Card.TEN, Card.TWO]))
        assert dealer.next_move() is Move.HIT
        dealer.hit(Card.FOUR)
        assert dealer.next_move() is Move.HIT
        dealer.hit(Card.ACE)
        assert dealer.next_move() is Move.STAND
        dealer.stand()
        assert dealer.end_round()[0].total_value() == 17

    def test_dealer_defaults_to_dealer_strategy(self):
        assert isinstance(Dealer().strategy, DealerStrategy)

    def test_face_up_card_before_round_raises(self, dealer):
        with pytest.raises(UninitializedRoundError):
            dealer.face_up_card
