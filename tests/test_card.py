import pytest

from bjsim.common.card import Card


def test_card_members_are_distinct():
    assert len(list(Card)) == 13


def test_number_card_values():
    assert [card.rank_value for card in list(Card)[1:10]] == list(range(2, 11))


@pytest.mark.parametrize("card", [Card.JACK, Card.QUEEN, Card.KING, Card.TEN])
def test_ten_value_cards(card):
    assert card.rank_value == 10
    assert card.max_value == 10


def test_ace_values():
    assert Card.ACE.rank_value == 1
    assert Card.ACE.max_value == 11


def test_card_str():
    assert str(Card.ACE) == "A"
    assert str(Card.SEVEN) == "7"
    assert str(Card.TEN) == "10"
    assert str(Card.KING) == "K"


def test_face_cards_are_not_aliases_of_ten():
    assert Card.KING is not Card.TEN
    assert Card.KING != Card.QUEEN


def test_card_hash():
    card_set = {Card.EIGHT, Card.EIGHT, Card.NINE}
    assert len(card_set) == 2
