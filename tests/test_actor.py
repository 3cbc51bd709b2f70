from decimal import Decimal

import pytest

from bjsim.common.actor import Actor


class SimpleActor(Actor):
    def reset(self):
        self.bank = self.initial_money


@pytest.fixture
def actor():
    return SimpleActor("Alice", Decimal("50.00"))


def test_actor_starts_with_initial_money(actor):
    assert actor.name == "Alice"
    assert actor.bank == Decimal("50.00")


def test_pay_and_charge(actor):
    actor.charge(Decimal("10.00"))
    actor.pay(Decimal("2.50"))
    assert actor.bank == Decimal("42.50")


def test_can_afford(actor):
    assert actor.can_afford(Decimal("50.00"))
    assert not actor.can_afford(Decimal("50.01"))


def test_actor_is_abstract():
    with pytest.raises(TypeError):
        Actor("Nobody")
