from decimal import ROUND_HALF_DOWN, Decimal

from bjsim.blackjack.outcome import HandOutcome


class Rules:
    """
    Table rules for a simulated game.

    Payouts are the total amount credited back for a hand. The bet was debited
    when the hand was created, doubled or split, so a push credits exactly the
    bet and a loss credits nothing.
    """

    def __init__(
        self,
        num_decks: int = 6,
        min_bet: Decimal = Decimal("10.00"),
        blackjack_payout: Decimal = Decimal("1.5"),
        reshuffle_threshold: int = 50,
    ):
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if min_bet <= 0:
            raise ValueError(f"Minimum bet must be positive, got {min_bet}")
        if reshuffle_threshold < 0:
            raise ValueError("Reshuffle threshold must be non-negative")

        self.num_decks = num_decks
        self.min_bet = Decimal(min_bet)
        self.blackjack_payout = Decimal(blackjack_payout)
        self.reshuffle_threshold = reshuffle_threshold

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "num_decks": self.num_decks,
            "min_bet": str(self.min_bet),
            "blackjack_payout": str(self.blackjack_payout),
            "reshuffle_threshold": self.reshuffle_threshold,
        }

    def payout(self, outcome: HandOutcome, bet: Decimal) -> Decimal:
        """
        Total amount credited for a hand with the given outcome and bet.

        >>> rules = Rules()
        >>> rules.payout(HandOutcome.WIN, Decimal("2"))
        Decimal('4')
        >>> rules.payout(HandOutcome.SURRENDER, Decimal("1.00"))
        Decimal('0.50')
        """
        if outcome is HandOutcome.WIN:
            return bet * 2
        if outcome is HandOutcome.BLACKJACK_WIN:
            return bet * (1 + self.blackjack_payout)
        if outcome is HandOutcome.PUSH:
            return bet
        if outcome is HandOutcome.SURRENDER:
            return self.surrender_refund(bet)
        if outcome is HandOutcome.LOSS:
            return Decimal("0")
        raise ValueError(f"Unknown outcome: {outcome}")

    @staticmethod
    def surrender_refund(bet: Decimal) -> Decimal:
        """
        Half the bet, rounded half-down at the bet's own scale.

        A bet of 1.00 refunds 0.50 but a bet of 1 refunds 0.
        """
        quantum = Decimal((0, (1,), bet.as_tuple().exponent))
        return (bet / 2).quantize(quantum, rounding=ROUND_HALF_DOWN)
