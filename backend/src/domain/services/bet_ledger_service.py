"""
Bet Ledger Service

Centralizes payout math for American odds, per-bet profit/loss
and the portfolio performance summary.
"""

from typing import Iterable, Optional

from src.domain.entities.bet import Bet, BetResult, BettingPerformance
from src.domain.value_objects.value_objects import AmericanOdds


PENDING_PLACEHOLDER = "-"


class BetLedgerService:
    """
    Service for settling amounts and summarizing betting performance.
    """

    @staticmethod
    def payout(stake: float, odds: int) -> float:
        """
        Total amount returned by a winning bet, stake included.

        Raises:
            InvalidOddsError: If odds is 0. Callers treat unset odds as
                "no payout to compute" and must not call this.
        """
        return AmericanOdds(odds).payout(stake)

    def calculate_profit(self, bet: Bet) -> Optional[float]:
        """
        Profit or loss of a single bet.

        Returns:
            Winnings (stake excluded) for a win, the negative stake for a
            loss, 0.0 for a push and None while the bet is pending.
        """
        if bet.result == BetResult.WIN:
            if not bet.has_odds:
                return 0.0
            return self.payout(bet.amount, bet.odds) - bet.amount
        if bet.result == BetResult.LOSE:
            return -bet.amount
        if bet.result == BetResult.PUSH:
            return 0.0
        return None

    def compute_performance(self, bets: Iterable[Bet]) -> BettingPerformance:
        """
        Reduce a bet collection into a BettingPerformance summary.

        Stakes count as wagered from the moment a bet is placed. Pushes are
        settled but neither win nor lose.
        """
        total_bets = 0
        pending_bets = 0
        wins = 0
        total_wagered = 0.0
        total_winnings = 0.0
        total_losses = 0.0

        for bet in bets:
            total_bets += 1
            total_wagered += bet.amount

            if bet.result == BetResult.PENDING:
                pending_bets += 1
            elif bet.result == BetResult.WIN:
                wins += 1
                total_winnings += self.calculate_profit(bet)
            elif bet.result == BetResult.LOSE:
                total_losses += bet.amount

        net_profit = total_winnings - total_losses
        settled = total_bets - pending_bets

        roi = net_profit / total_wagered * 100 if total_wagered > 0 else 0.0
        win_rate = wins / settled * 100 if settled > 0 else 0.0

        return BettingPerformance(
            total_bets=total_bets,
            total_wagered=total_wagered,
            total_winnings=total_winnings,
            total_losses=total_losses,
            net_profit=net_profit,
            roi=roi,
            win_rate=win_rate,
            pending_bets=pending_bets,
        )

    # ------------------------------------------------------------
    # Formatting helpers
    # ------------------------------------------------------------

    @staticmethod
    def format_currency(amount: float) -> str:
        return f"${amount:.2f}"

    @staticmethod
    def format_odds(odds: int) -> str:
        return str(AmericanOdds(odds))

    def format_profit_loss(self, bet: Bet) -> str:
        """P&L column text: "+$90.91", "-$50.00", "$0.00" or "-" while pending."""
        profit = self.calculate_profit(bet)
        if profit is None:
            return PENDING_PLACEHOLDER
        if bet.result == BetResult.WIN:
            return f"+{self.format_currency(profit)}"
        if bet.result == BetResult.LOSE:
            return f"-{self.format_currency(bet.amount)}"
        return self.format_currency(0.0)
