"""Retirement withdrawal strategies.

A strategy turns the portfolio state into the year's gross spending need,
before Social Security, pension and tax adjustments. The strategy name is
parsed once per run into a ``WithdrawalStrategy`` member, whose ``policy``
is then called every distribution year.
"""

import logging
from enum import Enum
from typing import Callable


logger = logging.getLogger(__name__)

BASE_RATE = 0.04
GUARDRAIL_FLOOR = 0.03
GUARDRAIL_CEILING = 0.05

# (current_value, desired_annual_spending, starting_value) -> need
WithdrawalPolicy = Callable[[float, float, float], float]


def fixed_withdrawal(current_value: float, desired_spending: float, starting_value: float) -> float:
    """Classic 4% rule on the value at retirement; ignores performance."""
    return starting_value * BASE_RATE


def dynamic_withdrawal(current_value: float, desired_spending: float, starting_value: float) -> float:
    """4% of whatever the portfolio is worth now."""
    return current_value * BASE_RATE


def guardrails_withdrawal(current_value: float, desired_spending: float, starting_value: float) -> float:
    """4% of the starting value, bounded to 3-5% of the current value."""
    if current_value <= 0:
        return 0.0
    baseline = starting_value * BASE_RATE
    current_rate = baseline / current_value
    if current_rate < GUARDRAIL_FLOOR:
        # portfolio is well ahead, spend more
        return current_value * GUARDRAIL_FLOOR
    if current_rate > GUARDRAIL_CEILING:
        # portfolio is struggling, cut back
        return current_value * GUARDRAIL_CEILING
    return baseline


def spending_withdrawal(current_value: float, desired_spending: float, starting_value: float) -> float:
    """Withdraw exactly the desired spending."""
    return desired_spending


class WithdrawalStrategy(Enum):
    """Available withdrawal strategies."""

    FIXED = "fixed"            # 4% of starting value
    DYNAMIC = "dynamic"        # 4% of current value
    GUARDRAILS = "guardrails"  # 4% with 3-5% bounds
    SPENDING = "spending"      # pass desired spending through

    @classmethod
    def parse(cls, name: str) -> "WithdrawalStrategy":
        """Map a strategy name to a member.

        Matching is exact and case-sensitive. Unrecognised names fall back
        to SPENDING rather than failing.
        """
        for member in cls:
            if member.value == name:
                return member
        logger.debug("Unknown withdrawal strategy %r, using desired spending", name)
        return cls.SPENDING

    @property
    def policy(self) -> WithdrawalPolicy:
        return _POLICIES[self]

    def withdrawal_need(self, current_value: float, desired_spending: float, starting_value: float) -> float:
        """Gross annual need for this year under the strategy."""
        return self.policy(current_value, desired_spending, starting_value)


_POLICIES = {
    WithdrawalStrategy.FIXED: fixed_withdrawal,
    WithdrawalStrategy.DYNAMIC: dynamic_withdrawal,
    WithdrawalStrategy.GUARDRAILS: guardrails_withdrawal,
    WithdrawalStrategy.SPENDING: spending_withdrawal,
}
