"""Single-path simulation: the accumulation/distribution state machine.

A path carries a small immutable ``SimulationPathState`` from year to year.
``advance_one_year`` is the whole state machine for one year; it returns
a new state plus a ``YearResult`` and never mutates its input, so any year
can be exercised in isolation.

Order of operations within a year:

1. phase cash flow (contribution + match, or withdrawal net of income)
2. one-time events
3. debt service (12 monthly compounding steps with minimum payments)
4. market return on a positive portfolio, clamp at zero
5. bookkeeping (net worth, accumulation warning)
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .holdings import Debt
from .params import SimulationParams
from .returns import ReturnSampler
from .withdrawal import WithdrawalStrategy


ACCUMULATION = "accumulation"
DISTRIBUTION = "distribution"

SOCIAL_SECURITY_COLA = 0.025
MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class PathInputs:
    """Shared read-only inputs for every path of a run.

    ``params`` must already be resolved.
    """

    params: SimulationParams
    debts: Tuple[Debt, ...]
    starting_portfolio: float
    strategy: WithdrawalStrategy
    retirement_year: int

    @classmethod
    def build(cls, params: SimulationParams, debts: Sequence[Debt], starting_portfolio: float) -> "PathInputs":
        return cls(
            params=params,
            debts=tuple(debts),
            starting_portfolio=starting_portfolio,
            strategy=WithdrawalStrategy.parse(params.withdrawal_strategy),
            retirement_year=params.retirement_year,
        )


@dataclass(frozen=True)
class SimulationPathState:
    """Everything one path carries from one year to the next."""

    portfolio: float
    debt_balances: Tuple[float, ...]
    monthly_contribution: float
    monthly_spending: float
    ss_benefit_annual: float
    ss_years_received: int = 0
    retirement_start_value: Optional[float] = None
    success: bool = True
    accumulation_warning: bool = False

    @property
    def debt_total(self) -> float:
        return sum(self.debt_balances)

    @property
    def net_worth(self) -> float:
        return self.portfolio - self.debt_total


@dataclass(frozen=True)
class YearResult:
    """What one path did in one year."""

    year: int                   # 1-based
    age: int
    phase: str
    net_worth: float
    portfolio: float
    debt_total: float
    contribution: float = 0.0
    withdrawal: float = 0.0        # need after income offsets, before tax and shortfall
    gross_withdrawal: float = 0.0  # amount actually drawn from the portfolio


@dataclass
class PathResult:
    """Full trajectory of one path."""

    years: List[YearResult] = field(default_factory=list)
    success: bool = True
    accumulation_warning: bool = False

    @property
    def net_worth(self) -> np.ndarray:
        return np.array([r.net_worth for r in self.years])

    @property
    def contributions(self) -> np.ndarray:
        return np.array([r.contribution for r in self.years])

    @property
    def withdrawals(self) -> np.ndarray:
        return np.array([r.withdrawal for r in self.years])


def employer_match(annual_contribution: float, match_rate: float, match_limit: float) -> float:
    """Employer match on a year's contribution, capped when a limit is set."""
    if match_rate <= 0:
        return 0.0
    match = annual_contribution * match_rate
    if match_limit > 0:
        match = min(match, match_limit)
    return match


def initial_state(inputs: PathInputs) -> SimulationPathState:
    p = inputs.params
    return SimulationPathState(
        portfolio=inputs.starting_portfolio,
        debt_balances=tuple(d.current_balance for d in inputs.debts),
        monthly_contribution=p.monthly_contribution,
        monthly_spending=p.retirement_spending,
        ss_benefit_annual=p.social_security_amount * MONTHS_PER_YEAR,
    )


def _service_debts(
    balances: Tuple[float, ...], debts: Tuple[Debt, ...]
) -> Tuple[Tuple[float, ...], float]:
    """Compound each debt monthly and apply minimum payments.

    Returns the new balances and the total paid over the year.
    """
    new_balances = []
    paid = 0.0
    for balance, debt in zip(balances, debts):
        rate = debt.monthly_rate
        if balance > 0 and rate > 0:
            payment = debt.minimum_payment or 0.0
            for _ in range(MONTHS_PER_YEAR):
                balance *= 1 + rate
                if payment > 0:
                    amount = min(payment, balance)
                    balance -= amount
                    paid += amount
        new_balances.append(max(balance, 0.0))
    return tuple(new_balances), paid


def advance_one_year(
    state: SimulationPathState,
    year: int,
    inputs: PathInputs,
    sampler: ReturnSampler,
) -> Tuple[SimulationPathState, YearResult]:
    """Advance a path by one year.

    Args:
        state: path state at the start of the year
        year: 0-based year index
        inputs: shared run inputs
        sampler: this path's return sampler

    Returns:
        (state at the end of the year, record of the year)
    """
    p = inputs.params
    age = p.current_age + year
    retired = year >= inputs.retirement_year

    portfolio = state.portfolio
    monthly_contribution = state.monthly_contribution
    monthly_spending = state.monthly_spending
    ss_benefit = state.ss_benefit_annual
    ss_years = state.ss_years_received
    start_value = state.retirement_start_value
    success = state.success

    contribution = 0.0
    withdrawal = 0.0
    gross = 0.0

    if not retired:
        annual = monthly_contribution * MONTHS_PER_YEAR
        total = annual + employer_match(annual, p.employer_match, p.employer_match_limit)
        portfolio += total
        contribution = total
        monthly_contribution *= 1 + p.contribution_growth
    else:
        if start_value is None:
            start_value = portfolio

        withdrawal = inputs.strategy.withdrawal_need(
            portfolio, monthly_spending * MONTHS_PER_YEAR, start_value
        )

        if age >= p.social_security_age and p.social_security_amount > 0:
            if ss_years > 0:
                ss_benefit *= 1 + SOCIAL_SECURITY_COLA
            withdrawal -= ss_benefit
            ss_years += 1

        if p.pension_income > 0:
            withdrawal -= p.pension_income * MONTHS_PER_YEAR

        withdrawal = max(withdrawal, 0.0)

        gross = withdrawal
        tax = p.retirement_tax_rate
        if 0 < tax < 1:
            gross = withdrawal / (1 - tax)

        if gross > portfolio:
            success = False
            gross = max(portfolio, 0.0)

        portfolio -= gross
        monthly_spending *= 1 + p.inflation_rate

    for event in p.one_time_events:
        if event.applies_to(year + 1):
            portfolio += event.amount

    balances, paid = _service_debts(state.debt_balances, inputs.debts)
    if not retired:
        contribution += paid

    annual_return = sampler.draw(p.expected_return, p.volatility)
    if portfolio > 0:
        portfolio *= 1 + annual_return
    portfolio = max(portfolio, 0.0)

    debt_total = sum(balances)
    net_worth = portfolio - debt_total
    warning = state.accumulation_warning or (not retired and net_worth < 0)

    new_state = replace(
        state,
        portfolio=portfolio,
        debt_balances=balances,
        monthly_contribution=monthly_contribution,
        monthly_spending=monthly_spending,
        ss_benefit_annual=ss_benefit,
        ss_years_received=ss_years,
        retirement_start_value=start_value,
        success=success,
        accumulation_warning=warning,
    )
    result = YearResult(
        year=year + 1,
        age=age + 1,
        phase=DISTRIBUTION if retired else ACCUMULATION,
        net_worth=net_worth,
        portfolio=portfolio,
        debt_total=debt_total,
        contribution=contribution,
        withdrawal=withdrawal,
        gross_withdrawal=gross,
    )
    return new_state, result


def simulate_path(inputs: PathInputs, sampler: ReturnSampler) -> PathResult:
    """Run one path over the full horizon."""
    state = initial_state(inputs)
    result = PathResult()
    for year in range(inputs.params.time_horizon_years):
        state, year_result = advance_one_year(state, year, inputs, sampler)
        result.years.append(year_result)
    result.success = state.success
    result.accumulation_warning = state.accumulation_warning
    return result
