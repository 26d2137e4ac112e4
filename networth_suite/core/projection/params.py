"""Planning parameters for net-worth projections.

Every field on ``SimulationParams`` except the horizon and current age is
optional. ``None`` means "not supplied" and is replaced by the documented
default in ``resolve_params``; an explicit ``0.0`` is a real value and is
kept (a zero-volatility plan is a legitimate request).

Rates on this object are decimals (0.07 = 7%). Asset and debt rates, which
come from the holdings layer, are percentages.
"""

from dataclasses import dataclass, fields, replace
from typing import List, Optional


DEFAULT_TIME_HORIZON = 30
DEFAULT_CURRENT_AGE = 35
DEFAULT_RETIREMENT_AGE = 65
DEFAULT_EXPECTED_RETURN = 0.07
DEFAULT_VOLATILITY = 0.15
DEFAULT_INFLATION = 0.03
DEFAULT_CONTRIBUTION_GROWTH = 0.02
DEFAULT_SOCIAL_SECURITY_AGE = 67
DEFAULT_RETIREMENT_TAX_RATE = 0.22
DEFAULT_WITHDRAWAL_STRATEGY = "fixed"

MAX_TIME_HORIZON = 80
SOCIAL_SECURITY_AGE_RANGE = (62, 70)


@dataclass(frozen=True)
class OneTimeEvent:
    """A signed cash event applied to the portfolio.

    ``year`` is 1-based relative to the start of the projection. A recurring
    event repeats every year from ``year`` onwards.
    """

    year: int
    amount: float                 # positive = income, negative = expense
    description: str = ""
    recurring: bool = False

    def applies_to(self, year: int) -> bool:
        """Check whether the event fires in the given 1-based year."""
        if self.recurring:
            return self.year <= year
        return self.year == year

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "year": self.year,
            "amount": self.amount,
            "description": self.description,
            "recurring": self.recurring,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OneTimeEvent":
        """Create from dictionary."""
        return cls(
            year=int(data["year"]),
            amount=float(data["amount"]),
            description=data.get("description", ""),
            recurring=bool(data.get("recurring", False)),
        )


@dataclass(frozen=True)
class SimulationParams:
    """Inputs for a projection run."""

    # Essentials
    time_horizon_years: Optional[int] = None
    current_age: Optional[int] = None
    retirement_age: Optional[int] = None
    monthly_contribution: Optional[float] = None

    # Market / economy
    expected_return: Optional[float] = None
    volatility: Optional[float] = None
    inflation_rate: Optional[float] = None

    # Saving
    contribution_growth: Optional[float] = None
    employer_match: Optional[float] = None        # match rate, e.g. 0.50 = 50%
    employer_match_limit: Optional[float] = None  # annual cap, 0 = uncapped

    # Retirement income and spending
    retirement_spending: Optional[float] = None    # monthly
    social_security_amount: Optional[float] = None  # monthly
    social_security_age: Optional[int] = None
    pension_income: Optional[float] = None          # monthly
    retirement_tax_rate: Optional[float] = None
    withdrawal_strategy: Optional[str] = None

    one_time_events: Optional[List[OneTimeEvent]] = None
    exclude_credit_card_debt: Optional[bool] = None

    @property
    def retirement_year(self) -> int:
        """Year offset at which distribution begins, clamped to the horizon.

        Only meaningful on resolved parameters.
        """
        offset = max(0, self.retirement_age - self.current_age)
        return min(offset, self.time_horizon_years)

    @property
    def is_resolved(self) -> bool:
        """True when no field is left unset."""
        return all(getattr(self, f.name) is not None for f in fields(self))

    def to_dict(self) -> dict:
        """Convert to the camelCase shape used by the API layer."""
        out = {}
        for attr, key in _FIELD_KEYS.items():
            value = getattr(self, attr)
            if attr == "one_time_events" and value is not None:
                value = [e.to_dict() for e in value]
            out[key] = value
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationParams":
        """Create from a camelCase (or snake_case) dictionary.

        Missing keys and explicit nulls both become unset fields.
        """
        kwargs = {}
        for attr, key in _FIELD_KEYS.items():
            if key in data:
                value = data[key]
            else:
                value = data.get(attr)
            if value is None:
                continue
            if attr == "one_time_events":
                value = [
                    e if isinstance(e, OneTimeEvent) else OneTimeEvent.from_dict(e)
                    for e in value
                ]
            kwargs[attr] = value
        return cls(**kwargs)


_FIELD_KEYS = {
    "time_horizon_years": "timeHorizonYears",
    "current_age": "currentAge",
    "retirement_age": "retirementAge",
    "monthly_contribution": "monthlyContribution",
    "expected_return": "expectedReturn",
    "volatility": "volatility",
    "inflation_rate": "inflationRate",
    "contribution_growth": "contributionGrowth",
    "employer_match": "employerMatch",
    "employer_match_limit": "employerMatchLimit",
    "retirement_spending": "retirementSpending",
    "social_security_amount": "socialSecurityAmount",
    "social_security_age": "socialSecurityAge",
    "pension_income": "pensionIncome",
    "retirement_tax_rate": "retirementTaxRate",
    "withdrawal_strategy": "withdrawalStrategy",
    "one_time_events": "oneTimeEvents",
    "exclude_credit_card_debt": "excludeCreditCardDebt",
}


def default_params() -> SimulationParams:
    """Fully populated parameter set used when a caller supplies nothing."""
    return SimulationParams(
        time_horizon_years=DEFAULT_TIME_HORIZON,
        current_age=DEFAULT_CURRENT_AGE,
        retirement_age=DEFAULT_RETIREMENT_AGE,
        monthly_contribution=0.0,
        expected_return=DEFAULT_EXPECTED_RETURN,
        volatility=DEFAULT_VOLATILITY,
        inflation_rate=DEFAULT_INFLATION,
        contribution_growth=DEFAULT_CONTRIBUTION_GROWTH,
        employer_match=0.0,
        employer_match_limit=0.0,
        retirement_spending=0.0,
        social_security_amount=0.0,
        social_security_age=DEFAULT_SOCIAL_SECURITY_AGE,
        pension_income=0.0,
        retirement_tax_rate=DEFAULT_RETIREMENT_TAX_RATE,
        withdrawal_strategy=DEFAULT_WITHDRAWAL_STRATEGY,
        one_time_events=[],
        exclude_credit_card_debt=False,
    )


def resolve_params(params: Optional[SimulationParams] = None) -> SimulationParams:
    """Fill every unset field with its default.

    Resolving an already resolved set returns an equal object.
    """
    defaults = default_params()
    if params is None:
        return defaults

    updates = {
        f.name: getattr(defaults, f.name)
        for f in fields(params)
        if getattr(params, f.name) is None
    }
    if not updates:
        return params
    return replace(params, **updates)


def validate_params(params: SimulationParams) -> None:
    """Request-level checks run by the caller before projecting.

    The engine itself never calls this; it accepts whatever it is given.

    Raises:
        ValueError: if a required field is missing or a value is out of range
    """
    horizon = params.time_horizon_years
    if horizon is None:
        raise ValueError("time_horizon_years is required")
    if horizon < 1 or horizon > MAX_TIME_HORIZON:
        raise ValueError(f"Time horizon must be between 1 and {MAX_TIME_HORIZON} years")

    if params.current_age is None:
        raise ValueError("current_age is required")
    if params.current_age < 0:
        raise ValueError("current_age must be non-negative")

    if params.retirement_age is not None and params.retirement_age < params.current_age:
        raise ValueError("Retirement age must be greater than current age")

    if params.social_security_age is not None:
        lo, hi = SOCIAL_SECURITY_AGE_RANGE
        if not lo <= params.social_security_age <= hi:
            raise ValueError(f"Social Security claiming age must be between {lo} and {hi}")

    tax = params.retirement_tax_rate
    if tax is not None and not 0 <= tax < 1:
        raise ValueError("retirement_tax_rate must be in [0, 1)")
