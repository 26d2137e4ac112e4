"""Asset and debt records supplied by the data-access layer.

Rates here are percentages (7.0 = 7%), as stored by the data-access layer.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional


# Name fragments that mark a debt as revolving credit
CREDIT_CARD_KEYWORDS = (
    "credit card",
    "credit",
    "card",
    "visa",
    "mastercard",
    "amex",
    "american express",
    "discover",
    "chase sapphire",
    "capital one",
    "citi",
    "barclays",
)


@dataclass(frozen=True)
class Asset:
    """An investable holding."""

    asset_id: int
    name: str
    current_value: float
    expected_return: Optional[float] = None  # % per year
    volatility: Optional[float] = None       # % per year (stdev)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.asset_id,
            "name": self.name,
            "currentValue": self.current_value,
            "customReturn": self.expected_return,
            "customVolatility": self.volatility,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Asset":
        """Create from dictionary."""
        return cls(
            asset_id=data.get("id", 0),
            name=data.get("name", ""),
            current_value=float(data.get("currentValue", 0.0)),
            expected_return=data.get("customReturn"),
            volatility=data.get("customVolatility"),
        )


@dataclass(frozen=True)
class Debt:
    """An outstanding liability."""

    debt_id: int
    name: str
    current_balance: float
    interest_rate: Optional[float] = None    # % APR
    minimum_payment: Optional[float] = None  # per month

    @property
    def monthly_rate(self) -> float:
        """Monthly compounding rate as a decimal (0 when no rate is set)."""
        if self.interest_rate is None or self.interest_rate <= 0:
            return 0.0
        return self.interest_rate / 100.0 / 12.0

    @property
    def is_credit_card(self) -> bool:
        """True if the debt name looks like revolving credit."""
        lower = self.name.lower()
        return any(kw in lower for kw in CREDIT_CARD_KEYWORDS)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.debt_id,
            "name": self.name,
            "currentBalance": self.current_balance,
            "interestRate": self.interest_rate,
            "minimumPayment": self.minimum_payment,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Debt":
        """Create from dictionary."""
        return cls(
            debt_id=data.get("id", 0),
            name=data.get("name", ""),
            current_balance=float(data.get("currentBalance", 0.0)),
            interest_rate=data.get("interestRate"),
            minimum_payment=data.get("minimumPayment"),
        )


def total_assets(assets: Iterable[Asset]) -> float:
    return sum(a.current_value for a in assets)


def total_debts(debts: Iterable[Debt]) -> float:
    return sum(d.current_balance for d in debts)


def starting_net_worth(assets: Iterable[Asset], debts: Iterable[Debt]) -> float:
    """Total asset value less total debt balance."""
    return total_assets(assets) - total_debts(debts)


def exclude_credit_card_debt(debts: Iterable[Debt]) -> List[Debt]:
    """Drop revolving-credit debts, keeping the rest in order."""
    return [d for d in debts if not d.is_credit_card]
