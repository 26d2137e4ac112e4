"""Output records returned to the API layer.

All records are plain dataclasses; ``to_dict`` produces the camelCase shape
the API layer serializes.
"""

from dataclasses import dataclass, field
from typing import List

import pandas as pd


@dataclass(frozen=True)
class YearProjection:
    """Net-worth distribution across all paths for one year."""

    year: int
    age: int
    p10: float
    p25: float
    p50: float
    p75: float
    p90: float
    phase: str
    contributions: float  # average across paths
    withdrawals: float    # average across paths

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "year": self.year,
            "age": self.age,
            "p10": self.p10,
            "p25": self.p25,
            "p50": self.p50,
            "p75": self.p75,
            "p90": self.p90,
            "phase": self.phase,
            "contributions": self.contributions,
            "withdrawals": self.withdrawals,
        }


@dataclass(frozen=True)
class ProjectionSummary:
    """Run-level statistics."""

    starting_net_worth: float
    final_p10: float
    final_p25: float
    final_p50: float
    final_p75: float
    final_p90: float
    years: int
    simulations: int
    success_rate: float         # percent of paths never under-funded
    retirement_year: int
    total_contributions: float  # average per path over the horizon
    total_withdrawals: float    # average per path over the horizon
    accumulation_warnings: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "startingNetWorth": self.starting_net_worth,
            "finalP10": self.final_p10,
            "finalP25": self.final_p25,
            "finalP50": self.final_p50,
            "finalP75": self.final_p75,
            "finalP90": self.final_p90,
            "years": self.years,
            "simulations": self.simulations,
            "successRate": self.success_rate,
            "retirementYear": self.retirement_year,
            "totalContributions": self.total_contributions,
            "totalWithdrawals": self.total_withdrawals,
            "accumulationWarnings": self.accumulation_warnings,
        }

    def format_dict(self) -> dict:
        """Convert to formatted string dictionary."""
        return {
            "Starting Net Worth": f"${self.starting_net_worth:,.0f}",
            "Final P10": f"${self.final_p10:,.0f}",
            "Final P50": f"${self.final_p50:,.0f}",
            "Final P90": f"${self.final_p90:,.0f}",
            "Success Rate": f"{self.success_rate:.1f}%",
            "Retirement Year": str(self.retirement_year),
            "Simulations": f"{self.simulations:,}",
            "Avg Contributions": f"${self.total_contributions:,.0f}",
            "Avg Withdrawals": f"${self.total_withdrawals:,.0f}",
            "Accumulation Warnings": str(self.accumulation_warnings),
        }


@dataclass(frozen=True)
class Milestone:
    description: str
    target_amount: float
    median_year: int
    probability_pct: float

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "targetAmount": self.target_amount,
            "medianYear": self.median_year,
            "probabilityPct": self.probability_pct,
        }


@dataclass(frozen=True)
class Insight:
    type: str  # success | info | warning | opportunity
    title: str
    message: str

    def to_dict(self) -> dict:
        return {"type": self.type, "title": self.title, "message": self.message}


@dataclass
class ProjectionResponse:
    """Everything a projection run produces."""

    projections: List[YearProjection]
    summary: ProjectionSummary
    milestones: List[Milestone] = field(default_factory=list)
    insights: List[Insight] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "projections": [p.to_dict() for p in self.projections],
            "summary": self.summary.to_dict(),
            "milestones": [m.to_dict() for m in self.milestones],
            "insights": [i.to_dict() for i in self.insights],
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Export per-year projections as a DataFrame indexed by year."""
        df = pd.DataFrame([p.to_dict() for p in self.projections])
        if df.empty:
            return df
        return df.set_index("year")
