"""Side-by-side comparison of alternative plans on the same holdings."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import EngineConfig
from .holdings import Asset, Debt
from .monte_carlo import project_net_worth
from .params import SimulationParams
from .results import ProjectionSummary, YearProjection


logger = logging.getLogger(__name__)

MIN_SCENARIOS = 2
MAX_SCENARIOS = 5
WEALTH_DIFF_THRESHOLD = 100_000


@dataclass(frozen=True)
class Scenario:
    name: str
    params: Optional[SimulationParams] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "params": self.params.to_dict() if self.params else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Scenario":
        params = data.get("params")
        return cls(
            name=data["name"],
            params=SimulationParams.from_dict(params) if params is not None else None,
        )


@dataclass
class ScenarioResult:
    name: str
    summary: ProjectionSummary
    projections: List[YearProjection] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "summary": self.summary.to_dict(),
            "projections": [p.to_dict() for p in self.projections],
        }


@dataclass(frozen=True)
class ScenarioDiff:
    """Alternative (B) measured against the baseline (A); diffs are B - A."""

    scenario_a: str
    scenario_b: str
    success_rate_diff: float
    final_p50_diff: float
    contributions_diff: float
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "scenarioA": self.scenario_a,
            "scenarioB": self.scenario_b,
            "successRateDiff": self.success_rate_diff,
            "finalP50Diff": self.final_p50_diff,
            "contributionsDiff": self.contributions_diff,
            "recommendation": self.recommendation,
        }


@dataclass
class ScenarioComparison:
    scenarios: List[ScenarioResult]
    comparisons: List[ScenarioDiff]
    best_scenario: str

    def to_dict(self) -> dict:
        return {
            "scenarios": [s.to_dict() for s in self.scenarios],
            "comparisons": [c.to_dict() for c in self.comparisons],
            "bestScenario": self.best_scenario,
        }


def format_percent(value: float) -> str:
    return f"+{value:.1f}%"


def generate_recommendation(name_a: str, name_b: str, success_rate_diff: float, final_p50_diff: float) -> str:
    """Plain-language verdict on scenario B versus baseline A."""
    if success_rate_diff > 10:
        return (f"{name_b} significantly improves your success rate by "
                f"{format_percent(success_rate_diff)}. Strongly consider this option.")
    if success_rate_diff > 5:
        return f"{name_b} improves your success rate by {format_percent(success_rate_diff)}. Worth considering."
    if success_rate_diff > 0:
        return f"{name_b} slightly improves success rate ({format_percent(success_rate_diff)}). Minor improvement."
    if success_rate_diff < -10:
        return f"{name_b} reduces success rate by {format_percent(-success_rate_diff)}. Not recommended."
    if success_rate_diff < -5:
        return f"{name_b} moderately reduces success rate. Consider trade-offs carefully."
    if success_rate_diff < 0:
        return f"{name_b} has slightly lower success rate, but may have other benefits."

    if final_p50_diff > WEALTH_DIFF_THRESHOLD:
        return f"Similar success rates, but {name_b} results in significantly higher expected wealth."
    if final_p50_diff < -WEALTH_DIFF_THRESHOLD:
        return f"Similar success rates, but {name_a} results in higher expected wealth."
    return "Both scenarios have similar outcomes. Choose based on personal preference."


def compare_scenarios(
    assets: Sequence[Asset],
    debts: Sequence[Debt],
    scenarios: Sequence[Scenario],
    config: Optional[EngineConfig] = None,
) -> ScenarioComparison:
    """Project each scenario and diff every later one against the first.

    Raises:
        ValueError: unless 2-5 scenarios are given
    """
    if not MIN_SCENARIOS <= len(scenarios) <= MAX_SCENARIOS:
        raise ValueError(f"Between {MIN_SCENARIOS} and {MAX_SCENARIOS} scenarios are required")

    results = []
    for scenario in scenarios:
        logger.info("Projecting scenario %r", scenario.name)
        response = project_net_worth(assets, debts, scenario.params, config)
        results.append(ScenarioResult(
            name=scenario.name,
            summary=response.summary,
            projections=response.projections,
        ))

    baseline = results[0]
    comparisons = []
    for alt in results[1:]:
        sr_diff = alt.summary.success_rate - baseline.summary.success_rate
        p50_diff = alt.summary.final_p50 - baseline.summary.final_p50
        comparisons.append(ScenarioDiff(
            scenario_a=baseline.name,
            scenario_b=alt.name,
            success_rate_diff=sr_diff,
            final_p50_diff=p50_diff,
            contributions_diff=alt.summary.total_contributions - baseline.summary.total_contributions,
            recommendation=generate_recommendation(baseline.name, alt.name, sr_diff, p50_diff),
        ))

    best = results[0]
    for r in results[1:]:
        if r.summary.success_rate > best.summary.success_rate:
            best = r

    return ScenarioComparison(scenarios=results, comparisons=comparisons, best_scenario=best.name)
