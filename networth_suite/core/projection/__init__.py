"""
Net-worth projection engine.

Simulates thousands of independent random futures of a household's net
worth through accumulation and retirement, then summarizes them.

Withdrawal strategies:
- FIXED: 4% of the portfolio value at retirement, every year.
- DYNAMIC: 4% of the current portfolio value.
- GUARDRAILS: 4% of the retirement value, kept within 3-5% of current value.
- SPENDING: the desired retirement spending, grown with inflation.
"""

from .params import (
    OneTimeEvent,
    SimulationParams,
    default_params,
    resolve_params,
    validate_params,
)
from .holdings import Asset, Debt, starting_net_worth, exclude_credit_card_debt
from .returns import (
    ReturnSampler,
    GaussianReturnSampler,
    ConstantReturnSampler,
    spawn_path_seeds,
)
from .withdrawal import WithdrawalStrategy
from .path import (
    PathInputs,
    SimulationPathState,
    YearResult,
    PathResult,
    advance_one_year,
    simulate_path,
)
from .config import EngineConfig
from .results import (
    YearProjection,
    ProjectionSummary,
    Milestone,
    Insight,
    ProjectionResponse,
)
from .aggregate import percentile
from .milestones import detect_milestones
from .insights import generate_insights
from .monte_carlo import (
    SimulationEngine,
    SimulationMatrix,
    project_net_worth,
    run_monte_carlo,
)
from .scenarios import (
    Scenario,
    ScenarioResult,
    ScenarioDiff,
    ScenarioComparison,
    compare_scenarios,
)

__version__ = "1.0.0"
__all__ = [
    # Parameters
    "OneTimeEvent",
    "SimulationParams",
    "default_params",
    "resolve_params",
    "validate_params",
    # Holdings
    "Asset",
    "Debt",
    "starting_net_worth",
    "exclude_credit_card_debt",
    # Returns
    "ReturnSampler",
    "GaussianReturnSampler",
    "ConstantReturnSampler",
    "spawn_path_seeds",
    # Paths
    "WithdrawalStrategy",
    "PathInputs",
    "SimulationPathState",
    "YearResult",
    "PathResult",
    "advance_one_year",
    "simulate_path",
    # Engine
    "EngineConfig",
    "SimulationEngine",
    "SimulationMatrix",
    "project_net_worth",
    "run_monte_carlo",
    # Results
    "YearProjection",
    "ProjectionSummary",
    "Milestone",
    "Insight",
    "ProjectionResponse",
    "percentile",
    "detect_milestones",
    "generate_insights",
    # Scenarios
    "Scenario",
    "ScenarioResult",
    "ScenarioDiff",
    "ScenarioComparison",
    "compare_scenarios",
]
