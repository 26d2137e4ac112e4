"""
Monte Carlo net-worth projection engine.

Runs ``n_simulations`` independent paths through ``simulate_path`` and
reduces the resulting (paths x years) matrices to percentile bands, a run
summary, milestones and insights.

Inputs:
- assets / debts: holdings from the data-access layer (rates in %)
- params: SimulationParams, unset fields defaulted here
- config: EngineConfig (path count, seed, workers, progress)

Outputs:
- ProjectionResponse with projections, summary, milestones, insights

Every path gets its own child of ``SeedSequence(seed)``; path ``i`` always
receives child ``i``, so a seeded run gives the same matrix whether it runs
in-process or split across worker processes.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from .aggregate import build_projections, build_summary
from .config import EngineConfig
from .holdings import Asset, Debt, exclude_credit_card_debt, starting_net_worth, total_assets
from .insights import generate_insights
from .milestones import detect_milestones
from .params import SimulationParams, resolve_params
from .path import PathInputs, simulate_path
from .results import ProjectionResponse
from .returns import GaussianReturnSampler, SamplerFactory, spawn_path_seeds


logger = logging.getLogger(__name__)


@dataclass
class SimulationMatrix:
    """Raw per-path, per-year output of a run."""

    net_worth: np.ndarray      # (n_paths, n_years)
    contributions: np.ndarray  # (n_paths, n_years)
    withdrawals: np.ndarray    # (n_paths, n_years)
    success: np.ndarray        # (n_paths,) bool
    warnings: np.ndarray       # (n_paths,) bool

    @classmethod
    def empty(cls, n_paths: int, n_years: int) -> "SimulationMatrix":
        return cls(
            net_worth=np.zeros((n_paths, n_years)),
            contributions=np.zeros((n_paths, n_years)),
            withdrawals=np.zeros((n_paths, n_years)),
            success=np.ones(n_paths, dtype=bool),
            warnings=np.zeros(n_paths, dtype=bool),
        )

    @property
    def n_paths(self) -> int:
        return self.net_worth.shape[0]

    def fill(self, start: int, chunk: "SimulationMatrix") -> None:
        """Copy a chunk's rows into place starting at row ``start``."""
        stop = start + chunk.n_paths
        self.net_worth[start:stop] = chunk.net_worth
        self.contributions[start:stop] = chunk.contributions
        self.withdrawals[start:stop] = chunk.withdrawals
        self.success[start:stop] = chunk.success
        self.warnings[start:stop] = chunk.warnings


def simulate_chunk(
    inputs: PathInputs,
    seeds: Sequence[np.random.SeedSequence],
    sampler_factory: SamplerFactory,
) -> SimulationMatrix:
    """Simulate one contiguous block of paths.

    Module-level so it can be shipped to worker processes.
    """
    n_years = inputs.params.time_horizon_years
    out = SimulationMatrix.empty(len(seeds), n_years)
    for i, seed in enumerate(seeds):
        path = simulate_path(inputs, sampler_factory(seed))
        out.net_worth[i] = path.net_worth
        out.contributions[i] = path.contributions
        out.withdrawals[i] = path.withdrawals
        out.success[i] = path.success
        out.warnings[i] = path.accumulation_warning
    return out


def _chunk_bounds(n_paths: int, chunk_size: int) -> List[Tuple[int, int]]:
    return [(start, min(start + chunk_size, n_paths)) for start in range(0, n_paths, chunk_size)]


class SimulationEngine:
    """Projects a household's net worth over many random paths."""

    def __init__(
        self,
        assets: Sequence[Asset],
        debts: Sequence[Debt],
        params: Optional[SimulationParams] = None,
        config: Optional[EngineConfig] = None,
        sampler_factory: Optional[SamplerFactory] = None,
    ):
        self.params = resolve_params(params)
        self.config = config or EngineConfig()
        self.sampler_factory = sampler_factory or GaussianReturnSampler.from_seed

        self.assets = list(assets)
        self.debts = list(debts)
        if self.params.exclude_credit_card_debt:
            self.debts = exclude_credit_card_debt(self.debts)

        self.starting_net_worth = starting_net_worth(self.assets, self.debts)
        self.inputs = PathInputs.build(self.params, self.debts, total_assets(self.assets))

    def simulate(self) -> SimulationMatrix:
        """Run every path and return the raw matrices."""
        cfg = self.config
        n_paths = cfg.n_simulations
        n_years = self.params.time_horizon_years
        seeds = spawn_path_seeds(cfg.seed, n_paths)
        bounds = _chunk_bounds(n_paths, cfg.resolved_chunk_size())
        matrix = SimulationMatrix.empty(n_paths, n_years)

        if cfg.workers == 1:
            for start, stop in tqdm(bounds, desc="Simulating", disable=not cfg.show_progress):
                logger.debug("Simulating paths %d-%d", start, stop - 1)
                matrix.fill(start, simulate_chunk(self.inputs, seeds[start:stop], self.sampler_factory))
            return matrix

        with ProcessPoolExecutor(max_workers=cfg.workers) as executor:
            futures = []
            for start, stop in bounds:
                logger.debug("Dispatching paths %d-%d", start, stop - 1)
                futures.append((start, executor.submit(
                    simulate_chunk, self.inputs, seeds[start:stop], self.sampler_factory,
                )))
            for start, future in tqdm(futures, desc="Simulating", disable=not cfg.show_progress):
                matrix.fill(start, future.result())
        return matrix

    def run(self) -> ProjectionResponse:
        """Run the simulation and build the full response."""
        p = self.params
        logger.info(
            "Running %d simulations over %d years (retirement year %d, strategy %s)",
            self.config.n_simulations, p.time_horizon_years,
            self.inputs.retirement_year, self.inputs.strategy.value,
        )

        matrix = self.simulate()

        projections = build_projections(
            matrix.net_worth, matrix.contributions, matrix.withdrawals,
            current_age=p.current_age,
            retirement_year=self.inputs.retirement_year,
        )
        summary = build_summary(
            matrix.net_worth, matrix.contributions, matrix.withdrawals,
            matrix.success, matrix.warnings,
            starting_net_worth=self.starting_net_worth,
            retirement_year=self.inputs.retirement_year,
        )
        milestones = detect_milestones(matrix.net_worth, self.starting_net_worth)
        insights = generate_insights(p, summary.success_rate)

        logger.info(
            "Projection complete: success rate %.1f%%, final P50 %.0f",
            summary.success_rate, summary.final_p50,
        )
        return ProjectionResponse(
            projections=projections,
            summary=summary,
            milestones=milestones,
            insights=insights,
        )


def project_net_worth(
    assets: Sequence[Asset],
    debts: Sequence[Debt],
    params: Optional[SimulationParams] = None,
    config: Optional[EngineConfig] = None,
) -> ProjectionResponse:
    """Run a projection with the default Gaussian sampler."""
    return SimulationEngine(assets, debts, params, config).run()


def run_monte_carlo(assets: Sequence[Asset], debts: Sequence[Debt], years: int) -> ProjectionResponse:
    """Default plan with only the horizon set."""
    return project_net_worth(assets, debts, SimulationParams(time_horizon_years=years))
