"""Reduce the simulation matrix to per-year percentile bands and a summary."""

from typing import List, Sequence

import numpy as np

from .path import ACCUMULATION, DISTRIBUTION
from .results import ProjectionSummary, YearProjection


PERCENTILES = (10, 25, 50, 75, 90)


def percentile(values: Sequence[float], p: float) -> float:
    """Linear-interpolated percentile; 0 for an empty input.

    Rank is (p / 100) * (n - 1) over the sorted values.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return 0.0
    return float(np.percentile(arr, p, method="linear"))


def percentile_bands(values: Sequence[float]) -> List[float]:
    """P10..P90 from one shared sort, so the bands are ordered."""
    arr = np.sort(np.asarray(values, dtype=float))
    return [percentile(arr, p) for p in PERCENTILES]


def build_projections(
    net_worth: np.ndarray,
    contributions: np.ndarray,
    withdrawals: np.ndarray,
    current_age: int,
    retirement_year: int,
) -> List[YearProjection]:
    """One YearProjection per column of the (paths x years) matrices."""
    n_paths, n_years = net_worth.shape
    projections = []
    for year in range(n_years):
        p10, p25, p50, p75, p90 = percentile_bands(net_worth[:, year])
        avg_contrib = float(contributions[:, year].sum() / n_paths) if n_paths else 0.0
        avg_withdraw = float(withdrawals[:, year].sum() / n_paths) if n_paths else 0.0
        projections.append(YearProjection(
            year=year + 1,
            age=current_age + year + 1,
            p10=p10, p25=p25, p50=p50, p75=p75, p90=p90,
            phase=DISTRIBUTION if year >= retirement_year else ACCUMULATION,
            contributions=avg_contrib,
            withdrawals=avg_withdraw,
        ))
    return projections


def build_summary(
    net_worth: np.ndarray,
    contributions: np.ndarray,
    withdrawals: np.ndarray,
    success: np.ndarray,
    warnings: np.ndarray,
    starting_net_worth: float,
    retirement_year: int,
) -> ProjectionSummary:
    n_paths, n_years = net_worth.shape
    if n_years:
        final = percentile_bands(net_worth[:, -1])
    else:
        final = [0.0] * len(PERCENTILES)

    if n_paths:
        success_rate = float(np.count_nonzero(success)) / n_paths * 100
        total_contrib = float(contributions.sum() / n_paths)
        total_withdraw = float(withdrawals.sum() / n_paths)
    else:
        success_rate = total_contrib = total_withdraw = 0.0

    return ProjectionSummary(
        starting_net_worth=starting_net_worth,
        final_p10=final[0],
        final_p25=final[1],
        final_p50=final[2],
        final_p75=final[3],
        final_p90=final[4],
        years=n_years,
        simulations=n_paths,
        success_rate=success_rate,
        retirement_year=retirement_year,
        total_contributions=total_contrib,
        total_withdrawals=total_withdraw,
        accumulation_warnings=int(np.count_nonzero(warnings)),
    )
