"""Wealth milestones: when, and how often, paths first cross fixed targets."""

from typing import List

import numpy as np

from .results import Milestone


MILESTONE_TARGETS = (100_000, 250_000, 500_000, 1_000_000, 2_000_000, 5_000_000)


def format_currency(amount: float) -> str:
    """Compact currency label: $100K, $2M."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.0f}M"
    if amount >= 1_000:
        return f"${amount / 1_000:.0f}K"
    return f"${amount:.0f}"


def detect_milestones(net_worth: np.ndarray, starting_net_worth: float) -> List[Milestone]:
    """Milestones crossed by at least one path.

    Args:
        net_worth: (paths x years) matrix of year-end net worth
        starting_net_worth: targets at or below this are skipped

    The reported ``median_year`` is the floor of the *mean* first-crossing
    year (1-based) among crossing paths.
    """
    net_worth = np.asarray(net_worth, dtype=float)
    if net_worth.ndim != 2 or net_worth.size == 0:
        return []
    n_paths = net_worth.shape[0]

    milestones = []
    for target in MILESTONE_TARGETS:
        if target <= starting_net_worth:
            continue

        crossed = net_worth >= target
        hit = crossed.any(axis=1)
        n_hit = int(hit.sum())
        if n_hit == 0:
            continue

        # argmax gives the first True per row
        first_years = crossed[hit].argmax(axis=1) + 1
        milestones.append(Milestone(
            description=f"{format_currency(target)} net worth",
            target_amount=float(target),
            median_year=int(first_years.sum()) // n_hit,
            probability_pct=n_hit / n_paths * 100,
        ))
    return milestones
