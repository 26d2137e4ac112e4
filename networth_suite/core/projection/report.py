"""Console, CSV and chart output for a projection run.

Usage:
    python -m networth_suite.core.projection.report
"""

import logging
import os
from dataclasses import replace
from typing import List

import pandas as pd
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from .config import EngineConfig
from .holdings import Asset, Debt
from .monte_carlo import project_net_worth
from .params import OneTimeEvent, SimulationParams
from .results import ProjectionResponse


# Sample household for the command-line run
SAMPLE_ASSETS = [
    Asset(1, "401(k)", 120_000.0),
    Asset(2, "Brokerage", 45_000.0),
    Asset(3, "Savings", 20_000.0),
]
SAMPLE_DEBTS = [
    Debt(1, "Auto loan", 14_000.0, interest_rate=6.5, minimum_payment=420.0),
    Debt(2, "Visa card", 3_500.0, interest_rate=22.0, minimum_payment=150.0),
]
SAMPLE_PARAMS = SimulationParams(
    time_horizon_years=45,
    current_age=40,
    retirement_age=65,
    monthly_contribution=1_500.0,
    employer_match=0.5,
    employer_match_limit=6_000.0,
    retirement_spending=5_000.0,
    social_security_amount=2_400.0,
    social_security_age=67,
    withdrawal_strategy="guardrails",
    one_time_events=[OneTimeEvent(year=8, amount=-60_000.0, description="College tuition")],
)


def print_summary_table(response: ProjectionResponse):
    """Print summary and per-year table to console."""
    summary = response.summary
    print()
    print("=" * 80)
    print("NET WORTH PROJECTION SUMMARY")
    print("=" * 80)
    print()
    for label, value in summary.format_dict().items():
        print(f"  {label:<24} {value:>20}")
    print()

    print(f"{'Year':>4} {'Age':>4} {'Phase':<13} {'P10':>13} {'P50':>13} {'P90':>13} {'Contrib':>11} {'Withdraw':>11}")
    print("-" * 80)
    for p in response.projections:
        print(f"{p.year:>4} {p.age:>4} {p.phase:<13} {p.p10:>13,.0f} {p.p50:>13,.0f} {p.p90:>13,.0f} "
              f"{p.contributions:>11,.0f} {p.withdrawals:>11,.0f}")
    print("-" * 80)
    print()

    if response.milestones:
        print("MILESTONES:")
        for m in response.milestones:
            print(f"  - {m.description}: {m.probability_pct:.1f}% of paths, around year {m.median_year}")
        print()

    if response.insights:
        print("INSIGHTS:")
        for i in response.insights:
            print(f"  * [{i.type}] {i.title}: {i.message}")
        print()


def save_results_csv(response: ProjectionResponse, output_dir: str) -> List[str]:
    """Save projections, milestones and insights to CSV files."""
    os.makedirs(output_dir, exist_ok=True)
    saved = []

    projections_path = os.path.join(output_dir, "projections.csv")
    response.to_dataframe().to_csv(projections_path)
    saved.append(projections_path)

    milestones_df = pd.DataFrame(
        [m.to_dict() for m in response.milestones],
        columns=["description", "targetAmount", "medianYear", "probabilityPct"],
    )
    milestones_path = os.path.join(output_dir, "milestones.csv")
    milestones_df.to_csv(milestones_path, index=False)
    saved.append(milestones_path)

    insights_df = pd.DataFrame(
        [i.to_dict() for i in response.insights],
        columns=["type", "title", "message"],
    )
    insights_path = os.path.join(output_dir, "insights.csv")
    insights_df.to_csv(insights_path, index=False)
    saved.append(insights_path)

    for path in saved:
        print(f"Saved: {path}")
    return saved


def plot_fan_chart(response: ProjectionResponse, output_dir: str) -> str:
    """Percentile fan chart of net worth by year.

    Returns:
        Path of the saved PNG
    """
    os.makedirs(output_dir, exist_ok=True)
    df = response.to_dataframe()
    years = df.index.values

    fig = Figure(figsize=(10, 6))
    ax = fig.subplots()

    ax.fill_between(years, df["p10"], df["p90"], alpha=0.2, color='steelblue', label='P10-P90')
    ax.fill_between(years, df["p25"], df["p75"], alpha=0.4, color='steelblue', label='P25-P75')
    ax.plot(years, df["p50"], color='navy', linewidth=2, label='Median')

    retirement_year = response.summary.retirement_year
    if 0 < retirement_year < response.summary.years:
        ax.axvline(
            retirement_year + 0.5,
            color='red',
            linestyle='--',
            linewidth=1.5,
            label='Retirement',
        )

    ax.set_xlabel('Year', fontsize=12)
    ax.set_ylabel('Net worth', fontsize=12)
    ax.set_title(
        f'Net Worth Projection (n={response.summary.simulations:,}, '
        f'success rate {response.summary.success_rate:.1f}%)',
        fontsize=14,
    )
    ax.yaxis.set_major_formatter(FuncFormatter(lambda x, _: f'${x:,.0f}'))
    ax.legend(loc='upper left')
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    filepath = os.path.join(output_dir, "fan_chart.png")
    fig.savefig(filepath, dpi=150, bbox_inches='tight')
    print(f"Saved: {filepath}")
    return filepath


def main():
    """Project the sample household and write the results."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    output_dir = os.path.join(os.getcwd(), "results", "projection")

    config = replace(EngineConfig.from_env(), show_progress=True)

    response = project_net_worth(SAMPLE_ASSETS, SAMPLE_DEBTS, SAMPLE_PARAMS, config)

    print_summary_table(response)

    print("\nGenerating chart...")
    plot_fan_chart(response, output_dir)

    print("\nSaving data...")
    save_results_csv(response, output_dir)

    print(f"\nAll results saved to: {output_dir}")


if __name__ == "__main__":
    main()
