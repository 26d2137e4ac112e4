"""Rule-based plan insights."""

from typing import List

from .params import SimulationParams
from .results import Insight


def generate_insights(params: SimulationParams, success_rate: float) -> List[Insight]:
    """Apply the fixed insight rules to resolved params and a success rate.

    Rules are independent; several may fire together.
    """
    insights = []

    if success_rate >= 90:
        insights.append(Insight(
            "success", "On Track",
            "Your plan has a high probability of success. "
            "You're well-positioned for retirement.",
        ))
    elif success_rate >= 75:
        insights.append(Insight(
            "info", "Good Progress",
            "Your plan has a reasonable success rate. "
            "Consider small adjustments to improve certainty.",
        ))
    elif success_rate >= 50:
        insights.append(Insight(
            "warning", "Needs Attention",
            "Your success rate is below ideal. "
            "Consider increasing contributions or adjusting retirement age.",
        ))
    else:
        insights.append(Insight(
            "warning", "High Risk",
            "Your current plan has significant risk of running out of money. "
            "Consider major adjustments.",
        ))

    if params.monthly_contribution > 0 and params.employer_match == 0:
        insights.append(Insight(
            "opportunity", "Employer Match",
            "If your employer offers 401(k) matching, "
            "you may be leaving free money on the table.",
        ))

    if params.social_security_amount == 0 and params.current_age < 60:
        insights.append(Insight(
            "info", "Social Security",
            "Consider adding estimated Social Security benefits "
            "for more accurate projections.",
        ))

    if params.retirement_age < 62 and success_rate < 80:
        insights.append(Insight(
            "opportunity", "Delay Retirement",
            "Working 2-3 more years could significantly improve your success rate.",
        ))

    return insights
