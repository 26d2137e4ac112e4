"""
Tests for rule-based insights.
"""
import pytest

from networth_suite.core.projection import SimulationParams, generate_insights, resolve_params


def titles(params, success_rate):
    return [i.title for i in generate_insights(resolve_params(params), success_rate)]


@pytest.mark.unit
class TestSuccessBands:
    """Exactly one success-rate band fires."""

    @pytest.mark.parametrize("rate,title", [
        (95, "On Track"),
        (90, "On Track"),
        (80, "Good Progress"),
        (60, "Needs Attention"),
        (10, "High Risk"),
    ])
    def test_band(self, rate, title):
        params = SimulationParams(current_age=65, social_security_amount=1_000.0)
        assert titles(params, rate) == [title]

    def test_band_types(self):
        params = resolve_params(SimulationParams(current_age=65, social_security_amount=1_000.0))
        assert generate_insights(params, 95)[0].type == "success"
        assert generate_insights(params, 80)[0].type == "info"
        assert generate_insights(params, 10)[0].type == "warning"


@pytest.mark.unit
class TestOpportunityRules:
    """Tests for the parameter-driven rules."""

    def test_employer_match(self):
        params = SimulationParams(current_age=65, monthly_contribution=500.0, social_security_amount=1.0)
        assert "Employer Match" in titles(params, 95)

    def test_no_employer_note_with_match(self):
        params = SimulationParams(
            current_age=65, monthly_contribution=500.0, employer_match=0.5, social_security_amount=1.0,
        )
        assert "Employer Match" not in titles(params, 95)

    def test_social_security_reminder(self):
        assert "Social Security" in titles(SimulationParams(current_age=40), 95)
        assert "Social Security" not in titles(SimulationParams(current_age=60), 95)

    def test_delay_retirement(self):
        params = SimulationParams(current_age=45, retirement_age=58, social_security_amount=1.0)
        assert "Delay Retirement" in titles(params, 70)
        assert "Delay Retirement" not in titles(params, 85)

    def test_rules_co_occur(self):
        params = SimulationParams(current_age=40, retirement_age=55, monthly_contribution=100.0)
        assert titles(params, 30) == ["High Risk", "Employer Match", "Social Security", "Delay Retirement"]
