"""
Tests for planning parameters, defaults and request validation.
"""
import pytest

from networth_suite.core.projection import (
    OneTimeEvent,
    SimulationParams,
    default_params,
    resolve_params,
    validate_params,
)


@pytest.mark.unit
class TestResolveParams:
    """Tests for filling unset parameters."""

    def test_none_gives_defaults(self):
        params = resolve_params(None)
        assert params == default_params()
        assert params.time_horizon_years == 30
        assert params.retirement_age == 65
        assert params.expected_return == 0.07
        assert params.volatility == 0.15
        assert params.inflation_rate == 0.03
        assert params.withdrawal_strategy == "fixed"
        assert params.one_time_events == []

    def test_fills_only_unset_fields(self):
        params = resolve_params(SimulationParams(time_horizon_years=10, current_age=50))
        assert params.time_horizon_years == 10
        assert params.current_age == 50
        assert params.retirement_age == 65
        assert params.social_security_age == 67
        assert params.is_resolved

    def test_explicit_zero_is_kept(self):
        params = resolve_params(SimulationParams(
            expected_return=0.0, volatility=0.0, retirement_tax_rate=0.0,
        ))
        assert params.expected_return == 0.0
        assert params.volatility == 0.0
        assert params.retirement_tax_rate == 0.0

    def test_idempotent(self):
        once = resolve_params(SimulationParams(time_horizon_years=12, monthly_contribution=300.0))
        twice = resolve_params(once)
        assert twice == once
        assert twice is once

    def test_does_not_mutate_input(self):
        params = SimulationParams(time_horizon_years=12)
        resolve_params(params)
        assert params.current_age is None


@pytest.mark.unit
class TestRetirementYear:
    """Tests for the retirement year offset."""

    def test_offset(self):
        params = resolve_params(SimulationParams(time_horizon_years=40, current_age=40, retirement_age=62))
        assert params.retirement_year == 22

    def test_clamped_to_horizon(self):
        params = resolve_params(SimulationParams(time_horizon_years=30, current_age=35, retirement_age=70))
        assert params.retirement_year == 30

    def test_already_retired(self):
        params = resolve_params(SimulationParams(time_horizon_years=30, current_age=70, retirement_age=65))
        assert params.retirement_year == 0


@pytest.mark.unit
class TestSerialization:
    """Tests for camelCase dict conversion."""

    def test_to_dict_keys(self):
        data = default_params().to_dict()
        assert data["timeHorizonYears"] == 30
        assert data["withdrawalStrategy"] == "fixed"
        assert data["excludeCreditCardDebt"] is False
        assert "monthlyContribution" in data

    def test_round_trip(self):
        params = SimulationParams(
            time_horizon_years=25,
            current_age=45,
            employer_match=0.5,
            one_time_events=[OneTimeEvent(year=3, amount=-20_000.0, description="Roof")],
        )
        assert SimulationParams.from_dict(params.to_dict()) == params

    def test_from_dict_accepts_snake_case(self):
        params = SimulationParams.from_dict({"time_horizon_years": 5, "currentAge": 30})
        assert params.time_horizon_years == 5
        assert params.current_age == 30

    def test_null_is_unset(self):
        params = SimulationParams.from_dict({"timeHorizonYears": 5, "volatility": None})
        assert params.volatility is None


@pytest.mark.unit
class TestOneTimeEvent:
    """Tests for event year matching."""

    def test_single_year(self):
        event = OneTimeEvent(year=3, amount=100.0)
        assert not event.applies_to(2)
        assert event.applies_to(3)
        assert not event.applies_to(4)

    def test_recurring(self):
        event = OneTimeEvent(year=3, amount=100.0, recurring=True)
        assert not event.applies_to(2)
        assert event.applies_to(3)
        assert event.applies_to(10)


@pytest.mark.unit
class TestValidateParams:
    """Tests for request-level validation."""

    def test_valid(self):
        validate_params(SimulationParams(time_horizon_years=30, current_age=35, retirement_age=65))

    @pytest.mark.parametrize("horizon", [None, 0, 81])
    def test_bad_horizon(self, horizon):
        with pytest.raises(ValueError):
            validate_params(SimulationParams(time_horizon_years=horizon, current_age=35))

    def test_missing_age(self):
        with pytest.raises(ValueError, match="current_age"):
            validate_params(SimulationParams(time_horizon_years=30))

    def test_retirement_before_current_age(self):
        with pytest.raises(ValueError, match="Retirement age"):
            validate_params(SimulationParams(time_horizon_years=30, current_age=50, retirement_age=45))

    @pytest.mark.parametrize("age", [61, 71])
    def test_social_security_age_range(self, age):
        with pytest.raises(ValueError, match="Social Security"):
            validate_params(SimulationParams(time_horizon_years=30, current_age=35, social_security_age=age))

    def test_tax_rate_range(self):
        with pytest.raises(ValueError):
            validate_params(SimulationParams(time_horizon_years=30, current_age=35, retirement_tax_rate=1.0))
