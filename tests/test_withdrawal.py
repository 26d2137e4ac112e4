"""
Tests for withdrawal strategies.
"""
import logging

import pytest

from networth_suite.core.projection import WithdrawalStrategy


@pytest.mark.unit
class TestParse:
    """Tests for strategy name parsing."""

    @pytest.mark.parametrize("name,expected", [
        ("fixed", WithdrawalStrategy.FIXED),
        ("dynamic", WithdrawalStrategy.DYNAMIC),
        ("guardrails", WithdrawalStrategy.GUARDRAILS),
        ("spending", WithdrawalStrategy.SPENDING),
    ])
    def test_known(self, name, expected):
        assert WithdrawalStrategy.parse(name) is expected

    def test_unknown_falls_back(self, caplog):
        with caplog.at_level(logging.DEBUG):
            assert WithdrawalStrategy.parse("bucket") is WithdrawalStrategy.SPENDING
        assert "bucket" in caplog.text

    def test_empty_falls_back(self):
        assert WithdrawalStrategy.parse("") is WithdrawalStrategy.SPENDING

    @pytest.mark.parametrize("name", ["Fixed", " fixed", "FIXED", "Guardrails"])
    def test_case_and_whitespace_are_not_folded(self, name):
        assert WithdrawalStrategy.parse(name) is WithdrawalStrategy.SPENDING


@pytest.mark.unit
class TestWithdrawalNeed:
    """Tests for each strategy's annual need."""

    def test_fixed_ignores_current_value(self):
        s = WithdrawalStrategy.FIXED
        assert s.withdrawal_need(1_000_000, 50_000, 1_000_000) == pytest.approx(40_000)
        assert s.withdrawal_need(300_000, 50_000, 1_000_000) == pytest.approx(40_000)

    def test_dynamic_tracks_current_value(self):
        assert WithdrawalStrategy.DYNAMIC.withdrawal_need(500_000, 0, 1_000_000) == pytest.approx(20_000)

    def test_guardrails_baseline(self):
        assert WithdrawalStrategy.GUARDRAILS.withdrawal_need(1_000_000, 0, 1_000_000) == pytest.approx(40_000)

    def test_guardrails_floor_when_ahead(self):
        # baseline 40k / 2M = 2% < 3%
        assert WithdrawalStrategy.GUARDRAILS.withdrawal_need(2_000_000, 0, 1_000_000) == pytest.approx(60_000)

    def test_guardrails_ceiling_when_behind(self):
        # baseline 40k / 500k = 8% > 5%
        assert WithdrawalStrategy.GUARDRAILS.withdrawal_need(500_000, 0, 1_000_000) == pytest.approx(25_000)

    def test_guardrails_empty_portfolio(self):
        assert WithdrawalStrategy.GUARDRAILS.withdrawal_need(0, 50_000, 1_000_000) == 0.0

    def test_spending_passes_through(self):
        assert WithdrawalStrategy.SPENDING.withdrawal_need(10, 36_000, 1_000_000) == 36_000
