from __future__ import annotations

from math import isclose

import pytest

from card_savings.core.sync import (
    CalculatorInputs,
    apply_edit,
    derive,
    dollars_to_percent,
    set_apr,
    set_balance_carried_percent,
    set_monthly_spend,
    set_paid_off_dollar,
)


def test_default_example_derivations():
    """2000 spend, 50% paid off, 23% APR."""
    inputs = CalculatorInputs(monthlySpend=2000, balanceCarriedPercent=50, apr=23)
    derived = derive(inputs)

    assert isclose(derived.paidOffBalance, 1000.0)
    assert isclose(derived.carriedBalance, 1000.0)
    assert isclose(derived.annualInterest, 230.0)
    assert isclose(derived.monthlySavings, 19.17, abs_tol=0.005)
    assert isclose(inputs.monthlySavings, derived.monthlySavings)


def test_set_monthly_spend_keeps_percent_and_scales_dollars():
    inputs = CalculatorInputs(monthlySpend=2000, balanceCarriedPercent=25, apr=20)
    updated = set_monthly_spend(inputs, 4000)

    assert updated.balanceCarriedPercent == 25
    assert isclose(updated.paidOffBalance, 1000.0)
    assert inputs.monthlySpend == 2000, "original snapshot must stay untouched"


@pytest.mark.parametrize("raw", [-100, "", "not a number", None])
def test_set_monthly_spend_clamps_bad_input_to_zero(raw):
    updated = set_monthly_spend(CalculatorInputs(), raw)
    assert updated.monthlySpend == 0.0


@pytest.mark.parametrize("raw, expected", [(-10, 0.0), (0, 0.0), (64, 64.0), (101, 100.0), ("x", 0.0)])
def test_set_balance_carried_percent_clamps(raw, expected):
    assert set_balance_carried_percent(CalculatorInputs(), raw).balanceCarriedPercent == expected


def test_set_paid_off_dollar_converts_to_whole_percent():
    inputs = CalculatorInputs(monthlySpend=2000, balanceCarriedPercent=50, apr=23)

    assert set_paid_off_dollar(inputs, 500).balanceCarriedPercent == 25
    assert set_paid_off_dollar(inputs, 1234).balanceCarriedPercent == 62  # 61.7%
    assert set_paid_off_dollar(inputs, 2500).balanceCarriedPercent == 100
    assert set_paid_off_dollar(inputs, -50).balanceCarriedPercent == 0
    assert set_paid_off_dollar(inputs, "").balanceCarriedPercent == 0


def test_set_paid_off_dollar_rounds_half_up():
    inputs = CalculatorInputs(monthlySpend=200, balanceCarriedPercent=0, apr=0)
    # 25 / 200 = 12.5%
    assert set_paid_off_dollar(inputs, 25).balanceCarriedPercent == 13


@pytest.mark.parametrize("dollars", [0, 1, 500, 1e9, -3, "abc"])
def test_paid_off_dollar_with_zero_spend_is_zero_percent(dollars):
    inputs = CalculatorInputs(monthlySpend=0, balanceCarriedPercent=80, apr=23)
    updated = set_paid_off_dollar(inputs, dollars)

    assert updated.balanceCarriedPercent == 0
    assert updated.paidOffBalance == 0
    assert dollars_to_percent(dollars, 0) == 0


@pytest.mark.parametrize("spend", [1, 37, 1000, 2000, 12345.67])
@pytest.mark.parametrize("percent", [0, 1, 25, 33, 50, 67, 99, 100])
def test_dollar_edit_recovers_percent(spend, percent):
    inputs = CalculatorInputs(monthlySpend=spend, balanceCarriedPercent=0, apr=10)
    updated = set_paid_off_dollar(inputs, spend * percent / 100)
    assert updated.balanceCarriedPercent == percent


@pytest.mark.parametrize("spend, dollars", [(2000, 1000), (2000, 1234), (850, 17.5), (3, 2)])
def test_paid_off_round_trip_within_rounding(spend, dollars):
    inputs = CalculatorInputs(monthlySpend=spend, balanceCarriedPercent=0, apr=10)
    updated = set_paid_off_dollar(inputs, dollars)

    # percent is whole, so dollars can drift by at most half a percent of spend
    assert abs(updated.paidOffBalance - dollars) <= spend / 200 + 1e-9


def test_set_apr_clamps_negative_and_optional_ceiling():
    inputs = CalculatorInputs()

    assert set_apr(inputs, -5).apr == 0.0
    assert set_apr(inputs, 150).apr == 150.0
    assert set_apr(inputs, 150, ceiling=100).apr == 100.0
    assert set_apr(inputs, "29.99").apr == 29.99


def test_apply_edit_dispatches_each_field():
    inputs = CalculatorInputs(monthlySpend=2000, balanceCarriedPercent=50, apr=23)

    assert apply_edit(inputs, "monthlySpend", 3000).monthlySpend == 3000
    assert apply_edit(inputs, "balanceCarriedPercent", 10).balanceCarriedPercent == 10
    assert apply_edit(inputs, "paidOffBalance", 1500).balanceCarriedPercent == 75
    assert apply_edit(inputs, "apr", 500, apr_ceiling=100).apr == 100


def test_apply_edit_rejects_unknown_field():
    with pytest.raises(ValueError):
        apply_edit(CalculatorInputs(), "creditLimit", 10)


def test_from_raw_clamps_every_field():
    inputs = CalculatorInputs.from_raw(monthlySpend="-1", balanceCarriedPercent=250, apr="")

    assert inputs.monthlySpend == 0
    assert inputs.balanceCarriedPercent == 100
    assert inputs.apr == 0


def test_full_payoff_means_no_interest():
    inputs = CalculatorInputs(monthlySpend=5000, balanceCarriedPercent=100, apr=29)
    derived = derive(inputs)

    assert derived.carriedBalance == 0
    assert derived.annualInterest == 0
    assert derived.monthlySavings == 0


def test_paid_off_dollar_far_above_spend_is_full_payoff():
    inputs = CalculatorInputs(monthlySpend=1, balanceCarriedPercent=0, apr=23)

    assert set_paid_off_dollar(inputs, 1e30).balanceCarriedPercent == 100
    assert set_paid_off_dollar(inputs, -1e30).balanceCarriedPercent == 0
    assert dollars_to_percent(1e308, 1e-10) == 100
