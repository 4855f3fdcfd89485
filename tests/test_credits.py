import math

import pytest

from trip_emissions.credits import compute_savings, compute_credits, estimate_price
from trip_emissions.models import (
    CarbonCreditPolicy, SavingsResult, PriceEstimate, Valid, Invalid, DEFAULT_SETTINGS
)


def test_savings_against_itself_are_zero():
    for e in (0.01, 51.6, 1148.0):
        assert compute_savings(e, e) == Valid(SavingsResult(saved_kg=0.0, percentage=0.0))


def test_bicycle_saves_everything_against_car():
    assert compute_savings(0, 51.6) == Valid(SavingsResult(saved_kg=51.6, percentage=100.0))


def test_savings_can_be_negative():
    outcome = compute_savings(412.8, 51.6)
    assert outcome.value.saved_kg == pytest.approx(-361.2)
    assert outcome.value.percentage == pytest.approx(-700.0)


def test_savings_without_positive_baseline_have_no_percentage():
    assert compute_savings(0, 0) == Valid(SavingsResult(saved_kg=0.0, percentage=None))
    assert compute_savings(5, -10).value.percentage is None


@pytest.mark.parametrize("emission,baseline", [(math.nan, 1), (1, math.inf), (None, 1), ("x", 1)])
def test_savings_reject_non_finite_input(emission, baseline):
    assert isinstance(compute_savings(emission, baseline), Invalid)


def test_credit_basics():
    kg_per_credit = DEFAULT_SETTINGS.credit_policy.kg_per_credit
    assert compute_credits(0) == Valid(0.0)
    assert compute_credits(kg_per_credit) == Valid(1.0)
    assert compute_credits(51.6) == Valid(0.0516)


def test_credits_use_four_decimals():
    assert compute_credits(1.23456) == Valid(0.0012)
    assert compute_credits(0.05) == Valid(0.0001)


@pytest.mark.parametrize("value", [-0.01, math.nan, -math.inf, math.inf, None])
def test_credits_reject_bad_input(value):
    assert isinstance(compute_credits(value), Invalid)


def test_credits_with_custom_policy():
    policy = CarbonCreditPolicy(kg_per_credit=500)
    assert compute_credits(250, policy) == Valid(0.5)


def test_price_of_nothing_is_zero():
    assert estimate_price(0) == Valid(PriceEstimate(min=0.0, max=0.0, average=0.0))


def test_price_for_sao_paulo_rio_by_car():
    print("Running test_price_for_sao_paulo_rio_by_car...")
    assert estimate_price(0.0516) == Valid(PriceEstimate(min=2.58, max=7.74, average=5.16))
    print("PASS")


def test_average_is_taken_from_rounded_bounds():
    # Unrounded: min 0.005, max 0.015, mean 0.01.
    # Rounded first: min 0.01, max 0.02, mean 0.015 -> 0.02.
    assert estimate_price(0.0001) == Valid(PriceEstimate(min=0.01, max=0.02, average=0.02))


@pytest.mark.parametrize("value", [-1, math.nan, math.inf, "lots"])
def test_price_rejects_bad_input(value):
    assert isinstance(estimate_price(value), Invalid)


def test_policy_validation():
    with pytest.raises(ValueError):
        CarbonCreditPolicy(kg_per_credit=0)
    with pytest.raises(ValueError):
        CarbonCreditPolicy(price_min_per_credit=-1)
    with pytest.raises(ValueError):
        CarbonCreditPolicy(price_min_per_credit=200, price_max_per_credit=150)
    # Equal bounds are allowed
    policy = CarbonCreditPolicy(price_min_per_credit=80, price_max_per_credit=80)
    assert estimate_price(2, policy) == Valid(PriceEstimate(min=160.0, max=160.0, average=160.0))


def test_out_of_range_results_do_not_raise():
    savings = compute_savings(-1e308, 1e308)
    assert isinstance(savings, Valid)
    assert savings.value.saved_kg == math.inf

    price = estimate_price(1e307)
    assert isinstance(price, Valid)
    assert price.value.min == math.inf
    assert price.value.average == math.inf
