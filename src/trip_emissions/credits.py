import logging
from typing import Any

from .constants import CREDIT_DECIMALS, PRICE_DECIMALS
from .models import (
    CarbonCreditPolicy, SavingsResult, PriceEstimate, Valid, Invalid, Outcome, DEFAULT_SETTINGS
)
from .utils.calculations import round_half_up, as_finite_number
from .audit import audit_logger

logger = logging.getLogger(__name__)


def compute_savings(emission: Any, baseline: Any) -> Outcome[SavingsResult]:
    """
    Savings of an emission against a baseline emission (both kg CO2).
    - saved_kg = baseline - emission (negative when worse than baseline)
    - percentage = saved_kg / baseline * 100, None unless baseline > 0
    Both rounded to 2 decimal places.
    """
    e = as_finite_number(emission)
    b = as_finite_number(baseline)
    if e is None or b is None:
        return Invalid(f"emission and baseline must be finite numbers, got {emission!r} and {baseline!r}")

    saved_kg = round_half_up(b - e, 2)
    percentage = None
    if b > 0:
        percentage = round_half_up((saved_kg / b) * 100, 2)

    return Valid(SavingsResult(saved_kg=saved_kg, percentage=percentage))


def compute_credits(
    emission_kg: Any,
    policy: CarbonCreditPolicy = DEFAULT_SETTINGS.credit_policy
) -> Outcome[float]:
    """
    Carbon credits needed to offset emission_kg, rounded to 4 decimal places.
    """
    kg = as_finite_number(emission_kg)
    if kg is None or kg < 0:
        return Invalid(f"emission must be a finite non-negative number, got {emission_kg!r}")

    credits = round_half_up(kg / policy.kg_per_credit, CREDIT_DECIMALS)

    audit_logger.log_calculation(
        context="Carbon credits",
        formula="Emission(kg) / KgPerCredit",
        variables={"Emission_kg": kg, "KgPerCredit": policy.kg_per_credit},
        result=credits,
        unit="credits"
    )
    return Valid(credits)


def estimate_price(
    credits: Any,
    policy: CarbonCreditPolicy = DEFAULT_SETTINGS.credit_policy
) -> Outcome[PriceEstimate]:
    """
    Price range for a quantity of credits.

    min and max are rounded to 2 dp first; average is the mean of the rounded
    min and max, rounded again.
    """
    c = as_finite_number(credits)
    if c is None or c < 0:
        return Invalid(f"credits must be a finite non-negative number, got {credits!r}")

    price_min = round_half_up(c * policy.price_min_per_credit, PRICE_DECIMALS)
    price_max = round_half_up(c * policy.price_max_per_credit, PRICE_DECIMALS)
    average = round_half_up((price_min + price_max) / 2, PRICE_DECIMALS)

    audit_logger.log_calculation(
        context="Credit price estimate",
        formula="round(Credits * PriceMin), round(Credits * PriceMax), mean",
        variables={
            "Credits": c,
            "PriceMin": policy.price_min_per_credit,
            "PriceMax": policy.price_max_per_credit,
        },
        result=average,
        unit=policy.currency
    )
    return Valid(PriceEstimate(min=price_min, max=price_max, average=average))
