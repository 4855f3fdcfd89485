import logging
from typing import Any, List, Mapping, Optional

from .constants import EMISSION_DECIMALS, REFERENCE_MODE
from .models import ComparisonEntry, Valid, Invalid, Outcome, DEFAULT_SETTINGS
from .utils.calculations import round_half_up, as_finite_number
from .audit import audit_logger

logger = logging.getLogger(__name__)


def compute_emission(
    distance_km: Any,
    mode: str,
    factors: Mapping[str, float] = DEFAULT_SETTINGS.factors
) -> Outcome[float]:
    """
    Emission (kg CO2) for travelling distance_km with the given mode:
    distance * factor[mode], rounded to 2 decimal places.
    """
    distance = as_finite_number(distance_km)
    if distance is None or distance < 0:
        logger.warning(f"Invalid distance: {distance_km!r}")
        return Invalid(f"distance must be a finite non-negative number, got {distance_km!r}")

    if not isinstance(mode, str) or mode not in factors:
        logger.warning(f"Unknown transport mode: {mode!r}")
        return Invalid(f"unknown transport mode {mode!r}")

    factor = factors[mode]
    emission = round_half_up(distance * factor, EMISSION_DECIMALS)

    audit_logger.log_calculation(
        context=f"Emission ({mode})",
        formula="Distance(km) * EF(kgCO2/km)",
        variables={"Distance_km": distance, "EF": factor},
        result=emission,
        unit="kgCO2"
    )
    return Valid(emission)


def _emission_or_none(outcome: Outcome[float]) -> Optional[float]:
    return outcome.value if isinstance(outcome, Valid) else None


def compare_all_modes(
    distance_km: Any,
    factors: Mapping[str, float] = DEFAULT_SETTINGS.factors,
    reference_mode: str = REFERENCE_MODE
) -> List[ComparisonEntry]:
    """
    Emission of every mode in the factor table for one distance, lowest first.

    percentage_vs_car is each emission relative to the reference mode's
    emission (x100, 2 dp). It is None when the reference mode is missing from
    the table, its emission is zero or invalid, or the entry's own emission is
    invalid. Entries without an emission sort last, in table order.
    """
    reference = None
    if reference_mode in factors:
        reference = _emission_or_none(compute_emission(distance_km, reference_mode, factors))

    entries = []
    for mode in factors:
        emission = _emission_or_none(compute_emission(distance_km, mode, factors))
        percentage = None
        if emission is not None and reference is not None and reference > 0:
            percentage = round_half_up((emission / reference) * 100, 2)
        entries.append(ComparisonEntry(mode=mode, emission=emission, percentage_vs_car=percentage))

    # sorted() is stable: invalid entries keep table order at the end
    return sorted(entries, key=lambda e: (e.emission is None, e.emission or 0.0))
