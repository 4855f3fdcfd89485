import logging

from .models import (
    CalculatorSettings, TripRequest, TripResult, PriceEstimate,
    Found, Valid, Invalid, Outcome, DEFAULT_SETTINGS
)
from .routes import resolve_distance
from .emissions import compute_emission, compare_all_modes
from .credits import compute_savings, compute_credits, estimate_price
from .utils.calculations import as_finite_number

logger = logging.getLogger(__name__)


def resolve_trip_distance(request: TripRequest, settings: CalculatorSettings = DEFAULT_SETTINGS) -> Outcome[float]:
    """
    Distance for a trip: the manual distance when one is given, otherwise the
    route table. Must be a finite number greater than zero.
    """
    if request.distance_km is not None:
        distance = as_finite_number(request.distance_km)
        if distance is None or distance <= 0:
            return Invalid(f"Please enter a valid distance greater than 0 km (got {request.distance_km!r}).")
        return Valid(distance)

    lookup = resolve_distance(request.origin, request.destination, settings.routes)
    if not isinstance(lookup, Found):
        return Invalid(
            f"No known route between '{request.origin}' and '{request.destination}'. "
            "Please enter the distance manually."
        )
    if lookup.value <= 0:
        return Invalid(f"Route '{request.origin}' -> '{request.destination}' has zero distance.")
    return Valid(lookup.value)


def run_trip_calculation(request: TripRequest, settings: CalculatorSettings = DEFAULT_SETTINGS) -> Outcome[TripResult]:
    """
    Full calculation for one trip: emission of the chosen mode, savings against
    the reference mode, comparison of all modes, carbon credits and their price.
    """
    origin = str(request.origin or "").strip()
    destination = str(request.destination or "").strip()
    if not origin or not destination:
        return Invalid("Please fill in both origin and destination.")

    distance_outcome = resolve_trip_distance(request, settings)
    if isinstance(distance_outcome, Invalid):
        return distance_outcome
    distance = distance_outcome.value
    source = "manual" if request.distance_km is not None else "route_table"

    if request.mode not in settings.factors:
        return Invalid(f"Please select a transport mode ({', '.join(settings.factors)}).")

    emission_outcome = compute_emission(distance, request.mode, settings.factors)
    if isinstance(emission_outcome, Invalid):
        return emission_outcome
    emission = emission_outcome.value

    savings = None
    if settings.reference_mode in settings.factors:
        baseline = compute_emission(distance, settings.reference_mode, settings.factors)
        if isinstance(baseline, Valid):
            savings_outcome = compute_savings(emission, baseline.value)
            if isinstance(savings_outcome, Valid):
                savings = savings_outcome.value

    comparison = compare_all_modes(distance, settings.factors, settings.reference_mode)

    credits = 0.0
    price = PriceEstimate(min=0.0, max=0.0, average=0.0)
    credits_outcome = compute_credits(emission, settings.credit_policy)
    if isinstance(credits_outcome, Valid):
        credits = credits_outcome.value
        price_outcome = estimate_price(credits, settings.credit_policy)
        if isinstance(price_outcome, Valid):
            price = price_outcome.value

    logger.info(f"Trip {origin} -> {destination} ({distance} km, {request.mode}): {emission} kg CO2")

    return Valid(TripResult(
        origin=origin,
        destination=destination,
        distance_km=distance,
        distance_source=source,
        mode=request.mode,
        emission_kg=emission,
        savings=savings,
        comparison=tuple(comparison),
        credits=credits,
        price=price
    ))
