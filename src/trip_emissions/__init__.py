from .models import (
    Found,
    NotFound,
    Valid,
    Invalid,
    RouteRecord,
    TransportModeInfo,
    CarbonCreditPolicy,
    CalculatorSettings,
    ComparisonEntry,
    SavingsResult,
    PriceEstimate,
    TripRequest,
    TripResult,
    DEFAULT_SETTINGS
)
from .routes import resolve_distance, list_known_locations
from .emissions import compute_emission, compare_all_modes
from .credits import compute_savings, compute_credits, estimate_price
from .trip import run_trip_calculation

__all__ = [
    "Found",
    "NotFound",
    "Valid",
    "Invalid",
    "RouteRecord",
    "TransportModeInfo",
    "CarbonCreditPolicy",
    "CalculatorSettings",
    "ComparisonEntry",
    "SavingsResult",
    "PriceEstimate",
    "TripRequest",
    "TripResult",
    "DEFAULT_SETTINGS",
    "resolve_distance",
    "list_known_locations",
    "compute_emission",
    "compare_all_modes",
    "compute_savings",
    "compute_credits",
    "estimate_price",
    "run_trip_calculation"
]
