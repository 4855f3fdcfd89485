import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, Mapping, Optional, Tuple, TypeVar, Union

from .constants import (
    DEFAULT_EMISSION_FACTORS, DEFAULT_TRANSPORT_MODES, DEFAULT_ROUTES,
    KG_PER_CREDIT, PRICE_MIN_PER_CREDIT, PRICE_MAX_PER_CREDIT, CREDIT_CURRENCY,
    REFERENCE_MODE, DistanceSource
)

T = TypeVar("T")


# ============================================================================
# RESULT TYPES
# ============================================================================

@dataclass(frozen=True)
class Found(Generic[T]):
    """A lookup that matched."""
    value: T


@dataclass(frozen=True)
class NotFound:
    """A lookup with no match. Callers fall back to manual input."""
    origin: str = ""
    destination: str = ""


@dataclass(frozen=True)
class Valid(Generic[T]):
    """A calculation over in-domain input."""
    value: T


@dataclass(frozen=True)
class Invalid:
    """Malformed or out-of-domain input. Callers re-prompt."""
    reason: str


Lookup = Union[Found[T], NotFound]
Outcome = Union[Valid[T], Invalid]


# ============================================================================
# REFERENCE DATA
# ============================================================================

@dataclass(frozen=True)
class RouteRecord:
    origin: str
    destination: str
    distance_km: float

    def __post_init__(self):
        if not math.isfinite(self.distance_km) or self.distance_km < 0:
            raise ValueError(
                f"Route {self.origin} -> {self.destination} has invalid distance {self.distance_km}"
            )


@dataclass(frozen=True)
class TransportModeInfo:
    """Display attributes of a transport mode (presentation only)."""
    label: str
    icon: str = ""
    color: str = "#5D6D7E"


@dataclass(frozen=True)
class CarbonCreditPolicy:
    """
    Conversion of kg CO2 into carbon credits and the market price range per credit.
    """
    kg_per_credit: float = KG_PER_CREDIT
    price_min_per_credit: float = PRICE_MIN_PER_CREDIT
    price_max_per_credit: float = PRICE_MAX_PER_CREDIT
    currency: str = CREDIT_CURRENCY

    def __post_init__(self):
        if not math.isfinite(self.kg_per_credit) or self.kg_per_credit <= 0:
            raise ValueError(f"kg_per_credit must be > 0, got {self.kg_per_credit}")
        for name in ("price_min_per_credit", "price_max_per_credit"):
            val = getattr(self, name)
            if not math.isfinite(val) or val < 0:
                raise ValueError(f"{name} must be >= 0, got {val}")
        if self.price_min_per_credit > self.price_max_per_credit:
            raise ValueError(
                f"price_min_per_credit ({self.price_min_per_credit}) exceeds "
                f"price_max_per_credit ({self.price_max_per_credit})"
            )


def make_route_table(rows) -> Tuple[RouteRecord, ...]:
    """Build an immutable route table from (origin, destination, km) rows."""
    return tuple(RouteRecord(str(o), str(d), float(km)) for o, d, km in rows)


def make_factor_table(factors: Mapping[str, float]) -> Mapping[str, float]:
    """
    Build a read-only emission factor table, preserving insertion order.
    Raises ValueError on negative or non-finite factors.
    """
    table = {}
    for mode, factor in factors.items():
        value = float(factor)
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"Emission factor for '{mode}' must be a non-negative number, got {factor}")
        table[str(mode)] = value
    return MappingProxyType(table)


def make_mode_table(modes: Mapping[str, Tuple[str, str, str]]) -> Mapping[str, TransportModeInfo]:
    return MappingProxyType({m: TransportModeInfo(*attrs) for m, attrs in modes.items()})


@dataclass(frozen=True)
class CalculatorSettings:
    """
    Static configuration consumed by the calculators. Built once per process
    and passed explicitly; never mutated.
    """
    routes: Tuple[RouteRecord, ...] = field(default_factory=lambda: make_route_table(DEFAULT_ROUTES))
    factors: Mapping[str, float] = field(default_factory=lambda: make_factor_table(DEFAULT_EMISSION_FACTORS))
    transport_modes: Mapping[str, TransportModeInfo] = field(
        default_factory=lambda: make_mode_table(DEFAULT_TRANSPORT_MODES)
    )
    credit_policy: CarbonCreditPolicy = field(default_factory=CarbonCreditPolicy)
    reference_mode: str = REFERENCE_MODE

    def mode_label(self, mode: str) -> str:
        info = self.transport_modes.get(mode)
        return info.label if info else mode


DEFAULT_SETTINGS = CalculatorSettings()


# ============================================================================
# DERIVED (per calculation)
# ============================================================================

@dataclass(frozen=True)
class ComparisonEntry:
    mode: str
    emission: Optional[float]
    percentage_vs_car: Optional[float]


@dataclass(frozen=True)
class SavingsResult:
    saved_kg: float
    percentage: Optional[float]


@dataclass(frozen=True)
class PriceEstimate:
    min: float
    max: float
    average: float


@dataclass(frozen=True)
class TripRequest:
    """
    User input for one trip. distance_km=None asks the route table for the distance.
    """
    origin: str
    destination: str
    mode: str
    distance_km: Optional[float] = None


@dataclass(frozen=True)
class TripResult:
    """
    Summary of a trip calculation.
    """
    origin: str
    destination: str
    distance_km: float
    distance_source: DistanceSource
    mode: str
    emission_kg: float
    savings: Optional[SavingsResult]
    comparison: Tuple[ComparisonEntry, ...]
    credits: float
    price: PriceEstimate
