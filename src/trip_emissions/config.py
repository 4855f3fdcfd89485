import os
import pandas as pd
import logging
from typing import Dict, Any, Optional, Tuple

from .constants import DEFAULT_EMISSION_FACTORS, DEFAULT_ROUTES, REFERENCE_MODE
from .models import (
    CalculatorSettings, CarbonCreditPolicy, RouteRecord,
    make_factor_table, make_route_table, DEFAULT_SETTINGS
)
from .utils.calculations import as_finite_number

logger = logging.getLogger(__name__)

# This code lives in <root>/src/trip_emissions/config.py; the project root is
# three levels up.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "data", "parameters_config", "project_parameters.csv")

FACTOR_KEY_PREFIX = "EMISSIONFACTOR_"
ROUTE_COLUMNS = ("origin", "destination", "distance_km")


def read_table(path: str) -> pd.DataFrame:
    """Read a CSV or .xlsx sheet into a DataFrame, by file extension."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".xlsx":
        return pd.read_excel(path)
    return pd.read_csv(path)


def load_parameter_table(path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load configuration parameters from a CSV or Excel file.
    Expected columns: Key, Value (Unit, Description optional)
    Returns a dictionary of Key -> Value, keys upper-cased.
    """
    config = {}
    if not os.path.exists(path):
        logger.warning(f"Config file not found at {path}. Using defaults.")
        return config

    try:
        df = read_table(path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {path}: {e}")
        return config

    if "Key" in df.columns and "Value" in df.columns:
        for _, row in df.iterrows():
            if pd.isna(row["Key"]) or pd.isna(row["Value"]):
                continue
            key = str(row["Key"]).strip().upper()
            config[key] = row["Value"]
        logger.info(f"Loaded {len(config)} parameters from {path}")
    else:
        logger.warning(f"Config file {path} missing 'Key' or 'Value' columns.")

    return config


def load_route_table(path: str) -> Tuple[RouteRecord, ...]:
    """
    Load known routes from a CSV or Excel file with columns
    origin, destination, distance_km. Row order is kept (first match wins).
    Rows with blank names or a missing/negative distance are skipped.
    """
    df = read_table(path)
    missing = [c for c in ROUTE_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Route table {path} missing columns: {', '.join(missing)}")

    rows = []
    for idx, row in df.iterrows():
        origin = "" if pd.isna(row["origin"]) else str(row["origin"]).strip()
        destination = "" if pd.isna(row["destination"]) else str(row["destination"]).strip()
        distance = as_finite_number(row["distance_km"])
        if not origin or not destination or distance is None or distance < 0:
            logger.warning(f"Skipping route row {idx + 2} in {path}: {origin!r} -> {destination!r} ({row['distance_km']!r})")
            continue
        rows.append((origin, destination, distance))

    logger.info(f"Loaded {len(rows)} routes from {path}")
    return make_route_table(rows)


def _number(config: Dict[str, Any], key: str, default: float) -> float:
    if key not in config:
        return default
    value = as_finite_number(config[key])
    if value is None:
        raise ValueError(f"Parameter '{key}' must be numeric, got {config[key]!r}")
    return value


def settings_from_parameters(config: Dict[str, Any], routes: Optional[Tuple[RouteRecord, ...]] = None) -> CalculatorSettings:
    """
    Overlay a parameter dictionary onto the built-in reference data.
    EMISSIONFACTOR_<MODE> keys set or add a mode's factor.
    """
    factors = dict(DEFAULT_EMISSION_FACTORS)
    for key in config:
        if key.startswith(FACTOR_KEY_PREFIX) and len(key) > len(FACTOR_KEY_PREFIX):
            mode = key[len(FACTOR_KEY_PREFIX):].lower()
            factors[mode] = _number(config, key, 0.0)

    default_policy = DEFAULT_SETTINGS.credit_policy
    policy = CarbonCreditPolicy(
        kg_per_credit=_number(config, "KG_PER_CREDIT", default_policy.kg_per_credit),
        price_min_per_credit=_number(config, "PRICE_MIN_PER_CREDIT", default_policy.price_min_per_credit),
        price_max_per_credit=_number(config, "PRICE_MAX_PER_CREDIT", default_policy.price_max_per_credit),
        currency=str(config.get("CREDIT_CURRENCY", default_policy.currency)).strip(),
    )

    return CalculatorSettings(
        routes=routes if routes is not None else make_route_table(DEFAULT_ROUTES),
        factors=make_factor_table(factors),
        transport_modes=DEFAULT_SETTINGS.transport_modes,
        credit_policy=policy,
        reference_mode=str(config.get("REFERENCE_MODE", REFERENCE_MODE)).strip().lower(),
    )


def build_settings(parameters_path: str = DEFAULT_CONFIG_PATH, routes_path: Optional[str] = None) -> CalculatorSettings:
    """
    Build the process-wide settings from the parameter file and, optionally,
    a route table file.
    """
    config = load_parameter_table(parameters_path)
    routes = load_route_table(routes_path) if routes_path else None
    return settings_from_parameters(config, routes)
