import os
import logging
from datetime import datetime
from typing import List, Optional

import pandas as pd

from .models import CalculatorSettings, ComparisonEntry, TripResult, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

current_directory = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
report_directory = os.path.join(current_directory, 'reports')

REPORT_COLUMNS = [
    "Origin",
    "Destination",
    "Mode",
    "Distance (km)",
    "Distance Source",
    "Emission (kgCO2)",
    "Saved vs Baseline (kgCO2)",
    "Saved vs Baseline (%)",
    "Credits",
    "Price Min",
    "Price Max",
    "Price Average",
    "Status",
]


def comparison_to_dataframe(entries: List[ComparisonEntry], settings: CalculatorSettings = DEFAULT_SETTINGS) -> pd.DataFrame:
    """One row per mode, in ranking order."""
    return pd.DataFrame([
        {
            "Rank": i,
            "Mode": e.mode,
            "Label": settings.mode_label(e.mode),
            "Emission (kgCO2)": e.emission,
            "% vs Baseline": e.percentage_vs_car,
        }
        for i, e in enumerate(entries, 1)
    ])


def trip_result_row(result: TripResult) -> dict:
    return {
        "Origin": result.origin,
        "Destination": result.destination,
        "Mode": result.mode,
        "Distance (km)": result.distance_km,
        "Distance Source": result.distance_source,
        "Emission (kgCO2)": result.emission_kg,
        "Saved vs Baseline (kgCO2)": result.savings.saved_kg if result.savings else None,
        "Saved vs Baseline (%)": result.savings.percentage if result.savings else None,
        "Credits": result.credits,
        "Price Min": result.price.min,
        "Price Max": result.price.max,
        "Price Average": result.price.average,
        "Status": "OK",
    }


def format_and_clean_report_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """
    Put report columns in a fixed order (extra columns kept at the end), add
    missing ones, and fill blank text cells. Numeric gaps stay NaN so failed
    rows are not mistaken for zero-emission trips.
    """
    df = df.copy()
    for col in REPORT_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    extra = [c for c in df.columns if c not in REPORT_COLUMNS]
    df = df[REPORT_COLUMNS + extra]

    text_cols = ["Origin", "Destination", "Mode", "Distance Source", "Status"]
    df[text_cols] = df[text_cols].fillna("")
    return df


def save_report(df: pd.DataFrame, output_dir: Optional[str] = None, filename: Optional[str] = None) -> str:
    """Write a report DataFrame to CSV under reports/ and return the path."""
    output_dir = output_dir or report_directory
    os.makedirs(output_dir, exist_ok=True)
    if filename is None:
        filename = f"trip_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    path = os.path.join(output_dir, filename)
    df.to_csv(path, index=False, encoding="utf-8")
    logger.info(f"Report saved to: {path}")
    return path
