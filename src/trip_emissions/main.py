import logging
import os
from typing import Optional

import pandas as pd

from .models import CalculatorSettings, TripRequest, TripResult, Found, Valid
from .config import build_settings, read_table
from .routes import resolve_distance, list_known_locations
from .trip import run_trip_calculation
from .reporting import trip_result_row, comparison_to_dataframe, format_and_clean_report_dataframe, save_report
from .visualization import Visualizer
from .logging_conf import setup_logging
from .utils.calculations import as_finite_number
from .utils.input_helpers import (
    prompt_choice, prompt_yes_no, prompt_float, prompt_location, print_header,
    print_trip_overview, print_comparison_table, print_credit_overview,
    style_prompt, C_SUCCESS, C_RESET
)

logger = logging.getLogger(__name__)

TRIP_COLUMNS = ("origin", "destination", "mode")


def execute_trip_batch(df: pd.DataFrame, settings: CalculatorSettings) -> pd.DataFrame:
    """
    Run the trip calculation for every row of a trips table
    (origin, destination, mode, optional distance_km). Rows that cannot be
    calculated are kept with their reason in the Status column.
    """
    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips table missing columns: {', '.join(missing)}")

    rows = []
    for _, row in df.iterrows():
        origin = "" if pd.isna(row["origin"]) else str(row["origin"])
        destination = "" if pd.isna(row["destination"]) else str(row["destination"])
        mode = "" if pd.isna(row["mode"]) else str(row["mode"]).strip().lower()

        distance = None
        if "distance_km" in df.columns and not pd.isna(row["distance_km"]):
            # Unparseable values are passed through so the request is rejected
            distance = as_finite_number(row["distance_km"])
            if distance is None:
                distance = float("nan")

        outcome = run_trip_calculation(TripRequest(origin, destination, mode, distance), settings)
        if isinstance(outcome, Valid):
            rows.append(trip_result_row(outcome.value))
        else:
            logger.warning(f"Skipped trip {origin!r} -> {destination!r}: {outcome.reason}")
            rows.append({"Origin": origin, "Destination": destination, "Mode": mode, "Status": outcome.reason})

    return format_and_clean_report_dataframe(pd.DataFrame(rows))


def run_batch_analysis(settings: CalculatorSettings):
    """
    Batch mode: read a trips file, calculate every trip, save the report.
    """
    print_header("Batch Analysis")
    path = input(style_prompt("Path to trips file (CSV or Excel): ")).strip().strip('"')
    if not os.path.exists(path):
        logger.error(f"Trips file not found at {path}")
        return

    try:
        df = read_table(path)
        report_df = execute_trip_batch(df, settings)
    except (OSError, ValueError) as e:
        logger.error(f"Error reading trips file: {e}")
        return

    ok = (report_df["Status"] == "OK").sum()
    print(f"\n{C_SUCCESS}Calculated {ok} of {len(report_df)} trips.{C_RESET}")
    print(report_df[["Origin", "Destination", "Mode", "Emission (kgCO2)", "Credits", "Status"]].to_string(index=False))
    save_report(report_df)


def save_comparison(result: TripResult, settings: CalculatorSettings, output_root: Optional[str] = None):
    """
    Save the mode comparison of a trip as a bar chart and a CSV table, both in
    the same plot session folder. Returns (chart_path, table_path).
    """
    vis = Visualizer(output_root=output_root, settings=settings)
    entries = list(result.comparison)
    chart_path = vis.plot_mode_comparison(entries, selected_mode=result.mode,
                                          title=f"{result.origin} -> {result.destination} ({result.distance_km:g} km)")
    table_path = save_report(comparison_to_dataframe(entries, settings),
                             output_dir=vis.session_dir, filename="mode_comparison.csv")
    return chart_path, table_path


def run_single_trip(settings: CalculatorSettings):
    """
    Interactive single trip: locations, distance, mode, then results.
    """
    print_header("Step 1: Origin & Destination")
    known = list_known_locations(settings.routes)
    origin = prompt_location("origin", known)
    destination = prompt_location("destination", known)

    print_header("Step 2: Distance")
    distance = None
    lookup = resolve_distance(origin, destination, settings.routes)
    if isinstance(lookup, Found):
        print(f"{C_SUCCESS}  -> Known route: {lookup.value:g} km{C_RESET}")
        if prompt_yes_no("Enter the distance manually instead?", default=False):
            distance = prompt_float("Distance (km)", minimum=0.0, exclusive=True)
    else:
        logger.warning("Route not found in the database. Please enter the distance manually.")
        distance = prompt_float("Distance (km)", minimum=0.0, exclusive=True)

    print_header("Step 3: Transport Mode")
    modes = list(settings.factors)
    default_mode = settings.reference_mode if settings.reference_mode in modes else modes[0]
    mode = prompt_choice("Transport mode", modes, default=default_mode)

    outcome = run_trip_calculation(TripRequest(origin, destination, mode, distance), settings)
    if not isinstance(outcome, Valid):
        logger.error(outcome.reason)
        return

    result = outcome.value
    print_trip_overview(result, settings)
    print_comparison_table(list(result.comparison), settings, selected_mode=mode)
    print_credit_overview(result, settings)

    if prompt_yes_no("Save the comparison (chart and table)?", default=False):
        save_comparison(result, settings)


def main():
    # 1. LOGGING SETUP
    setup_logging(console_level=logging.INFO)

    # 2. PROCESS START BANNER
    print_header("Trip emissions & carbon credit calculator")

    settings = build_settings()

    mode = prompt_choice("Mode", ["Single Trip (Interactive)", "Batch (Trips File)"], default="Single Trip (Interactive)")
    if mode == "Batch (Trips File)":
        run_batch_analysis(settings)
    else:
        run_single_trip(settings)


if __name__ == "__main__":
    main()
