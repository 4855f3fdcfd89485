import pandas as pd

from trip_emissions.emissions import compare_all_modes
from trip_emissions.reporting import (
    REPORT_COLUMNS, comparison_to_dataframe, format_and_clean_report_dataframe, save_report
)


def test_dataframe_formatting():
    print("Running test_dataframe_formatting...")

    data = {
        "ExtraColumn": ["KeepMe", "KeepMe"],
        "Status": ["OK", None],
        "Emission (kgCO2)": [51.6, float("nan")],
        "Origin": ["São Paulo, SP", "Lisboa, PT"],
        "Mode": ["car", None],
    }
    formatted = format_and_clean_report_dataframe(pd.DataFrame(data))
    cols = list(formatted.columns)

    # 1. Order: report columns first, extras at the end
    assert cols[:len(REPORT_COLUMNS)] == REPORT_COLUMNS
    assert cols[-1] == "ExtraColumn"

    # 2. Missing columns added
    assert "Credits" in cols
    assert formatted["Credits"].isna().all()

    # 3. Text gaps filled, numeric gaps kept
    assert formatted.loc[1, "Status"] == ""
    assert formatted.loc[1, "Mode"] == ""
    assert formatted.loc[1, "Destination"] == ""
    assert pd.isna(formatted.loc[1, "Emission (kgCO2)"])
    assert formatted.loc[0, "Emission (kgCO2)"] == 51.6
    print("PASS")


def test_comparison_dataframe():
    df = comparison_to_dataframe(compare_all_modes(430))
    assert list(df["Mode"]) == ["bicycle", "bus", "car", "boat"]
    assert list(df["Rank"]) == [1, 2, 3, 4]
    assert df.loc[0, "Label"] == "Bicicleta"
    assert df.loc[2, "% vs Baseline"] == 100.0


def test_save_report(tmp_path):
    df = format_and_clean_report_dataframe(pd.DataFrame([{"Origin": "A", "Destination": "B", "Status": "OK"}]))
    path = save_report(df, output_dir=str(tmp_path), filename="report.csv")
    loaded = pd.read_csv(path)
    assert list(loaded.columns) == REPORT_COLUMNS
    assert loaded.loc[0, "Origin"] == "A"
