import logging
import os

import pandas as pd

import matplotlib
matplotlib.use("Agg")

from trip_emissions.audit import audit_logger
from trip_emissions.emissions import compute_emission, compare_all_modes
from trip_emissions.logging_conf import ColoredFormatter, setup_logging
from trip_emissions.visualization import Visualizer
from trip_emissions.main import save_comparison
from trip_emissions.models import TripRequest, DEFAULT_SETTINGS
from trip_emissions.trip import run_trip_calculation


def test_audit_trail_records_calculation(caplog):
    caplog.set_level(logging.DEBUG, logger="trip_emissions.audit")
    compute_emission(430, "car")
    assert "Emission (car)" in caplog.text
    assert "Distance_km=430.0" in caplog.text


def test_audit_trail_can_be_disabled(caplog):
    caplog.set_level(logging.DEBUG, logger="trip_emissions.audit")
    audit_logger.enabled = False
    try:
        compute_emission(430, "car")
    finally:
        audit_logger.enabled = True
    assert "Emission (car)" not in caplog.text


def test_formatter_prefixes_warnings_without_color():
    fmt = ColoredFormatter("%(message)s", use_color=False)
    warn = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    info = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    assert fmt.format(warn) == "WARNING: careful"
    assert fmt.format(info) == "hello"


def test_setup_logging_with_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        log_file = tmp_path / "run.log"
        logger = setup_logging(console_level=logging.WARNING, file_path=str(log_file), no_color=True)
        assert len(logger.handlers) == 2
        logging.getLogger("trip_emissions.test").debug("written to file only")
        for h in logger.handlers:
            h.flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_plot_mode_comparison(tmp_path):
    vis = Visualizer(output_root=str(tmp_path))
    path = vis.plot_mode_comparison(compare_all_modes(430), selected_mode="bus", title="São Paulo -> Rio")
    assert path is not None
    assert os.path.exists(path)
    assert path.startswith(str(tmp_path))


def test_plot_skips_empty_comparison(tmp_path):
    vis = Visualizer(output_root=str(tmp_path))
    assert vis.plot_mode_comparison(compare_all_modes(-1)) is None


def test_save_comparison_writes_chart_and_table(tmp_path):
    result = run_trip_calculation(TripRequest("São Paulo, SP", "Rio de Janeiro, RJ", "bus")).value
    chart_path, table_path = save_comparison(result, DEFAULT_SETTINGS, output_root=str(tmp_path))
    assert os.path.exists(chart_path)
    assert os.path.dirname(table_path) == os.path.dirname(chart_path)

    table = pd.read_csv(table_path)
    assert list(table["Mode"]) == ["bicycle", "bus", "car", "boat"]
    assert table.loc[1, "Emission (kgCO2)"] == 38.27
