import matplotlib.pyplot as plt
import os
from datetime import datetime
from typing import List, Optional
from .models import CalculatorSettings, ComparisonEntry, DEFAULT_SETTINGS
import logging

logger = logging.getLogger(__name__)

# ============================================================================
# VISUALIZER CLASS
# ============================================================================

current_directory = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
report_directory = os.path.join(current_directory, 'reports')


class Visualizer:
    def __init__(self, output_root: Optional[str] = None, settings: CalculatorSettings = DEFAULT_SETTINGS):
        """
        Initialize Visualizer. Plots go to <output_root>/plots/<timestamp>/.
        """
        self.output_root = output_root or report_directory
        self.settings = settings
        self._setup_style()
        self.session_dir = self._create_session_dir()

    def _setup_style(self):
        """Configure matplotlib for clean presentation plots."""
        plt.rcParams.update(plt.rcParamsDefault)

        plt.rcParams.update({
            'font.family': 'sans-serif',
            'font.sans-serif': ['Arial', 'Helvetica', 'Calibri', 'DejaVu Sans'],
            'font.size': 12,
            'axes.titlesize': 16,
            'axes.titleweight': 'bold',
            'axes.labelsize': 13,
            'text.color': '#2C3E50',
            'axes.labelcolor': '#2C3E50',
            'xtick.color': '#2C3E50',
            'ytick.color': '#2C3E50'
        })

        plt.rcParams.update({
            'axes.spines.top': False,
            'axes.spines.right': False,
            'grid.color': '#E0E0E0',
            'grid.linestyle': ':',
            'axes.grid': True,
            'axes.grid.axis': 'x',
            'axes.axisbelow': True
        })

        self.colors = {
            'neutral': '#5D6D7E',
            'highlight': '#2C3E50',
        }

    def _create_session_dir(self) -> str:
        """Create the specific directory for this session's plots."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.output_root, "plots", timestamp)
        os.makedirs(path, exist_ok=True)
        return path

    def get_save_path(self, filename: str) -> str:
        return os.path.join(self.session_dir, filename)

    def plot_mode_comparison(self, entries: List[ComparisonEntry], selected_mode: str = "", title: str = "") -> Optional[str]:
        """Horizontal bar chart of emissions per mode; the selected mode is outlined."""
        valid = [e for e in entries if e.emission is not None]
        if not valid:
            logger.warning("Nothing to plot: no valid emissions in comparison.")
            return None

        labels = [self.settings.mode_label(e.mode) for e in valid]
        values = [e.emission for e in valid]
        colors = []
        for e in valid:
            info = self.settings.transport_modes.get(e.mode)
            colors.append(info.color if info else self.colors['neutral'])

        fig, ax = plt.subplots(figsize=(10, 6), dpi=150)
        bars = ax.barh(labels, values, color=colors, alpha=0.85, height=0.6)
        ax.invert_yaxis()  # lowest emission on top

        for bar, e in zip(bars, valid):
            if e.mode == selected_mode:
                bar.set_edgecolor(self.colors['highlight'])
                bar.set_linewidth(2.5)
            text = f"{e.emission:.2f} kg"
            if e.percentage_vs_car is not None:
                text += f"  ({e.percentage_vs_car:.0f}%)"
            ax.text(bar.get_width(), bar.get_y() + bar.get_height() / 2, f" {text}",
                    va='center', fontsize=10, color=self.colors['highlight'])

        ax.set_xlabel("Emission (kg CO2)", fontweight='bold')
        ax.set_xlim(0, max(max(values) * 1.3, 1.0))  # room for labels
        ax.set_title(f"Transport Mode Comparison\n{title}", pad=20, loc='left')

        plt.tight_layout()
        filepath = self.get_save_path("mode_comparison.png")
        plt.savefig(filepath, dpi=300, bbox_inches='tight')
        plt.close(fig)
        logger.info(f"   [Plot] Saved comparison to: {filepath}")
        return filepath
