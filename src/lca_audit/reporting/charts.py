"""Matplotlib chart generators for the LCA PDF report.

This module provides a ``ChartGenerator`` class that turns an
``LCAResult`` into Matplotlib figures suitable for embedding in a
ReportLab PDF or saving as standalone PNG images.

The Agg backend is selected unconditionally so that chart rendering works
in headless / server environments without a display.
"""

from __future__ import annotations

import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from lca_audit.data.models import ImpactStatus, LCAResult  # noqa: E402

# ---------------------------------------------------------------------------
# Style / palette constants
# ---------------------------------------------------------------------------

_STYLE_CANDIDATES = ["seaborn-v0_8-whitegrid", "seaborn-whitegrid"]

_BLUE = "#2196F3"
_GREEN = "#4CAF50"
_ORANGE = "#FF9800"
_RED = "#F44336"
_PURPLE = "#9C27B0"
_CYAN = "#00BCD4"

_PALETTE = [_BLUE, _GREEN, _ORANGE, _RED, _PURPLE, _CYAN]

_STATUS_COLORS = {
    ImpactStatus.good: _GREEN,
    ImpactStatus.warning: _ORANGE,
    ImpactStatus.critical: _RED,
}

_DPI = 150


def _apply_style() -> None:
    """Apply the best available Matplotlib style."""
    for style in _STYLE_CANDIDATES:
        if style in plt.style.available:
            plt.style.use(style)
            return


_apply_style()


# ---------------------------------------------------------------------------
# ChartGenerator
# ---------------------------------------------------------------------------


class ChartGenerator:
    """Generate the charts embedded in the LCA PDF report.

    Each public method returns a :class:`matplotlib.figure.Figure`.

    Parameters
    ----------
    result:
        A fully populated ``LCAResult`` produced by the assessment engine.
    """

    def __init__(self, result: LCAResult) -> None:
        self.result = result

    # -- 1. Radar chart for sub-scores ---------------------------------------

    def sub_score_radar(self) -> Figure:
        """Radar chart of the five normalized sub-scores."""
        score = self.result.sustainability_score
        labels = ["GWP", "Energy", "Water", "Waste", "MCI"]
        values = [
            score.gwp_score,
            score.energy_score,
            score.water_score,
            score.waste_score,
            score.mci_score,
        ]

        angles = np.linspace(0, 2 * np.pi, len(labels), endpoint=False).tolist()
        angles += angles[:1]
        values_closed = values + values[:1]

        fig, ax = plt.subplots(figsize=(7, 7), dpi=_DPI, subplot_kw={"polar": True})
        ax.set_theta_offset(np.pi / 2)
        ax.set_theta_direction(-1)

        ax.set_xticks(angles[:-1])
        ax.set_xticklabels(labels, fontsize=12, fontweight="bold")
        ax.set_ylim(0, 100)
        ax.set_yticks([20, 40, 60, 80, 100])
        ax.set_yticklabels(["20", "40", "60", "80", "100"], fontsize=8, color="grey")

        ax.plot(angles, values_closed, color=_BLUE, linewidth=2.5)
        ax.fill(angles, values_closed, color=_BLUE, alpha=0.25)

        for angle, value in zip(angles[:-1], values):
            ax.annotate(
                f"{value}",
                xy=(angle, value),
                xytext=(angle, min(value + 8, 100)),
                ha="center",
                fontsize=10,
                fontweight="bold",
                color=_BLUE,
            )

        ax.set_title(
            f"Sustainability Sub-scores (overall {self.result.overall_score}, "
            f"grade {self.result.sustainability_score.grade.value})",
            fontsize=14,
            fontweight="bold",
            pad=24,
        )
        fig.tight_layout()
        return fig

    # -- 2. Hotspot contribution bar ---------------------------------------

    def hotspot_contribution_bar(self) -> Figure:
        """Horizontal bar chart of each category's share of total GWP."""
        hotspots = self.result.hotspots
        fig, ax = plt.subplots(figsize=(9, 5), dpi=_DPI)

        if not hotspots:
            ax.text(0.5, 0.5, "No emissions to attribute", ha="center",
                    va="center", fontsize=14, transform=ax.transAxes)
            ax.set_axis_off()
            return fig

        # Largest contributor at the top
        areas = [h.area for h in reversed(hotspots)]
        shares = [h.contribution for h in reversed(hotspots)]
        y_pos = np.arange(len(areas))
        bar_colors = [_PALETTE[i % len(_PALETTE)] for i in range(len(areas))]

        bars = ax.barh(y_pos, shares, color=bar_colors, edgecolor="white")
        for bar, share in zip(bars, shares):
            ax.text(
                bar.get_width() + 1,
                bar.get_y() + bar.get_height() / 2,
                f"{share}%",
                va="center",
                fontsize=10,
            )

        ax.set_yticks(y_pos)
        ax.set_yticklabels(areas, fontsize=11)
        ax.set_xlim(0, 110)
        ax.set_xlabel("Share of total GWP (%)", fontsize=12)
        ax.set_title("Environmental Hotspots", fontsize=16, fontweight="bold")
        fig.tight_layout()
        return fig

    # -- 3. GWP breakdown pie ----------------------------------------------

    def gwp_breakdown_pie(self) -> Figure:
        """Pie chart of absolute GWP per process category."""
        hotspots = [h for h in self.result.hotspots if h.impact > 0]
        fig, ax = plt.subplots(figsize=(8, 6), dpi=_DPI)

        if not hotspots:
            ax.text(0.5, 0.5, "No emissions to attribute", ha="center",
                    va="center", fontsize=14, transform=ax.transAxes)
            ax.set_axis_off()
            return fig

        impacts = np.array([h.impact for h in hotspots])
        labels = [f"{h.area}\n{h.impact:,.0f} kg" for h in hotspots]
        ax.pie(
            impacts,
            labels=labels,
            colors=_PALETTE[: len(hotspots)],
            autopct="%1.1f%%",
            startangle=90,
            wedgeprops={"edgecolor": "white", "linewidth": 1.5},
            textprops={"fontsize": 9},
        )
        ax.axis("equal")
        ax.set_title(
            f"GWP Breakdown ({impacts.sum():,.0f} kg CO2e)",
            fontsize=16,
            fontweight="bold",
        )
        fig.tight_layout()
        return fig

    # -- 4. Impacts vs benchmarks ------------------------------------------

    def impact_benchmark_bar(self) -> Figure:
        """Grouped bars comparing each impact metric to its benchmark."""
        impacts = self.result.impacts
        fig, ax = plt.subplots(figsize=(9, 5), dpi=_DPI)

        x = np.arange(len(impacts))
        width = 0.38
        # Plotted relative to benchmark so metrics with different units share an axis
        ratios = [
            (i.value / i.benchmark * 100) if i.benchmark else 0.0 for i in impacts
        ]
        bar_colors = [_STATUS_COLORS[i.status] for i in impacts]

        ax.bar(x - width / 2, ratios, width, color=bar_colors, label="Actual")
        ax.bar(x + width / 2, [100] * len(impacts), width, color="#BDBDBD",
               label="Benchmark")
        for xi, ratio in zip(x, ratios):
            ax.text(xi - width / 2, ratio + 2, f"{ratio:.0f}%", ha="center",
                    fontsize=9)

        ax.set_xticks(x)
        ax.set_xticklabels([i.category for i in impacts], fontsize=9)
        ax.set_ylabel("% of benchmark", fontsize=12)
        ax.set_title("Impacts Relative to Benchmark", fontsize=16, fontweight="bold")
        ax.legend(loc="upper right")
        fig.tight_layout()
        return fig

    # -- Convenience methods ----------------------------------------------

    def generate_all(self) -> dict[str, Figure]:
        """Generate all charts and return as a name -> figure dict."""
        return {
            "sub_score_radar": self.sub_score_radar(),
            "hotspot_contribution_bar": self.hotspot_contribution_bar(),
            "gwp_breakdown_pie": self.gwp_breakdown_pie(),
            "impact_benchmark_bar": self.impact_benchmark_bar(),
        }

    def save_all(self, output_dir: str) -> dict[str, str]:
        """Save all charts as PNG files.

        Parameters
        ----------
        output_dir:
            Directory where PNG files will be written. Created if it does
            not already exist.

        Returns
        -------
        dict[str, str]
            Mapping of chart name to the absolute file path of the saved PNG.
        """
        os.makedirs(output_dir, exist_ok=True)
        charts = self.generate_all()
        paths: dict[str, str] = {}
        for name, fig in charts.items():
            filepath = os.path.join(output_dir, f"{name}.png")
            fig.savefig(filepath, dpi=_DPI, bbox_inches="tight", facecolor="white")
            plt.close(fig)
            paths[name] = os.path.abspath(filepath)
        return paths
