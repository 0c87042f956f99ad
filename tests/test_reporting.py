# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for terminal rendering, charts, and PDF export."""

from __future__ import annotations

from rich.console import Console

from lca_audit.data.models import LCAResult
from lca_audit.reporting.ascii_charts import horizontal_bar, mini_gauge, score_gauge
from lca_audit.reporting.charts import ChartGenerator
from lca_audit.reporting.pdf_report import PDFReportGenerator
from lca_audit.reporting.terminal import TerminalRenderer


def _render(result: LCAResult, **kwargs) -> str:
    console = Console(record=True, width=120, no_color=True)
    TerminalRenderer(console).render(result, **kwargs)
    return console.export_text()


class TestAsciiCharts:
    """Tests for the Unicode gauges."""

    def test_score_gauge_grade(self):
        assert "45/100" in score_gauge(45)
        assert "[red]D[/]" in score_gauge(45)
        assert "[green]A[/]" in score_gauge(92)

    def test_score_gauge_clamped(self):
        assert "100/100" in score_gauge(150)

    def test_mini_gauge_width(self):
        gauge = mini_gauge(50, width=10)
        assert gauge.count("█") + gauge.count("░") == 10

    def test_horizontal_bar_no_data(self):
        assert "no data" in horizontal_bar("Energy", 0, 0)


class TestTerminalRenderer:
    """Tests for TerminalRenderer.render()."""

    def test_sections(self, copper_result: LCAResult):
        text = _render(copper_result)
        for heading in (
            "OVERALL SCORE",
            "IMPACT METRICS",
            "SUSTAINABILITY SCORE BREAKDOWN",
            "HOTSPOTS",
            "SDG ALIGNMENT",
            "RECOMMENDATIONS",
            "CIRCULAR ECONOMY",
        ):
            assert heading in text

    def test_values_shown_verbatim(self, copper_result: LCAResult):
        text = _render(copper_result)
        assert "19,310.15" in text
        assert "45/100" in text

    def test_warnings_panel(self, empty_result: LCAResult):
        text = _render(empty_result)
        assert "DATA QUALITY WARNINGS" in text
        assert "Unnamed LCA Project" in text

    def test_no_details(self, copper_result: LCAResult):
        text = _render(copper_result, show_details=False)
        assert "SDG ALIGNMENT" not in text
        assert "RECOMMENDATIONS" in text

    def test_ai_recommendations(self, engine, copper_input):
        result = engine.assess(copper_input, ai_recommendations=["Use SX-EW"])
        text = _render(result)
        assert "AI Recommendations" in text
        assert "Use SX-EW" in text


class TestCharts:
    """Tests for the Matplotlib chart generator."""

    def test_save_all(self, copper_result: LCAResult, tmp_path):
        paths = ChartGenerator(copper_result).save_all(str(tmp_path))
        assert set(paths) == {
            "sub_score_radar",
            "hotspot_contribution_bar",
            "gwp_breakdown_pie",
            "impact_benchmark_bar",
        }
        for path in paths.values():
            assert path.endswith(".png")

    def test_no_hotspots(self, copper_result: LCAResult, tmp_path):
        copper_result.hotspots = []
        paths = ChartGenerator(copper_result).save_all(str(tmp_path))
        assert "hotspot_contribution_bar" in paths


class TestPDFReport:
    """Tests for the ReportLab PDF generator."""

    def test_generate(self, copper_result: LCAResult, tmp_path):
        out = tmp_path / "report.pdf"
        PDFReportGenerator().generate(copper_result, str(out))
        assert out.read_bytes().startswith(b"%PDF")

    def test_generate_with_warnings(self, empty_result: LCAResult, tmp_path):
        out = tmp_path / "report.pdf"
        PDFReportGenerator().generate(empty_result, str(out))
        assert out.stat().st_size > 0

    def test_bracketed_recommendation_text_kept(self, copper_result: LCAResult):
        result = copper_result.model_copy(
            update={"recommendations": ["Report [Scope 1] emissions & <offsets>"]}
        )
        elements = PDFReportGenerator()._build_recommendations(result)
        texts = [el.getPlainText() for el in elements if hasattr(el, "getPlainText")]
        assert "1. Report [Scope 1] emissions & <offsets>" in texts
