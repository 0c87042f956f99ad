"""ReportLab-based PDF report generator for LCA results.

Produces a multi-page PDF covering the sustainability score, impact
metrics, hotspots, SDG alignment, recommendations, data-quality warnings,
and a methodology appendix, with embedded Matplotlib charts.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from typing import Dict, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    Image,
    KeepTogether,
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from lca_audit.data.models import Alignment, Grade, ImpactStatus, LCAResult
from lca_audit.reporting.charts import ChartGenerator
from lca_audit.scoring import weights

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Color palette
# ---------------------------------------------------------------------------
DARK_GREEN = colors.HexColor('#2E7D32')
GRADE_GREEN = colors.HexColor('#4CAF50')
GRADE_ORANGE = colors.HexColor('#FF9800')
GRADE_RED = colors.HexColor('#F44336')
LIGHT_GRAY = colors.HexColor('#F5F5F5')
WHITE = colors.white


def _grade_color(grade: Grade) -> colors.Color:
    """Return the display color for a given letter grade."""
    if grade in (Grade.A, Grade.B):
        return GRADE_GREEN
    if grade is Grade.C:
        return GRADE_ORANGE
    return GRADE_RED


_STATUS_COLORS = {
    ImpactStatus.good: GRADE_GREEN,
    ImpactStatus.warning: GRADE_ORANGE,
    ImpactStatus.critical: GRADE_RED,
}

_ALIGNMENT_COLORS = {
    Alignment.positive: GRADE_GREEN,
    Alignment.neutral: GRADE_ORANGE,
    Alignment.negative: GRADE_RED,
}


def _escape(text: str) -> str:
    """Escape characters that ReportLab's paragraph parser treats as markup."""
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


class PDFReportGenerator:
    """Generates a multi-page PDF report from an :class:`LCAResult`."""

    def __init__(self) -> None:
        self._styles = getSampleStyleSheet()
        self._register_custom_styles()

    # ------------------------------------------------------------------
    # Custom paragraph styles
    # ------------------------------------------------------------------

    def _register_custom_styles(self) -> None:
        """Add project-specific paragraph styles to the stylesheet."""
        self._styles.add(ParagraphStyle(
            'CoverTitle',
            parent=self._styles['Title'],
            fontSize=28,
            leading=34,
            textColor=DARK_GREEN,
            spaceAfter=12,
            alignment=1,  # center
        ))
        self._styles.add(ParagraphStyle(
            'CoverSubtitle',
            parent=self._styles['Normal'],
            fontSize=16,
            leading=20,
            textColor=colors.HexColor('#333333'),
            spaceAfter=8,
            alignment=1,
        ))
        self._styles.add(ParagraphStyle(
            'CoverDate',
            parent=self._styles['Normal'],
            fontSize=12,
            leading=16,
            textColor=colors.HexColor('#666666'),
            spaceAfter=24,
            alignment=1,
        ))
        self._styles.add(ParagraphStyle(
            'SectionTitle',
            parent=self._styles['Heading1'],
            fontSize=20,
            leading=24,
            textColor=DARK_GREEN,
            spaceAfter=12,
            spaceBefore=6,
        ))
        self._styles.add(ParagraphStyle(
            'SubSection',
            parent=self._styles['Heading2'],
            fontSize=14,
            leading=18,
            textColor=DARK_GREEN,
            spaceAfter=8,
        ))
        self._styles.add(ParagraphStyle(
            'BodyText2',
            parent=self._styles['Normal'],
            fontSize=10,
            leading=14,
            spaceAfter=6,
        ))
        self._styles.add(ParagraphStyle(
            'Finding',
            parent=self._styles['Normal'],
            fontSize=10,
            leading=13,
            leftIndent=18,
            bulletIndent=6,
            spaceAfter=3,
        ))
        self._styles.add(ParagraphStyle(
            'GradeLarge',
            parent=self._styles['Normal'],
            fontSize=48,
            leading=56,
            alignment=1,
            spaceAfter=4,
        ))
        self._styles.add(ParagraphStyle(
            'ScoreLabel',
            parent=self._styles['Normal'],
            fontSize=12,
            leading=14,
            alignment=1,
            textColor=colors.HexColor('#444444'),
            spaceAfter=4,
        ))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, result: LCAResult, output_path: str) -> None:
        """Generate a complete PDF report and save to *output_path*."""
        chart_paths: Dict[str, str] = {}
        tmpdir: Optional[str] = None
        try:
            tmpdir = tempfile.mkdtemp(prefix='lca_audit_charts_')
            try:
                chart_paths = ChartGenerator(result).save_all(tmpdir)
            except Exception:
                logger.warning(
                    "Chart generation failed; PDF will be produced without charts.",
                    exc_info=True,
                )

            doc = SimpleDocTemplate(
                output_path,
                pagesize=letter,
                topMargin=0.75 * inch,
                bottomMargin=0.75 * inch,
                leftMargin=0.75 * inch,
                rightMargin=0.75 * inch,
                title=f"LCA Report - {result.project_name}",
            )

            elements = []
            elements.extend(self._build_cover(result, chart_paths))
            elements.append(PageBreak())
            elements.extend(self._build_impacts(result, chart_paths))
            elements.append(PageBreak())
            elements.extend(self._build_hotspots(result, chart_paths))
            elements.append(PageBreak())
            elements.extend(self._build_sdg_alignment(result))
            elements.extend(self._build_recommendations(result))
            elements.extend(self._build_warnings(result))
            elements.append(PageBreak())
            elements.extend(self._build_appendix())

            doc.build(elements, onFirstPage=self._add_page_number,
                      onLaterPages=self._add_page_number)
            logger.info("PDF report written to %s", output_path)

        finally:
            if tmpdir and os.path.isdir(tmpdir):
                shutil.rmtree(tmpdir, ignore_errors=True)

    # ------------------------------------------------------------------
    # Page number footer callback
    # ------------------------------------------------------------------

    @staticmethod
    def _add_page_number(canvas, doc) -> None:
        """Draw the page number in the footer of every page."""
        canvas.saveState()
        canvas.setFont('Helvetica', 8)
        canvas.setFillColor(colors.HexColor('#999999'))
        canvas.drawCentredString(
            letter[0] / 2.0, 0.5 * inch, f"Page {canvas.getPageNumber()}"
        )
        canvas.restoreState()

    # ------------------------------------------------------------------
    # Page 1: Cover and score
    # ------------------------------------------------------------------

    def _build_cover(self, result: LCAResult,
                     chart_paths: Dict[str, str]) -> list:
        elements: list = []
        score = result.sustainability_score

        elements.append(Spacer(1, 0.75 * inch))
        elements.append(Paragraph("Life Cycle Assessment Report",
                                  self._styles['CoverTitle']))
        elements.append(Paragraph(_escape(result.project_name),
                                  self._styles['CoverSubtitle']))
        if result.company_name:
            elements.append(Paragraph(_escape(result.company_name),
                                      self._styles['CoverSubtitle']))
        elements.append(Paragraph(result.timestamp.strftime('%B %d, %Y'),
                                  self._styles['CoverDate']))

        g_hex = _grade_color(score.grade).hexval()
        elements.append(Paragraph(
            f'<font color="{g_hex}" size="48"><b>{score.grade.value}</b></font>',
            self._styles['GradeLarge'],
        ))
        elements.append(Paragraph(
            f"Overall Sustainability Score: {result.overall_score} / 100",
            self._styles['ScoreLabel'],
        ))
        elements.append(Paragraph(
            f"Material Circularity Index: {score.mci_score}%",
            self._styles['ScoreLabel'],
        ))
        if result.is_ai_powered:
            elements.append(Paragraph("AI-assisted recommendations included",
                                      self._styles['ScoreLabel']))
        elements.append(Spacer(1, 0.3 * inch))

        rows = [
            ("Global Warming", score.gwp_score, weights.GWP_WEIGHT),
            ("Energy", score.energy_score, weights.ENERGY_WEIGHT),
            ("Water", score.water_score, weights.WATER_WEIGHT),
            ("Waste", score.waste_score, weights.WASTE_WEIGHT),
            ("Material Circularity", score.mci_score, weights.MCI_WEIGHT),
        ]
        data = [['Sub-score', 'Score', 'Weight']]
        data.extend([label, str(value), f"{weight:.0%}"] for label, value, weight in rows)
        elements.append(self._styled_table(
            data, [2.6 * inch, 1.0 * inch, 1.0 * inch]
        ))
        elements.append(Spacer(1, 0.2 * inch))

        self._maybe_add_chart(elements, chart_paths, 'sub_score_radar',
                              width=3.6 * inch, height=3.6 * inch)
        return elements

    # ------------------------------------------------------------------
    # Page 2: Impact metrics
    # ------------------------------------------------------------------

    def _build_impacts(self, result: LCAResult,
                       chart_paths: Dict[str, str]) -> list:
        elements: list = []
        elements.append(Paragraph("Impact Metrics", self._styles['SectionTitle']))

        data = [['Category', 'Value', 'Unit', 'Benchmark', 'Status']]
        for impact in result.impacts:
            s_hex = _STATUS_COLORS[impact.status].hexval()
            data.append([
                impact.category,
                f"{impact.value:,.2f}",
                impact.unit,
                f"{impact.benchmark:,.0f}",
                Paragraph(
                    f'<font color="{s_hex}"><b>{impact.status.value}</b></font>',
                    self._styles['BodyText2'],
                ),
            ])
        elements.append(self._styled_table(
            data, [2.2 * inch, 1.1 * inch, 1.1 * inch, 1.0 * inch, 0.9 * inch]
        ))
        elements.append(Spacer(1, 0.15 * inch))

        for impact in result.impacts:
            elements.append(Paragraph(
                f"• <b>{impact.category}:</b> {_escape(impact.description)}",
                self._styles['Finding'],
            ))
        elements.append(Spacer(1, 0.2 * inch))

        self._maybe_add_chart(elements, chart_paths, 'impact_benchmark_bar',
                              width=5.5 * inch, height=3.0 * inch)
        return elements

    # ------------------------------------------------------------------
    # Page 3: Hotspots
    # ------------------------------------------------------------------

    def _build_hotspots(self, result: LCAResult,
                        chart_paths: Dict[str, str]) -> list:
        elements: list = []
        elements.append(Paragraph("Environmental Hotspots",
                                  self._styles['SectionTitle']))

        if not result.hotspots:
            elements.append(Paragraph(
                "No emissions were attributed to any process category.",
                self._styles['BodyText2'],
            ))
            return elements

        data = [['Area', 'GWP (kg CO2e)', 'Share', 'Recommendation']]
        for hotspot in result.hotspots:
            data.append([
                hotspot.area,
                f"{hotspot.impact:,.2f}",
                f"{hotspot.contribution}%",
                Paragraph(_escape(hotspot.recommendation), self._styles['BodyText2']),
            ])
        elements.append(self._styled_table(
            data, [1.6 * inch, 1.1 * inch, 0.6 * inch, 3.5 * inch]
        ))
        elements.append(Spacer(1, 0.2 * inch))

        self._maybe_add_chart(elements, chart_paths, 'hotspot_contribution_bar',
                              width=5.5 * inch, height=3.0 * inch)
        self._maybe_add_chart(elements, chart_paths, 'gwp_breakdown_pie',
                              width=4.5 * inch, height=3.4 * inch)
        return elements

    # ------------------------------------------------------------------
    # Page 4: SDG alignment, recommendations, warnings
    # ------------------------------------------------------------------

    def _build_sdg_alignment(self, result: LCAResult) -> list:
        elements: list = []
        elements.append(Paragraph("SDG Alignment", self._styles['SectionTitle']))

        data = [['SDG', 'Goal', 'Alignment', 'Detail']]
        for sdg in result.sdg_alignments:
            a_hex = _ALIGNMENT_COLORS[sdg.alignment].hexval()
            data.append([
                str(sdg.sdg),
                Paragraph(sdg.title, self._styles['BodyText2']),
                Paragraph(
                    f'<font color="{a_hex}"><b>{sdg.alignment.value}</b></font>',
                    self._styles['BodyText2'],
                ),
                Paragraph(_escape(sdg.description), self._styles['BodyText2']),
            ])
        elements.append(self._styled_table(
            data, [0.5 * inch, 2.0 * inch, 0.9 * inch, 3.4 * inch]
        ))
        elements.append(Spacer(1, 0.25 * inch))
        return elements

    def _build_recommendations(self, result: LCAResult) -> list:
        elements: list = []
        elements.append(Paragraph("Recommendations", self._styles['SectionTitle']))

        for i, rec in enumerate(result.recommendations, start=1):
            elements.append(Paragraph(
                f"{i}. {_escape(rec)}", self._styles['Finding']
            ))

        if result.ai_recommendations:
            elements.append(Spacer(1, 0.1 * inch))
            elements.append(Paragraph("<b>AI Recommendations</b>",
                                      self._styles['SubSection']))
            for rec in result.ai_recommendations:
                elements.append(Paragraph(f"• {_escape(rec)}",
                                          self._styles['Finding']))

        elements.append(Spacer(1, 0.1 * inch))
        elements.append(Paragraph("<b>Circular Economy Opportunities</b>",
                                  self._styles['SubSection']))
        for suggestion in result.circular_economy_suggestions:
            elements.append(Paragraph(f"• {_escape(suggestion)}",
                                      self._styles['Finding']))
        elements.append(Spacer(1, 0.25 * inch))
        return elements

    def _build_warnings(self, result: LCAResult) -> list:
        elements: list = []
        if not result.validation_warnings:
            return elements

        elements.append(Paragraph("Data Quality Warnings",
                                  self._styles['SubSection']))
        elements.append(Paragraph(
            f"{result.benchmark_warning_count} input(s) were replaced with "
            "industry benchmarks.",
            self._styles['BodyText2'],
        ))
        for warning in result.validation_warnings:
            elements.append(Paragraph(
                f"• <b>{_escape(warning.field)}:</b> {_escape(warning.message)}",
                self._styles['Finding'],
            ))
        return elements

    # ------------------------------------------------------------------
    # Page 5: Appendix
    # ------------------------------------------------------------------

    def _build_appendix(self) -> list:
        elements: list = []
        elements.append(Paragraph("Appendix: Methodology",
                                  self._styles['SectionTitle']))

        sections = [
            ("Global Warming Potential",
             "Energy use, direct emissions, freight transport, and water "
             "consumption are converted to kg CO2-equivalent with fixed "
             "characterization factors (IPCC AR6 100-year GWP for emission "
             "species, grid and fuel intensities for energy carriers, "
             "tonne-km factors for transport modes)."),
            ("Energy Intensity",
             "Total energy in MJ divided by the mass of raw materials reported "
             "in kg or tonnes."),
            ("Material Circularity Index",
             f"Weighted blend of the water recycle rate "
             f"({weights.MCI_WATER_WEIGHT:.0%}), the renewable share of energy "
             f"({weights.MCI_RENEWABLE_WEIGHT:.0%}), and the waste recycle rate "
             f"({weights.MCI_WASTE_WEIGHT:.0%})."),
            ("Sustainability Score",
             "Each sub-score decays linearly from 100 to 0 as its per-tonne "
             "intensity grows; the overall score is their weighted sum and "
             "maps to grades A (80+), B (65+), C (50+), D (35+), and F."),
            ("Missing Data",
             "Absent energy, water, and transport data are replaced with "
             "industry benchmarks scaled to the processed material mass. "
             "Each substitution is listed under Data Quality Warnings."),
        ]
        for title, body in sections:
            elements.append(Paragraph(f"<b>{title}</b>", self._styles['SubSection']))
            elements.append(Paragraph(body, self._styles['BodyText2']))
        return elements

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _styled_table(self, data: list, col_widths: list) -> Table:
        """Build a table with a colored header row and alternating rows."""
        tbl = Table(data, colWidths=col_widths, repeatRows=1)
        style_commands = [
            ('BACKGROUND', (0, 0), (-1, 0), DARK_GREEN),
            ('TEXTCOLOR', (0, 0), (-1, 0), WHITE),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#CCCCCC')),
            ('TOPPADDING', (0, 0), (-1, -1), 4),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
            ('LEFTPADDING', (0, 0), (-1, -1), 6),
            ('RIGHTPADDING', (0, 0), (-1, -1), 6),
        ]
        for i in range(2, len(data), 2):
            style_commands.append(('BACKGROUND', (0, i), (-1, i), LIGHT_GRAY))
        tbl.setStyle(TableStyle(style_commands))
        return tbl

    def _maybe_add_chart(self, elements: list, chart_paths: Dict[str, str],
                         chart_key: str, width: float, height: float) -> None:
        """Add a chart image if available, otherwise skip."""
        path = chart_paths.get(chart_key)
        if path and os.path.isfile(path):
            try:
                elements.append(KeepTogether([Image(path, width=width, height=height)]))
            except Exception:
                logger.warning(
                    "Failed to embed chart '%s'; skipping.", chart_key,
                    exc_info=True,
                )
        elif chart_key in chart_paths:
            logger.warning(
                "Chart file for '%s' not found at '%s'; skipping.",
                chart_key, path,
            )
