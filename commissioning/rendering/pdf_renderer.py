"""
PDF Renderer for Commissioning Reports

Generates the printable heat pump commissioning summary using reportlab.
Only complete reports are rendered.
"""

from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from commissioning.report import ReportView

HEADING_COLOR = colors.HexColor('#1a5490')


class CommissioningPDFRenderer:
    """
    Renders commissioning report views as PDF documents.
    """

    def __init__(self, pagesize=A4):
        """Initialize the PDF renderer."""
        self.pagesize = pagesize
        styles = getSampleStyleSheet()
        self.body_style = styles['Normal']
        self.title_style = ParagraphStyle(
            'ReportTitle',
            parent=styles['Heading1'],
            fontSize=16,
            textColor=HEADING_COLOR,
            spaceAfter=30,
            alignment=TA_CENTER
        )
        self.heading_style = ParagraphStyle(
            'SectionHeading',
            parent=styles['Heading2'],
            fontSize=12,
            textColor=HEADING_COLOR,
            spaceAfter=12
        )
        self.placeholder_style = ParagraphStyle(
            'Placeholder',
            parent=styles['Italic'],
            textColor=colors.grey
        )

    def generate_pdf(self, view: ReportView, output_path: str) -> str:
        """
        Generate a PDF from a report view.

        Args:
            view: Report view produced by commissioning.report.generate
            output_path: Path where PDF will be saved

        Returns:
            Path to generated PDF

        Raises:
            ValueError: If the report is incomplete
        """
        if not view.can_generate:
            raise ValueError(view.warning or "Report is incomplete")

        output_dir = Path(output_path).parent
        if output_dir and not output_dir.exists():
            output_dir.mkdir(parents=True, exist_ok=True)

        doc = SimpleDocTemplate(str(output_path), pagesize=self.pagesize, title=view.title)
        doc.build(self._build_elements(view))

        return str(output_path)

    def _build_elements(self, view: ReportView) -> list:
        elements = [
            Paragraph(_escape(view.title.upper()), self.title_style),
            Spacer(1, 0.2 * inch),
        ]

        for block in view.blocks:
            elements.append(Paragraph(_escape(block.title), self.heading_style))

            if not block.provided:
                elements.append(Paragraph(_escape(block.placeholder or ""), self.placeholder_style))
            elif block.lines:
                elements.append(self._section_table(block.lines))

            elements.append(Spacer(1, 0.3 * inch))

        return elements

    def _section_table(self, lines) -> Table:
        table_data = [
            [Paragraph(_escape(line.label), self.body_style), Paragraph(_escape(line.value), self.body_style)]
            for line in lines
        ]

        t = Table(table_data, colWidths=[2.5 * inch, 4.5 * inch])
        t.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (0, -1), colors.lightgrey),
            ('TEXTCOLOR', (0, 0), (-1, -1), colors.black),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
            ('GRID', (0, 0), (-1, -1), 1, colors.black)
        ]))
        return t


def _escape(text: str) -> str:
    """Escape reportlab paragraph markup characters."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def generate_report_pdf(view: ReportView, output_path: str) -> str:
    """
    Convenience function to generate a commissioning report PDF.

    Args:
        view: Complete report view
        output_path: Path where PDF will be saved

    Returns:
        Path to generated PDF
    """
    renderer = CommissioningPDFRenderer()
    return renderer.generate_pdf(view, output_path)


__all__ = ["CommissioningPDFRenderer", "generate_report_pdf"]
