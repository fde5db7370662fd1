"""
Commissioning PDF Rendering Module

Provides PDF generation for completed commissioning reports.
"""

from .pdf_renderer import CommissioningPDFRenderer, generate_report_pdf

__all__ = ["CommissioningPDFRenderer", "generate_report_pdf"]
