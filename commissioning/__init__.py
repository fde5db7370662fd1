"""
HPCR - Heat Pump Commissioning Report

This package provides:
1. Section editors and navigation for the commissioning form
2. The session-scoped aggregate record store
3. Summary report generation and PDF output
"""

__version__ = "1.0.0"
