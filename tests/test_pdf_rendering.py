"""
Tests for PDF Rendering

Tests the PDF generation functionality for commissioning reports.
"""

import os
import shutil
import tempfile
import unittest

from commissioning.record_store import AggregateRecord, AggregateRecordStore
from commissioning.rendering import CommissioningPDFRenderer, generate_report_pdf
from commissioning.report import generate
from sample_data import ALL_SECTIONS, EQUIPMENT


class TestPDFRendering(unittest.TestCase):
    """Test PDF rendering functionality"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.renderer = CommissioningPDFRenderer()

        store = AggregateRecordStore()
        for section, values in ALL_SECTIONS.items():
            store.save_validated(section, values)
        self.complete_view = generate(store.get())

    def tearDown(self):
        """Clean up test files"""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_complete_report_generation(self):
        """Test generating a PDF for a complete report"""
        output_path = os.path.join(self.temp_dir, "commissioning.pdf")

        result = generate_report_pdf(self.complete_view, output_path)

        self.assertEqual(result, output_path)
        self.assertTrue(os.path.exists(output_path))
        self.assertGreater(os.path.getsize(output_path), 0)

        with open(output_path, 'rb') as f:
            self.assertEqual(f.read(5), b"%PDF-")

    def test_output_directory_created(self):
        """Test that a missing output directory is created"""
        output_path = os.path.join(self.temp_dir, "reports", "2026", "commissioning.pdf")

        self.renderer.generate_pdf(self.complete_view, output_path)

        self.assertTrue(os.path.exists(output_path))

    def test_incomplete_report_refused(self):
        """Test that an incomplete report is not rendered"""
        output_path = os.path.join(self.temp_dir, "partial.pdf")
        store = AggregateRecordStore()
        store.save_validated("equipment", EQUIPMENT)

        with self.assertRaises(ValueError):
            self.renderer.generate_pdf(generate(store.get()), output_path)

        self.assertFalse(os.path.exists(output_path))

    def test_markup_characters_in_values(self):
        """Test values containing reportlab markup characters"""
        output_path = os.path.join(self.temp_dir, "markup.pdf")
        record = AggregateRecord.from_dict(self.complete_view.record.to_dict())
        record.sections[record.provided_sections[0]]["model_number"] = "HP<2000> & Co"

        result = generate_report_pdf(generate(record), output_path)

        self.assertTrue(os.path.exists(result))


if __name__ == '__main__':
    unittest.main()
