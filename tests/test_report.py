"""
Tests for the Report Generator
"""

import json
import os
import shutil
import tempfile
import unittest

import yaml

from commissioning.record_store import AggregateRecord, AggregateRecordStore
from commissioning.report import export_report, generate, render_text
from field_schemas import SectionId
from sample_data import ALL_SECTIONS, CONTROL, EQUIPMENT, INSTALLATION, PERFORMANCE, SAFETY


def _complete_record() -> AggregateRecord:
    store = AggregateRecordStore()
    for section, values in ALL_SECTIONS.items():
        store.save_validated(section, values)
    return store.get()


class TestGenerate(unittest.TestCase):
    """Projection of the aggregate record into report blocks."""

    def test_only_equipment_present(self):
        store = AggregateRecordStore()
        store.save_validated("equipment", EQUIPMENT)
        view = generate(store.get())

        self.assertFalse(view.is_complete)
        self.assertFalse(view.can_generate)
        self.assertEqual(view.warning, "Please complete all sections to generate a full report.")

        equipment = view.block("equipment")
        self.assertTrue(equipment.provided)
        self.assertIn(("Model Number", "HP-2000"), [(l.label, l.value) for l in equipment.lines])

        placeholders = [block for block in view.blocks if not block.provided]
        self.assertEqual(len(placeholders), 4)
        self.assertEqual(view.block("installation").placeholder, "No installation data provided yet.")
        self.assertEqual(view.block("performance").placeholder, "No performance metrics provided yet.")

    def test_empty_record_never_fails(self):
        view = generate(AggregateRecord())
        self.assertEqual(len(view.blocks), 5)
        self.assertFalse(any(block.provided for block in view.blocks))

    def test_complete_when_all_present_even_if_invalid(self):
        record = AggregateRecord()
        for section in SectionId:
            record.sections[section] = {"notes": "draft only"}
        view = generate(record)

        self.assertTrue(view.is_complete)
        self.assertIsNone(view.warning)

    def test_units_and_composite_lines(self):
        view = generate(_complete_record())
        lines = {
            block.section.value: {line.label: line.value for line in block.lines}
            for block in view.blocks
        }

        self.assertEqual(lines["equipment"]["Heating Capacity"], "36000 BTU/h")
        self.assertEqual(lines["equipment"]["Compressor Type"], "Variable Speed")
        self.assertEqual(lines["installation"]["External Static Pressure"], "0.5 inches WC")
        self.assertEqual(lines["installation"]["Duct Leakage"], "250 → 90 CFM")
        self.assertEqual(lines["control"]["Low Ambient Lockout"], "-20°C")
        self.assertEqual(lines["control"]["Performance Monitoring"], "Enabled")
        self.assertEqual(lines["safety"]["CSA Compliance"], "Yes")
        self.assertEqual(
            lines["performance"]["Temperature Split"],
            "18°C (Actual) vs 20°C (Expected)"
        )
        self.assertEqual(lines["performance"]["Power Draw (Heating)"], "3.2 kW")

    def test_monitoring_fields_hidden_when_disabled(self):
        store = AggregateRecordStore()
        store.save_validated("control", dict(CONTROL, performance_monitoring=False))
        labels = [line.label for line in generate(store.get()).block("control").lines]

        self.assertIn("Performance Monitoring", labels)
        self.assertNotIn("Temperature Differential", labels)
        self.assertNotIn("Pressure Readings", labels)

    def test_notes_only_when_present(self):
        store = AggregateRecordStore()
        store.save_validated("installation", dict(INSTALLATION, notes=""))
        store.save_validated("performance", PERFORMANCE)
        store.save_validated("safety", dict(SAFETY, additional_notes="Permit on file"))
        view = generate(store.get())

        self.assertNotIn("Notes", [l.label for l in view.block("installation").lines])
        self.assertNotIn("Notes", [l.label for l in view.block("performance").lines])
        self.assertIn("Additional Notes", [l.label for l in view.block("safety").lines])

    def test_partial_draft_renders_blank_values(self):
        record = AggregateRecord()
        record.sections[SectionId.EQUIPMENT] = {"model_number": "HP-2000"}
        lines = {l.label: l.value for l in generate(record).block("equipment").lines}

        self.assertEqual(lines["Model Number"], "HP-2000")
        self.assertEqual(lines["Heating Capacity"], " BTU/h")

    def test_render_text(self):
        text = render_text(generate(AggregateRecord()))

        self.assertIn("HEAT PUMP SYSTEM SUMMARY", text)
        self.assertIn("Please complete all sections", text)
        self.assertIn("No safety & compliance data provided yet.", text)


class TestExportReport(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_export_json(self):
        path = os.path.join(self.temp_dir, "report.json")
        export_report(generate(_complete_record()), path)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        self.assertTrue(data["is_complete"])
        self.assertEqual(data["record"]["sections"]["equipment"], EQUIPMENT)
        self.assertEqual(len(data["sections"]), 5)

    def test_export_yaml(self):
        path = os.path.join(self.temp_dir, "out", "report.yaml")
        export_report(generate(_complete_record()), path, format="yaml")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        self.assertEqual(data["title"], "Heat Pump System Summary")

    def test_export_refuses_incomplete(self):
        path = os.path.join(self.temp_dir, "report.json")
        with self.assertRaises(ValueError):
            export_report(generate(AggregateRecord()), path)
        self.assertFalse(os.path.exists(path))

    def test_unsupported_format(self):
        with self.assertRaises(ValueError):
            export_report(generate(_complete_record()), os.path.join(self.temp_dir, "r.xml"), format="xml")


if __name__ == '__main__':
    unittest.main()
