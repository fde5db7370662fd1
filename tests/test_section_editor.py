"""
Tests for Section Editors
"""

import unittest

from commissioning.section_editor import SectionEditor
from sample_data import ALL_SECTIONS, CONTROL, EQUIPMENT


class TestSectionEditor(unittest.TestCase):
    """Test the (values, submit(), errors) contract."""

    def setUp(self):
        self.saved = []
        self.next_calls = []

    def _editor(self, section, initial=None):
        return SectionEditor(
            section,
            initial=initial,
            on_save=self.saved.append,
            on_next=self.next_calls.append
        )

    def test_blank_defaults(self):
        editor = self._editor("control")

        self.assertEqual(editor.values["control_system_type"], "")
        self.assertIs(editor.values["performance_monitoring"], False)

    def test_template_default_applies(self):
        editor = self._editor("installation")
        self.assertEqual(editor.values["duct_leakage_unit"], "cfm")

    def test_prepopulates_from_saved_record(self):
        editor = self._editor("equipment", EQUIPMENT)
        self.assertEqual(editor.values, EQUIPMENT)

    def test_failed_submit_exposes_errors_and_skips_callbacks(self):
        editor = self._editor("equipment")
        editor.set_value("model_number", "HP-2000")

        result = editor.submit()

        self.assertFalse(result.valid)
        self.assertNotIn("model_number", editor.errors)
        self.assertIn("serial_number", editor.errors)
        self.assertEqual(self.saved, [])
        self.assertEqual(self.next_calls, [])

    def test_errors_recomputed_on_each_submit(self):
        editor = self._editor("equipment")
        editor.submit()
        self.assertEqual(len(editor.errors), 9)

        for name, value in EQUIPMENT.items():
            editor.set_value(name, value)
        editor.submit()

        self.assertEqual(editor.errors, {})

    def test_successful_submit_saves_once_and_advances(self):
        expected_next = {
            "equipment": "installation",
            "installation": "control",
            "control": "safety",
            "safety": "performance",
            "performance": "summary",
        }
        for section, values in ALL_SECTIONS.items():
            with self.subTest(section=section):
                self.saved.clear()
                self.next_calls.clear()
                editor = self._editor(section, values)

                result = editor.submit()

                self.assertTrue(result.valid)
                self.assertEqual(len(self.saved), 1)
                self.assertEqual(self.next_calls, [expected_next[section]])

    def test_saved_record_matches_entered_values(self):
        editor = self._editor("equipment")
        for name, value in EQUIPMENT.items():
            editor.set_value(name, value)
        editor.submit()

        self.assertEqual(self.saved, [EQUIPMENT])

    def test_unknown_field(self):
        editor = self._editor("equipment")
        with self.assertRaises(KeyError):
            editor.set_value("notes", "x")

    def test_monitoring_fields_disabled_but_editable(self):
        editor = self._editor("control")

        self.assertFalse(editor.is_field_enabled("temperature_differential"))
        self.assertFalse(editor.is_field_enabled("pressure_readings"))
        self.assertTrue(editor.is_field_enabled("notes"))

        editor.set_value("pressure_readings", "300 psi")
        self.assertEqual(editor.values["pressure_readings"], "300 psi")

        editor.set_value("performance_monitoring", True)
        self.assertTrue(editor.is_field_enabled("temperature_differential"))

    def test_warnings_exposed(self):
        editor = self._editor("control", dict(CONTROL, low_ambient_lockout="4"))
        editor.submit()

        self.assertIn("low_ambient_lockout", editor.warnings)
        self.assertEqual(len(self.saved), 1)


class TestDraft(unittest.TestCase):
    """Uncommitted values offered for the implicit save on navigation."""

    def test_untouched_editor_has_no_draft(self):
        editor = SectionEditor("equipment", initial=EQUIPMENT)
        self.assertIsNone(editor.draft())

    def test_edited_editor_has_draft(self):
        editor = SectionEditor("equipment")
        editor.set_value("model_number", "HP-2000")

        draft = editor.draft()
        self.assertEqual(draft["model_number"], "HP-2000")
        self.assertEqual(draft["serial_number"], "")

    def test_blank_edits_are_not_a_draft(self):
        editor = SectionEditor("equipment")
        editor.set_value("model_number", "   ")
        self.assertIsNone(editor.draft())

    def test_blanking_saved_section_is_a_draft(self):
        editor = SectionEditor("equipment", initial=EQUIPMENT)
        for name in EQUIPMENT:
            editor.set_value(name, "")

        draft = editor.draft()
        self.assertIsNotNone(draft)
        self.assertEqual(draft["model_number"], "")

    def test_submit_clears_draft(self):
        editor = SectionEditor("equipment")
        for name, value in EQUIPMENT.items():
            editor.set_value(name, value)
        editor.submit()

        self.assertIsNone(editor.draft())

    def test_failed_submit_keeps_draft(self):
        editor = SectionEditor("equipment")
        editor.set_value("model_number", "HP-2000")
        editor.submit()

        self.assertIsNotNone(editor.draft())


if __name__ == '__main__':
    unittest.main()
