"""
Commissioning Template System
Loads the presentation template for the commissioning form: section titles,
field labels, units, choices, hints and the summary layout.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List

from field_schemas import default_values, parse_section


DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "commissioning_template.yaml"


class CommissioningTemplate:
    """Read-only view over the commissioning presentation template."""

    def __init__(self, template_path: Optional[str] = None):
        """
        Initialize commissioning template.

        Args:
            template_path: Path to template YAML file.
                          If None, uses the packaged templates/commissioning_template.yaml
        """
        if template_path is None:
            template_path = DEFAULT_TEMPLATE_PATH

        self.template_path = Path(template_path)
        self.template_structure = self._load_template()

    def _load_template(self) -> Dict[str, Any]:
        """Load the commissioning template from YAML file."""
        try:
            with open(self.template_path, 'r', encoding='utf-8') as f:
                structure = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Commissioning template not found: {self.template_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in template: {e}")

        if not isinstance(structure, dict) or not isinstance(structure.get("sections"), dict):
            raise ValueError(f"Template has no sections: {self.template_path}")

        return structure

    @property
    def form_title(self) -> str:
        return self.template_structure.get("form_title", "Heat Pump Commissioning Form")

    @property
    def report_title(self) -> str:
        return self.template_structure.get("report_title", "Heat Pump System Summary")

    @property
    def incomplete_warning(self) -> str:
        return self.template_structure.get(
            "incomplete_warning",
            "Please complete all sections to generate a full report."
        )

    @property
    def generate_label(self) -> str:
        return self.template_structure.get("generate_label", "Generate Report")

    def get_all_sections(self) -> List[str]:
        """
        Get list of all section names.

        Returns:
            List of section names
        """
        return list(self.template_structure.get("sections", {}).keys())

    def _section(self, section) -> Dict[str, Any]:
        return self.template_structure["sections"].get(parse_section(section).value, {})

    def section_title(self, section) -> str:
        section_id = parse_section(section)
        return self._section(section_id).get("title", section_id.value.title())

    def placeholder(self, section) -> str:
        section_id = parse_section(section)
        return self._section(section_id).get(
            "placeholder",
            f"No {section_id.value} data provided yet."
        )

    def get_section_fields(self, section_name) -> Dict[str, Any]:
        """
        Get field definitions for a section.

        Args:
            section_name: Name of the section

        Returns:
            Dictionary of field definitions
        """
        return self._section(section_name).get("fields", {})

    def field_config(self, section, field_name: str) -> Dict[str, Any]:
        return self.get_section_fields(section).get(field_name) or {}

    def field_label(self, section, field_name: str) -> str:
        return self.field_config(section, field_name).get(
            "label",
            field_name.replace('_', ' ').title()
        )

    def choices(self, section, field_name: str) -> Dict[str, str]:
        """Choice value -> display label, empty when the field is free text."""
        return dict(self.field_config(section, field_name).get("choices") or {})

    def display_value(self, section, field_name: str, value: Any) -> str:
        """
        Format a stored value for display.

        Booleans use the field's display mapping (e.g. Yes/No), choice values
        use their label, None renders as an empty string.
        """
        config = self.field_config(section, field_name)

        if value is None:
            return ""

        if isinstance(value, bool):
            display = config.get("display") or {True: "Yes", False: "No"}
            return str(display.get(value, value))

        choices = config.get("choices") or {}
        if value in choices:
            return str(choices[value])

        return str(value)

    def default_values(self, section) -> Dict[str, Any]:
        """Blank values for a section with template defaults applied."""
        values = default_values(section)
        for field_name, config in self.get_section_fields(section).items():
            if field_name in values and config and "default" in config:
                values[field_name] = config["default"]
        return values

    def is_field_enabled(self, section, field_name: str, values: Dict[str, Any]) -> bool:
        """
        Whether a field should be presented as editable.

        Presentation only: a disabled field keeps its value and can still be
        set programmatically.
        """
        controller = self.field_config(section, field_name).get("enabled_when")
        if not controller:
            return True
        return bool(values.get(controller))

    def summary_lines(self, section) -> List[Dict[str, Any]]:
        return list(self._section(section).get("summary") or [])


_default_template: Optional[CommissioningTemplate] = None


def get_default_template() -> CommissioningTemplate:
    """Packaged template, loaded once."""
    global _default_template
    if _default_template is None:
        _default_template = CommissioningTemplate()
    return _default_template
