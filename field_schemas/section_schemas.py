"""
Commissioning Section Schemas
Field definitions and ordering for the five commissioning sections.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class SectionId(str, Enum):
    """Commissioning sections, in forward-navigation order."""

    EQUIPMENT = "equipment"
    INSTALLATION = "installation"
    CONTROL = "control"
    SAFETY = "safety"
    PERFORMANCE = "performance"


# Pseudo-destination reached after the last section
SUMMARY = "summary"

SECTION_ORDER: List[SectionId] = list(SectionId)


@dataclass(frozen=True)
class FieldSpec:
    """
    Validation rules for a single section field.

    Attributes:
        name: Field key in the section record
        kind: "text" or "boolean"
        required: Whether the field must be present (and non-empty for text)
        message: Message reported when a required field is missing
        advisory_max: Upper limit shown as a hint; exceeding it only warns
        label: Human-readable field name used in messages
    """

    name: str
    kind: str = "text"
    required: bool = True
    message: str = ""
    advisory_max: Optional[float] = None
    label: str = ""


def _text(name: str, label: str, advisory_max: Optional[float] = None) -> FieldSpec:
    return FieldSpec(name, "text", True, f"{label} is required", advisory_max, label)


def _optional(name: str, label: str) -> FieldSpec:
    return FieldSpec(name, "text", False, label=label)


def _boolean(name: str, label: str) -> FieldSpec:
    return FieldSpec(name, "boolean", True, f"{label} must be set", label=label)


SECTION_FIELDS: Dict[SectionId, List[FieldSpec]] = {
    SectionId.EQUIPMENT: [
        _text("model_number", "Model number"),
        _text("serial_number", "Serial number"),
        _text("compressor_type", "Compressor type"),
        _text("heating_capacity", "Heating capacity"),
        _text("cooling_capacity", "Cooling capacity"),
        _text("hspf_rating", "HSPF rating"),
        _text("eer_rating", "EER rating"),
        _text("seer_rating", "SEER rating"),
        _text("replacement_type", "Replacement type"),
    ],
    SectionId.INSTALLATION: [
        _text("external_static_pressure", "External static pressure"),
        _text("airflow_measurement", "Airflow measurement"),
        _text("airflow_method", "Airflow method"),
        _text("refrigerant_charge_heating", "Refrigerant charge for heating"),
        _text("refrigerant_charge_cooling", "Refrigerant charge for cooling"),
        _text("duct_leakage_before", "Duct leakage before"),
        _text("duct_leakage_after", "Duct leakage after"),
        _text("duct_leakage_unit", "Duct leakage unit"),
        _optional("notes", "Notes"),
    ],
    SectionId.CONTROL: [
        _text("control_system_type", "Control system type"),
        _text("low_ambient_lockout", "Low ambient lockout", advisory_max=3.0),
        _text("auxiliary_heat_lockout", "Auxiliary heat lockout", advisory_max=2.0),
        _boolean("performance_monitoring", "Performance monitoring"),
        _optional("temperature_differential", "Temperature differential"),
        _optional("pressure_readings", "Pressure readings"),
        _optional("notes", "Notes"),
    ],
    SectionId.SAFETY: [
        _boolean("csa_compliance", "CSA compliance"),
        _boolean("documentation_complete", "Documentation complete"),
        _text("installer_name", "Installer name"),
        _text("installer_license", "Installer license"),
        _text("installation_date", "Installation date"),
        _text("sign_off_date", "Sign-off date"),
        _optional("additional_notes", "Additional notes"),
    ],
    SectionId.PERFORMANCE: [
        _text("thermal_balance_point", "Thermal balance point"),
        _text("temperature_split_actual", "Actual temperature split"),
        _text("temperature_split_expected", "Expected temperature split"),
        _text("duct_leakage_reduction", "Duct leakage reduction"),
        _text("power_draw_heating", "Power draw for heating"),
        _text("power_draw_cooling", "Power draw for cooling"),
        _optional("notes", "Notes"),
    ],
}

NEXT_SECTION: Dict[SectionId, str] = {
    SectionId.EQUIPMENT: SectionId.INSTALLATION.value,
    SectionId.INSTALLATION: SectionId.CONTROL.value,
    SectionId.CONTROL: SectionId.SAFETY.value,
    SectionId.SAFETY: SectionId.PERFORMANCE.value,
    SectionId.PERFORMANCE: SUMMARY,
}


def parse_section(section) -> SectionId:
    """
    Resolve a section identifier from a SectionId or its string value.

    Raises:
        ValueError: If the identifier is not one of the five sections
    """
    try:
        return SectionId(section)
    except ValueError:
        valid = ", ".join(s.value for s in SectionId)
        raise ValueError(f"Unknown section: {section!r}. Must be one of: {valid}")


def get_field_specs(section) -> List[FieldSpec]:
    """Return the field specs for a section, in display order."""
    return SECTION_FIELDS[parse_section(section)]


def default_values(section) -> Dict[str, object]:
    """Blank editor values for a section: "" for text, False for booleans."""
    return {
        spec.name: (False if spec.kind == "boolean" else "")
        for spec in get_field_specs(section)
    }
