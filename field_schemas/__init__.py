"""
Field Schemas

Section definitions and validators for heat pump commissioning data.
"""

from .section_schemas import (
    SECTION_FIELDS,
    SECTION_ORDER,
    NEXT_SECTION,
    SUMMARY,
    FieldSpec,
    SectionId,
    default_values,
    get_field_specs,
    parse_section,
)
from .validators import (
    VALIDATORS,
    FieldValidationError,
    ValidationResult,
    validate_control,
    validate_equipment,
    validate_installation,
    validate_performance,
    validate_safety,
    validate_section,
)

__all__ = [
    "SECTION_FIELDS",
    "SECTION_ORDER",
    "NEXT_SECTION",
    "SUMMARY",
    "FieldSpec",
    "SectionId",
    "default_values",
    "get_field_specs",
    "parse_section",
    "VALIDATORS",
    "FieldValidationError",
    "ValidationResult",
    "validate_control",
    "validate_equipment",
    "validate_installation",
    "validate_performance",
    "validate_safety",
    "validate_section",
]
