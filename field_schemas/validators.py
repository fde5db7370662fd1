"""
Commissioning Section Validators
Plain validator functions, one per commissioning section.

Each validator takes the raw values collected for a section and returns a
ValidationResult: either the coerced record, or a mapping of field name to
message. Validation never looks at another section's data.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from field_schemas.section_schemas import FieldSpec, SectionId, get_field_specs, parse_section


TRUE_STRINGS = {"true", "yes", "y", "1", "on"}
FALSE_STRINGS = {"false", "no", "n", "0", "off"}


@dataclass(frozen=True)
class FieldValidationError:
    """A single field failing its section schema."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """
    Outcome of validating one section.

    Attributes:
        valid: True when every required field passed
        record: Coerced section record (only set when valid)
        errors: Field name -> message for failing fields
        warnings: Field name -> message for advisory limits (never blocking)
    """

    valid: bool
    record: Optional[Dict[str, Any]] = None
    errors: Dict[str, str] = field(default_factory=dict)
    warnings: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def success(cls, record: Dict[str, Any], warnings: Optional[Dict[str, str]] = None) -> 'ValidationResult':
        return cls(valid=True, record=record, warnings=dict(warnings or {}))

    @classmethod
    def failure(cls, errors: Dict[str, str], warnings: Optional[Dict[str, str]] = None) -> 'ValidationResult':
        return cls(valid=False, errors=dict(errors), warnings=dict(warnings or {}))

    @property
    def field_errors(self) -> List[FieldValidationError]:
        return [FieldValidationError(name, message) for name, message in self.errors.items()]


def _coerce_text(spec: FieldSpec, value: Any):
    """Return (value, error) for a text field."""
    if isinstance(value, bool):
        return None, f"{spec.label} must be text"
    if isinstance(value, (int, float)):
        return str(value), None
    if isinstance(value, str):
        return value, None
    return None, f"{spec.label} must be text"


def _coerce_boolean(spec: FieldSpec, value: Any):
    """Return (value, error) for a boolean field."""
    if isinstance(value, bool):
        return value, None
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True, None
        if lowered in FALSE_STRINGS:
            return False, None
    return None, f"{spec.label} must be yes or no"


def _advisory_warning(spec: FieldSpec, value: str) -> Optional[str]:
    if spec.advisory_max is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number > spec.advisory_max:
        return f"Recommended {spec.label.lower()} is {spec.advisory_max:g}°C or lower (got {value})"
    return None


def _check_fields(specs: List[FieldSpec], values: Dict[str, Any]) -> ValidationResult:
    record: Dict[str, Any] = {}
    errors: Dict[str, str] = {}
    warnings: Dict[str, str] = {}

    for spec in specs:
        value = values.get(spec.name)

        if value is None:
            if spec.required:
                errors[spec.name] = spec.message
            continue

        if spec.kind == "boolean":
            coerced, error = _coerce_boolean(spec, value)
        else:
            coerced, error = _coerce_text(spec, value)

        if error:
            errors[spec.name] = error
            continue

        if spec.required and spec.kind == "text" and coerced == "":
            errors[spec.name] = spec.message
            continue

        record[spec.name] = coerced

        if spec.kind == "text":
            warning = _advisory_warning(spec, coerced)
            if warning:
                warnings[spec.name] = warning

    if errors:
        return ValidationResult.failure(errors, warnings)
    return ValidationResult.success(record, warnings)


def validate_equipment(values: Dict[str, Any]) -> ValidationResult:
    """Validate Equipment Specifications: every field is a required string."""
    return _check_fields(get_field_specs(SectionId.EQUIPMENT), values)


def validate_installation(values: Dict[str, Any]) -> ValidationResult:
    """Validate Installation & Commissioning; notes are optional."""
    return _check_fields(get_field_specs(SectionId.INSTALLATION), values)


def validate_control(values: Dict[str, Any]) -> ValidationResult:
    """
    Validate Control Systems.

    Temperature differential and pressure readings stay optional whether or
    not performance monitoring is enabled. Lockout limits are advisory and
    only produce warnings.
    """
    return _check_fields(get_field_specs(SectionId.CONTROL), values)


def validate_safety(values: Dict[str, Any]) -> ValidationResult:
    """Validate Safety & Compliance; both checkboxes must be explicit booleans."""
    return _check_fields(get_field_specs(SectionId.SAFETY), values)


def validate_performance(values: Dict[str, Any]) -> ValidationResult:
    """Validate Performance Metrics; notes are optional."""
    return _check_fields(get_field_specs(SectionId.PERFORMANCE), values)


VALIDATORS: Dict[SectionId, Callable[[Dict[str, Any]], ValidationResult]] = {
    SectionId.EQUIPMENT: validate_equipment,
    SectionId.INSTALLATION: validate_installation,
    SectionId.CONTROL: validate_control,
    SectionId.SAFETY: validate_safety,
    SectionId.PERFORMANCE: validate_performance,
}


def validate_section(section, values: Dict[str, Any]) -> ValidationResult:
    """
    Validate raw values for a section.

    Args:
        section: SectionId or its string value (e.g., "equipment")
        values: Raw field values as entered

    Returns:
        ValidationResult for that section

    Raises:
        ValueError: If the section is unknown
    """
    return VALIDATORS[parse_section(section)](values or {})
