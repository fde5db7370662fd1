"""
Section Editor
In-progress values, submission and inline errors for one commissioning section.
"""

import copy
from typing import Any, Callable, Dict, Optional

from field_schemas import NEXT_SECTION, ValidationResult, get_field_specs, parse_section, validate_section
from commissioning.commissioning_template import CommissioningTemplate, get_default_template


class SectionEditor:
    """
    Editor for a single section.

    Exposes the (values, submit(), errors) contract used by the rendering
    layer. A successful submit hands the validated record to on_save and then
    asks on_next to move to the section's designated next destination.
    """

    def __init__(
        self,
        section,
        initial: Optional[Dict[str, Any]] = None,
        on_save: Optional[Callable[[Dict[str, Any]], None]] = None,
        on_next: Optional[Callable[[str], None]] = None,
        template: Optional[CommissioningTemplate] = None
    ):
        """
        Initialize section editor.

        Args:
            section: SectionId or its string value
            initial: Previously saved record used to pre-populate the editor
            on_save: Called with the validated record on successful submit
            on_next: Called with the next destination after on_save
            template: Presentation template (defaults to the packaged one)
        """
        self.section = parse_section(section)
        self.template = template or get_default_template()
        self.on_save = on_save
        self.on_next = on_next
        self.field_names = [spec.name for spec in get_field_specs(self.section)]

        self._values = self.template.default_values(self.section)
        if initial:
            self._values.update(copy.deepcopy(initial))
        self._has_saved = bool(initial)

        self._errors: Dict[str, str] = {}
        self._warnings: Dict[str, str] = {}
        self._dirty = False

    @property
    def values(self) -> Dict[str, Any]:
        return copy.deepcopy(self._values)

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def warnings(self) -> Dict[str, str]:
        return dict(self._warnings)

    @property
    def next_section(self) -> str:
        return NEXT_SECTION[self.section]

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def set_value(self, field_name: str, value: Any) -> None:
        """
        Record raw input for a field.

        Raises:
            KeyError: If the field does not belong to this section
        """
        if field_name not in self.field_names:
            raise KeyError(f"{field_name} is not a field of the {self.section.value} section")
        self._values[field_name] = value
        self._dirty = True

    def is_field_enabled(self, field_name: str) -> bool:
        return self.template.is_field_enabled(self.section, field_name, self._values)

    def submit(self) -> ValidationResult:
        """
        Validate the current values.

        On success the save callback runs exactly once with the validated
        record, then the next destination is requested. On failure errors are
        exposed per field and neither callback runs.
        """
        result = validate_section(self.section, self._values)
        self._warnings = dict(result.warnings)

        if not result.valid:
            self._errors = dict(result.errors)
            return result

        self._errors = {}
        self._dirty = False
        self._has_saved = True

        if self.on_save:
            self.on_save(copy.deepcopy(result.record))
        if self.on_next:
            self.on_next(self.next_section)

        return result

    def draft(self) -> Optional[Dict[str, Any]]:
        """
        Uncommitted in-progress values, or None.

        Returns values only when the user edited something since the editor
        was loaded or last submitted, and either a value is non-blank or the
        section already has saved data.
        """
        if not self._dirty:
            return None
        if self._has_saved:
            return self.values

        for value in self._values.values():
            if isinstance(value, bool):
                if value:
                    return self.values
            elif value is not None and str(value).strip():
                return self.values

        return None
