"""
Aggregate Record Store
Session-scoped owner of the commissioning data for all five sections.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from field_schemas import SECTION_ORDER, SectionId, parse_section

log = logging.getLogger(__name__)


def _empty_sections() -> Dict[SectionId, Optional[Dict[str, Any]]]:
    return {section: None for section in SECTION_ORDER}


@dataclass
class AggregateRecord:
    """
    Latest saved data for every section plus completion tracking.

    Attributes:
        sections: Section -> saved record, or None when not yet provided
        completed_sections: Sections validated and saved at least once,
                            in order of first completion
    """

    sections: Dict[SectionId, Optional[Dict[str, Any]]] = field(default_factory=_empty_sections)
    completed_sections: List[SectionId] = field(default_factory=list)

    def get(self, section) -> Optional[Dict[str, Any]]:
        return self.sections.get(parse_section(section))

    def is_completed(self, section) -> bool:
        return parse_section(section) in self.completed_sections

    @property
    def provided_sections(self) -> List[SectionId]:
        return [section for section in SECTION_ORDER if self.sections.get(section) is not None]

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON/YAML-friendly structure keyed by section name."""
        return {
            "sections": {
                section.value: copy.deepcopy(self.sections.get(section))
                for section in SECTION_ORDER
            },
            "completed_sections": [section.value for section in self.completed_sections],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AggregateRecord':
        """
        Build a record from the structure produced by to_dict().

        Completed entries for sections without data are skipped.

        Raises:
            ValueError: If a section name is unknown or its data is not a mapping
        """
        sections = data.get("sections") or {}
        if not isinstance(sections, dict):
            raise ValueError("'sections' must be a mapping")

        record = cls()
        for name, values in sections.items():
            if values is not None and not isinstance(values, dict):
                raise ValueError(f"Section {name!r} must be a mapping")
            record.sections[parse_section(name)] = copy.deepcopy(values)

        for name in data.get("completed_sections") or []:
            section = parse_section(name)
            if record.sections.get(section) is None:
                log.warning("Ignoring completed mark for %s section without data", section.value)
                continue
            if section not in record.completed_sections:
                record.completed_sections.append(section)
        return record


class AggregateRecordStore:
    """
    Single owner of the session's AggregateRecord.

    The store does not validate: save_validated() trusts its caller, and
    save_draft() is the explicit path for unvalidated values merged in when
    the user navigates away from an unsubmitted section.
    """

    def __init__(self, record: Optional[AggregateRecord] = None):
        self._record = copy.deepcopy(record) if record is not None else AggregateRecord()

    def get(self) -> AggregateRecord:
        """Snapshot of the current record; later saves do not affect it."""
        return copy.deepcopy(self._record)

    def save_validated(self, section, data: Dict[str, Any]) -> None:
        """
        Store a validated section record and mark the section completed.

        Args:
            section: SectionId or its string value
            data: Record that already passed the section validator
        """
        section_id = parse_section(section)
        self._record.sections[section_id] = copy.deepcopy(data)
        if section_id not in self._record.completed_sections:
            self._record.completed_sections.append(section_id)
        log.info("Saved validated %s section", section_id.value)

    # Name used by the section editor contract
    save = save_validated

    def save_draft(self, section, raw_values: Dict[str, Any]) -> None:
        """
        Merge unvalidated editor values into a section.

        Values are laid over any previously saved record for the section.
        Completion is left untouched.
        """
        section_id = parse_section(section)
        merged = copy.deepcopy(self._record.sections.get(section_id) or {})
        merged.update(copy.deepcopy(raw_values))
        self._record.sections[section_id] = merged
        log.info("Saved unvalidated draft for %s section", section_id.value)

    def clear_all(self) -> None:
        """Reset to an empty record."""
        self._record = AggregateRecord()
        log.info("Cleared all commissioning data")
