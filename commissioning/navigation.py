"""
Navigation Controller
Tracks the section being edited and mediates moves between sections and the
summary view.
"""

import logging
from typing import List, Optional

from field_schemas import SUMMARY, SectionId, parse_section
from commissioning.commissioning_template import CommissioningTemplate, get_default_template
from commissioning.record_store import AggregateRecordStore
from commissioning.section_editor import SectionEditor

log = logging.getLogger(__name__)

DESTINATIONS: List[str] = [section.value for section in SectionId] + [SUMMARY]


class NavigationController:
    """
    State machine over the five sections plus the summary view.

    Leaving a section with uncommitted edits merges them into the store via
    save_draft(), without validation. Submitting a section goes through the
    editor's own validation and save_validated().
    """

    def __init__(self, store: AggregateRecordStore, template: Optional[CommissioningTemplate] = None):
        self.store = store
        self.template = template or get_default_template()
        self._active: str = SectionId.EQUIPMENT.value
        self._editor: Optional[SectionEditor] = self._build_editor(SectionId.EQUIPMENT)

    @property
    def active(self) -> str:
        """Active destination: a section value or "summary"."""
        return self._active

    @property
    def in_summary(self) -> bool:
        return self._active == SUMMARY

    @property
    def editor(self) -> Optional[SectionEditor]:
        """Editor for the active section; None while showing the summary."""
        return self._editor

    @property
    def completed_sections(self) -> List[str]:
        return [section.value for section in self.store.get().completed_sections]

    def _build_editor(self, section: SectionId) -> SectionEditor:
        return SectionEditor(
            section,
            initial=self.store.get().get(section),
            on_save=lambda data: self.store.save_validated(section, data),
            on_next=self.on_section_change,
            template=self.template
        )

    def on_section_change(self, target) -> None:
        """
        Move to another section or to the summary.

        Args:
            target: Section value, SectionId, or "summary"

        Raises:
            ValueError: If target is not a known destination
        """
        target = target.value if isinstance(target, SectionId) else target
        if target != SUMMARY:
            target = parse_section(target).value

        if target == self._active:
            return

        self.save_active_draft()

        log.debug("Navigating from %s to %s", self._active, target)
        self._active = target
        self._editor = None if target == SUMMARY else self._build_editor(SectionId(target))

    def save_active_draft(self) -> bool:
        """
        Merge the active editor's uncommitted values into the store.

        Returns:
            True if a draft was saved
        """
        if self._editor is None:
            return False

        draft = self._editor.draft()
        if draft is None:
            return False

        self.store.save_draft(self._editor.section, draft)
        return True

    def clear_all(self) -> None:
        """Clear the store and reload the active editor with blank values."""
        self.store.clear_all()
        if not self.in_summary:
            self._editor = self._build_editor(SectionId(self._active))
