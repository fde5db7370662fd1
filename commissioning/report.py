"""
Commissioning Report Generator
Projects the aggregate record into a human-readable compliance summary.
"""

import json
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from field_schemas import SECTION_ORDER, SectionId
from commissioning.commissioning_template import CommissioningTemplate, get_default_template
from commissioning.record_store import AggregateRecord


@dataclass(frozen=True)
class ReportLine:
    label: str
    value: str


@dataclass
class SectionBlock:
    """One section of the summary; either populated lines or a placeholder."""

    section: SectionId
    title: str
    provided: bool
    lines: List[ReportLine] = field(default_factory=list)
    placeholder: Optional[str] = None


@dataclass
class ReportView:
    """
    Rendered summary of a commissioning session.

    Attributes:
        title: Report heading
        blocks: One block per section, in section order
        is_complete: True when every section has data (validity is not checked)
        warning: Shown when the report is incomplete
        record: The aggregate record the view was generated from
    """

    title: str
    blocks: List[SectionBlock]
    is_complete: bool
    warning: Optional[str] = None
    record: Optional[AggregateRecord] = None

    @property
    def can_generate(self) -> bool:
        """Whether the final output action should be enabled."""
        return self.is_complete

    def block(self, section) -> SectionBlock:
        section_id = SectionId(section)
        for block in self.blocks:
            if block.section == section_id:
                return block
        raise KeyError(section_id.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "is_complete": self.is_complete,
            "sections": [
                {
                    "section": block.section.value,
                    "title": block.title,
                    "provided": block.provided,
                    "lines": [{"label": line.label, "value": line.value} for line in block.lines],
                    "placeholder": block.placeholder,
                }
                for block in self.blocks
            ],
            "record": self.record.to_dict() if self.record else None,
        }


class _DisplayValues(dict):
    """Format mapping that renders missing fields as empty strings."""

    def __missing__(self, key):
        return ""


def _is_set(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def _section_lines(section: SectionId, data: Dict[str, Any], template: CommissioningTemplate) -> List[ReportLine]:
    display = _DisplayValues(
        (name, template.display_value(section, name, value)) for name, value in data.items()
    )

    lines = []
    for line in template.summary_lines(section):
        condition = line.get("only_if")
        if condition and not _is_set(data.get(condition)):
            continue
        lines.append(ReportLine(line.get("label", ""), line.get("format", "").format_map(display)))
    return lines


def generate(record: AggregateRecord, template: Optional[CommissioningTemplate] = None) -> ReportView:
    """
    Build the summary view for an aggregate record.

    Sections without data render their placeholder text rather than failing.

    Args:
        record: Aggregate record snapshot
        template: Presentation template (defaults to the packaged one)

    Returns:
        ReportView with one block per section
    """
    template = template or get_default_template()
    blocks = []

    for section in SECTION_ORDER:
        data = record.sections.get(section)
        title = template.section_title(section)

        if data is None:
            blocks.append(SectionBlock(section, title, False, placeholder=template.placeholder(section)))
        else:
            blocks.append(SectionBlock(section, title, True, lines=_section_lines(section, data, template)))

    is_complete = all(block.provided for block in blocks)

    return ReportView(
        title=template.report_title,
        blocks=blocks,
        is_complete=is_complete,
        warning=None if is_complete else template.incomplete_warning,
        record=record
    )


def render_text(view: ReportView, width: int = 70) -> str:
    """Plain-text rendering of a report view for the terminal."""
    out = ["=" * width, f"  {view.title.upper()}", "=" * width]

    if view.warning:
        out.append(f"⚠ {view.warning}")

    for block in view.blocks:
        out.append("")
        out.append(f"── {block.title} " + "─" * max(0, width - len(block.title) - 4))
        if not block.provided:
            out.append(f"  {block.placeholder}")
            continue
        for line in block.lines:
            out.append(f"  {line.label}: {line.value}")

    return "\n".join(out) + "\n"


def export_report(view: ReportView, filepath: str, format: str = "json") -> str:
    """
    Export a complete report to file.

    Args:
        view: Report view to export
        filepath: Output file path
        format: Output format ("json" or "yaml")

    Returns:
        Path written

    Raises:
        ValueError: If the report is incomplete or the format is unsupported
    """
    if format not in ("json", "yaml"):
        raise ValueError(f"Unsupported format: {format}")
    if not view.can_generate:
        raise ValueError(view.warning or "Report is incomplete")

    filepath = Path(filepath)
    if filepath.parent and not filepath.parent.exists():
        filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        if format == "json":
            json.dump(view.to_dict(), f, indent=2, ensure_ascii=False)
        else:
            yaml.safe_dump(view.to_dict(), f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    return str(filepath)
