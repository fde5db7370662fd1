"""
Terminal-based Commissioning Interface
Interactive CLI for heat pump commissioning using questionary.
"""

import questionary
from questionary import Choice, Style
from typing import Any, Optional

from field_schemas import SUMMARY, SectionId, get_field_specs
from commissioning.commissioning_template import CommissioningTemplate, get_default_template
from commissioning.navigation import NavigationController
from commissioning.record_store import AggregateRecordStore
from commissioning.report import ReportView, export_report, generate, render_text


# Custom style for the terminal interface
custom_style = Style([
    ('qmark', 'fg:#1a5490 bold'),
    ('question', 'bold'),
    ('answer', 'fg:#06989a bold'),
    ('pointer', 'fg:#1a5490 bold'),
    ('highlighted', 'fg:#1a5490 bold'),
    ('selected', 'fg:#06989a'),
    ('separator', 'fg:#6c6c6c'),
    ('instruction', ''),
    ('text', ''),
    ('disabled', 'fg:#858585 italic')
])

CLEAR = "__clear__"
QUIT = "__quit__"


class CommissioningTerminalInterface:
    """Interactive terminal interface for the commissioning form."""

    def __init__(self, store: Optional[AggregateRecordStore] = None,
                 template: Optional[CommissioningTemplate] = None):
        """
        Initialize commissioning terminal interface.

        Args:
            store: Record store for this session (a new empty one by default)
            template: Optional presentation template
        """
        self.template = template or get_default_template()
        self.store = store or AggregateRecordStore()
        self.navigation = NavigationController(self.store, self.template)

    def show_header(self):
        """Display the application header."""
        print("\n" + "=" * 70)
        print(f"  {self.template.form_title.upper()}".center(70))
        print("=" * 70 + "\n")

    def show_section_header(self, title: str):
        """Display section header."""
        print("\n" + "─" * 70)
        print(f"  {title}")
        print("─" * 70 + "\n")

    def run_interactive(self) -> ReportView:
        """
        Run the interactive commissioning form.

        Returns:
            Report view of the session when the user quits
        """
        self.show_header()

        while True:
            if self.navigation.in_summary:
                destination = self.show_summary()
            else:
                destination = self.collect_section()

            if destination is None:
                destination = self.choose_destination()

            if destination == QUIT:
                self.navigation.save_active_draft()
                break
            if destination == CLEAR:
                if questionary.confirm("Clear all data?", default=False, style=custom_style).ask():
                    self.navigation.clear_all()
                    print("\n✓ All data cleared")
                continue

            self.navigation.on_section_change(destination)

        return generate(self.store.get(), self.template)

    def choose_destination(self) -> str:
        """Navigation menu: sections with completion marks, summary, clear, quit."""
        completed = self.navigation.completed_sections
        choices = []
        for section in SectionId:
            mark = "✓" if section.value in completed else " "
            pointer = "▶" if section.value == self.navigation.active else " "
            choices.append(Choice(
                f"{pointer} [{mark}] {self.template.section_title(section)}",
                value=section.value
            ))
        choices.append(Choice("  Summary", value=SUMMARY))
        choices.append(questionary.Separator())
        choices.append(Choice("  Clear All Data", value=CLEAR))
        choices.append(Choice("  Quit", value=QUIT))

        answer = questionary.select("Go to:", choices=choices, style=custom_style).ask()
        return answer if answer is not None else QUIT

    def prompt_field(self, section: SectionId, field_name: str, kind: str, current: Any) -> Any:
        """Ask for a single field, defaulting to its current value."""
        config = self.template.field_config(section, field_name)
        label = self.template.field_label(section, field_name)
        hint = config.get("hint")
        if hint:
            label = f"{label} [{hint}]"

        if kind == "boolean":
            return questionary.confirm(label, default=bool(current), style=custom_style).ask()

        choices = self.template.choices(section, field_name)
        if choices:
            options = [Choice(text, value=value) for value, text in choices.items()]
            default = current if current in choices else None
            return questionary.select(label, choices=options, default=default, style=custom_style).ask()

        return questionary.text(
            label,
            default="" if current is None else str(current),
            multiline=bool(config.get("multiline")),
            style=custom_style
        ).ask()

    def collect_section(self, only_fields=None) -> Optional[str]:
        """
        Collect the active section and submit it.

        Returns:
            None to open the navigation menu, or QUIT when input was cancelled
        """
        editor = self.navigation.editor
        section = editor.section
        self.show_section_header(self.template.section_title(section))

        for spec in get_field_specs(section):
            if only_fields is not None and spec.name not in only_fields:
                continue
            if not editor.is_field_enabled(spec.name):
                print(f"  ({self.template.field_label(section, spec.name)} disabled)")
                continue

            answer = self.prompt_field(section, spec.name, spec.kind, editor.values.get(spec.name))
            if answer is None:
                return QUIT
            editor.set_value(spec.name, answer)

        result = editor.submit()

        for field_name, message in result.warnings.items():
            print(f"ℹ  {self.template.field_label(section, field_name)}: {message}")

        if result.valid:
            print(f"\n✓ {self.template.section_title(section)} saved")
            return self.navigation.active

        print("\n✗ Please correct the following:")
        for field_name, message in result.errors.items():
            print(f"  • {self.template.field_label(section, field_name)}: {message}")

        if questionary.confirm("Fix these fields now?", default=True, style=custom_style).ask():
            return self.collect_section(only_fields=set(result.errors))

        return None

    def show_summary(self) -> Optional[str]:
        """Print the summary and offer exports when the report is complete."""
        view = generate(self.store.get(), self.template)
        print("\n" + render_text(view))

        if view.can_generate and questionary.confirm(
            f"{self.template.generate_label}?",
            default=True,
            style=custom_style
        ).ask():
            self.export(view)

        return None

    def export(self, view: ReportView):
        """Export options for a complete report."""
        if questionary.confirm("Export to PDF?", default=True, style=custom_style).ask():
            from commissioning.rendering import generate_report_pdf

            filename = questionary.text(
                "Filename:",
                default="commissioning_report.pdf",
                style=custom_style
            ).ask()
            if filename:
                generate_report_pdf(view, filename)
                print(f"✓ Exported to: {filename}")

        if questionary.confirm("Export to JSON?", default=False, style=custom_style).ask():
            filename = questionary.text(
                "Filename:",
                default="commissioning_report.json",
                style=custom_style
            ).ask()
            if filename:
                export_report(view, filename)
                print(f"✓ Exported to: {filename}")


def main():
    """Main entry point for interactive terminal interface."""
    interface = CommissioningTerminalInterface()
    view = interface.run_interactive()

    status = "complete" if view.is_complete else "incomplete"
    print(f"\n✓ Session ended ({status})\n")


if __name__ == "__main__":
    main()
