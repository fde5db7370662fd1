"""
Commissioning CLI Commands
Command-line interface for the heat pump commissioning report.
"""

import click
import json
import sys
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from commissioning import __version__
from commissioning.commissioning_template import CommissioningTemplate
from commissioning.logging_setup import init_logging
from commissioning.record_store import AggregateRecord, AggregateRecordStore
from commissioning.report import export_report, generate, render_text
from commissioning.section_editor import SectionEditor
from commissioning.settings import LOG_LEVELS, load_settings
from field_schemas import SECTION_ORDER, SectionId, get_field_specs, parse_section, validate_section


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_data_file(path: str) -> Dict[str, Any]:
    """Read a JSON or YAML data file (by extension)."""
    with open(path, 'r', encoding='utf-8') as f:
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")
    return data


def _sections_from_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Section name -> values from either the exported record shape or a flat mapping.

    Raises:
        ValueError: If "sections" or any section's values are not a mapping
    """
    sections = data["sections"] if "sections" in data else data
    if not isinstance(sections, dict):
        raise ValueError("'sections' must be a mapping")

    for section in SECTION_ORDER:
        values = sections.get(section.value)
        if values is not None and not isinstance(values, dict):
            raise ValueError(f"Section {section.value!r} must be a mapping")
    return sections


def _record_from_data(data: Dict[str, Any]) -> AggregateRecord:
    """Accept either the exported record shape or a flat section -> values mapping."""
    sections = _sections_from_data(data)
    if "sections" in data:
        return AggregateRecord.from_dict(data)

    names = {s.value for s in SectionId}
    return AggregateRecord.from_dict({"sections": {name: values for name, values in sections.items() if name in names}})


@click.group()
@click.version_option(version=__version__)
@click.option('--config', type=click.Path(exists=True, dir_okay=False), help='YAML settings file')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), help='Logging level')
@click.pass_context
def cli(ctx, config: Optional[str], log_level: Optional[str]):
    """
    HPCR - Heat Pump Commissioning Report CLI

    Terminal-based commissioning form with per-section validation and a
    compliance summary.
    """
    try:
        settings = load_settings(config)
        if log_level:
            settings.log_level = log_level.upper()
        init_logging(settings.log_level, settings.log_file)
        template = CommissioningTemplate(settings.template_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    ctx.obj = {"settings": settings, "template": template}


@cli.command()
@click.option('--interactive', is_flag=True, help='Interactive terminal form')
@click.option('--from-data', type=click.Path(exists=True), help='Create from JSON/YAML data file')
@click.option('--output', '-o', type=click.Path(), help='Output record file path')
@click.pass_context
def create(ctx, interactive: bool, from_data: Optional[str], output: Optional[str]):
    """Create a new commissioning record."""
    template = ctx.obj["template"]
    store = AggregateRecordStore()

    if interactive:
        from terminal.commissioning_terminal import CommissioningTerminalInterface

        click.echo("Starting interactive commissioning form...")
        interface = CommissioningTerminalInterface(store, template)
        interface.run_interactive()

    elif from_data:
        click.echo(f"Loading commissioning data from: {from_data}")

        try:
            data = _load_data_file(from_data)
            sections = _sections_from_data(data)
        except (ValueError, yaml.YAMLError) as e:
            _fail(str(e))

        for section in SECTION_ORDER:
            values = sections.get(section.value)
            title = template.section_title(section)

            if values is None:
                click.echo(f"  - {title}: not provided")
                continue

            editor = SectionEditor(section, initial=values, template=template,
                                   on_save=lambda record, s=section: store.save_validated(s, record))
            result = editor.submit()

            if result.valid:
                click.echo(f"  ✓ {title}")
            else:
                click.echo(f"  ✗ {title}")
                for field_name, message in result.errors.items():
                    click.echo(f"      • {template.field_label(section, field_name)}: {message}")

            for field_name, message in result.warnings.items():
                click.echo(f"      ℹ {template.field_label(section, field_name)}: {message}")

    else:
        click.echo("Error: Must specify either --interactive or --from-data")
        click.echo("Usage: hpcr create --interactive")
        click.echo("   or: hpcr create --from-data commissioning.json --output record.json")
        sys.exit(1)

    record = store.get()
    completed = len(record.completed_sections)
    click.echo(f"\n✓ {completed}/{len(SECTION_ORDER)} sections completed")

    output_path = output or "commissioning_record.json"
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(record.to_dict(), f, indent=2, ensure_ascii=False)
    click.echo(f"✓ Record saved to: {output_path}")


@cli.command()
@click.argument('section')
@click.option('--data', '-d', 'data_file', type=click.Path(exists=True), required=True,
              help='JSON/YAML file with the section values')
@click.pass_context
def validate(ctx, section: str, data_file: str):
    """Validate one section (equipment, installation, control, safety, performance)."""
    template = ctx.obj["template"]

    try:
        section_id = parse_section(section)
        data = _load_data_file(data_file)
        sections = _sections_from_data(data)
    except (ValueError, yaml.YAMLError) as e:
        _fail(str(e))

    if "sections" in data:
        values = sections.get(section_id.value) or {}
    else:
        values = sections.get(section_id.value, data)
    result = validate_section(section_id, values)
    title = template.section_title(section_id)

    if result.valid:
        click.echo(f"✓ {title}: valid")
    else:
        click.echo(f"✗ {title}: {len(result.errors)} error(s)")
        for field_name, message in result.errors.items():
            click.echo(f"  • {template.field_label(section_id, field_name)}: {message}")

    for field_name, message in result.warnings.items():
        click.echo(f"  ℹ {template.field_label(section_id, field_name)}: {message}")

    if not result.valid:
        sys.exit(1)


@cli.command()
@click.argument('input_file', type=click.Path(exists=True))
@click.pass_context
def summary(ctx, input_file: str):
    """Show the commissioning summary for a record file."""
    try:
        record = _record_from_data(_load_data_file(input_file))
    except (ValueError, yaml.YAMLError) as e:
        _fail(str(e))

    view = generate(record, ctx.obj["template"])
    click.echo(render_text(view))
    click.echo("✓ Report ready" if view.is_complete else "✗ Report incomplete")


@cli.command()
@click.argument('input_file', type=click.Path(exists=True))
@click.option('--output', '-o', type=click.Path(), help='Output PDF file')
@click.pass_context
def render(ctx, input_file: str, output: Optional[str]):
    """Render a complete commissioning record to PDF."""
    from commissioning.rendering import generate_report_pdf

    if not output:
        output = str(Path(input_file).with_suffix('.pdf'))

    try:
        record = _record_from_data(_load_data_file(input_file))
        view = generate(record, ctx.obj["template"])
        click.echo(f"Rendering PDF to: {output}")
        generate_report_pdf(view, output)
    except (ValueError, yaml.YAMLError) as e:
        _fail(str(e))

    click.echo("✓ PDF rendered successfully")


@cli.command()
@click.argument('input_file', type=click.Path(exists=True))
@click.option('--output', '-o', type=click.Path(), required=True, help='Output file path')
@click.option('--format', 'fmt', type=click.Choice(['json', 'yaml']), default='json', help='Output format')
@click.pass_context
def export(ctx, input_file: str, output: str, fmt: str):
    """Export a complete commissioning report as JSON or YAML."""
    try:
        record = _record_from_data(_load_data_file(input_file))
        view = generate(record, ctx.obj["template"])
        export_report(view, output, fmt)
    except (ValueError, yaml.YAMLError) as e:
        _fail(str(e))

    click.echo(f"✓ Exported to: {output}")


@cli.command()
@click.pass_context
def sections(ctx):
    """List sections and their fields."""
    template = ctx.obj["template"]

    for section in SECTION_ORDER:
        click.echo(f"\n{section.value}: {template.section_title(section)}")
        for spec in get_field_specs(section):
            required = "required" if spec.required else "optional"
            click.echo(f"  {spec.name:<28} {spec.kind:<8} {required:<9} {template.field_label(section, spec.name)}")


if __name__ == '__main__':
    cli()
