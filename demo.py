#!/usr/bin/env python3
"""
Heat Pump Commissioning Demo

Demonstrates the complete workflow:
1. Fill and submit sections through the navigation controller
2. Jump away from a section with unsaved edits (draft save)
3. Show the summary while incomplete
4. Finish the remaining sections and render the PDF
"""

import tempfile
from pathlib import Path

from commissioning.logging_setup import init_logging
from commissioning.navigation import NavigationController
from commissioning.record_store import AggregateRecordStore
from commissioning.rendering import generate_report_pdf
from commissioning.report import export_report, generate, render_text

SAMPLE_DATA = {
    "equipment": {
        "model_number": "HP-2000",
        "serial_number": "SN123456",
        "compressor_type": "variable",
        "heating_capacity": "36000",
        "cooling_capacity": "30000",
        "hspf_rating": "10",
        "eer_rating": "14",
        "seer_rating": "20",
        "replacement_type": "gas",
    },
    "installation": {
        "external_static_pressure": "0.5",
        "airflow_measurement": "1200",
        "airflow_method": "trueflow",
        "refrigerant_charge_heating": "Subcooling 10°F",
        "refrigerant_charge_cooling": "Superheat 12°F",
        "duct_leakage_before": "250",
        "duct_leakage_after": "90",
        "duct_leakage_unit": "cfm",
        "notes": "Sealed return plenum",
    },
    "control": {
        "control_system_type": "integrated",
        "low_ambient_lockout": "-20",
        "auxiliary_heat_lockout": "5",
        "performance_monitoring": True,
        "temperature_differential": "15°C",
        "pressure_readings": "320/118 psi",
    },
    "safety": {
        "csa_compliance": True,
        "documentation_complete": True,
        "installer_name": "Jordan Lee",
        "installer_license": "HVAC-4471",
        "installation_date": "2026-01-28",
        "sign_off_date": "2026-01-30",
    },
    "performance": {
        "thermal_balance_point": "-12",
        "temperature_split_actual": "18",
        "temperature_split_expected": "20",
        "duct_leakage_reduction": "64",
        "power_draw_heating": "3.2",
        "power_draw_cooling": "2.6",
    },
}


def fill(nav, values):
    for name, value in values.items():
        nav.editor.set_value(name, value)


def demo_sections(nav):
    """Demo 1: Submit sections in order"""
    print("=" * 60)
    print("DEMO 1: Section Submission")
    print("=" * 60)

    for section in ("equipment", "installation"):
        print(f"\nSubmitting {section}...")
        fill(nav, SAMPLE_DATA[section])
        result = nav.editor.submit()
        print(f"   {'✓' if result.valid else '✗'} {section} -> now on: {nav.active}")

    print("\nSubmitting control with a missing lockout...")
    partial = dict(SAMPLE_DATA["control"], auxiliary_heat_lockout="")
    fill(nav, partial)
    result = nav.editor.submit()
    for field_name, message in result.errors.items():
        print(f"   ✗ {field_name}: {message}")
    print(f"   Still on: {nav.active}")


def demo_draft_save(nav):
    """Demo 2: Leave a section with unsaved edits"""
    print("\n" + "=" * 60)
    print("DEMO 2: Draft Save on Navigation")
    print("=" * 60)

    nav.on_section_change("summary")
    record = nav.store.get()
    print(f"\n   Control draft kept: {record.get('control') is not None}")
    print(f"   Completed sections: {', '.join(nav.completed_sections)}")

    print("\n" + render_text(generate(record)))


def demo_complete(nav, output_dir):
    """Demo 3: Finish the form and render"""
    print("=" * 60)
    print("DEMO 3: Complete Report")
    print("=" * 60)

    nav.on_section_change("control")
    for section in ("control", "safety", "performance"):
        fill(nav, SAMPLE_DATA[section])
        result = nav.editor.submit()
        for field_name, message in result.warnings.items():
            print(f"   ℹ {field_name}: {message}")
        print(f"   {'✓' if result.valid else '✗'} {section}")

    view = generate(nav.store.get())
    print(f"\n   Report complete: {view.is_complete}")

    pdf_path = generate_report_pdf(view, str(Path(output_dir) / "commissioning.pdf"))
    json_path = export_report(view, str(Path(output_dir) / "commissioning.json"))
    print(f"   ✓ PDF saved: {pdf_path}")
    print(f"   ✓ JSON saved: {json_path}")


def main():
    """Run all demos"""
    init_logging("INFO")

    nav = NavigationController(AggregateRecordStore())
    output_dir = tempfile.mkdtemp(prefix="hpcr_demo_")

    demo_sections(nav)
    demo_draft_save(nav)
    demo_complete(nav, output_dir)

    print("\n" + "=" * 60)
    print("DEMONSTRATION COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
