"""``pbdv-wrap --doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can run the DeepVariant pipeline.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from pbdv_wrap.cli import exit_codes
from pbdv_wrap.cli.console import console, escape
from pbdv_wrap.core.models import DEFAULT_GPACKAGE_PATH
from pbdv_wrap.core.validation import normalize_gpackage_path
from pbdv_wrap.infra.pbrun_detector import DEFAULT_PBRUN_PATH, detect_pbrun
from pbdv_wrap.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _pbrun_check(pbrun_path: str) -> tuple[str, str, str]:
    """Return (label, value, status) for the pbrun row.

    A missing pbrun is a FAIL: no run can succeed without it.
    """
    status_obj = detect_pbrun(pbrun_path)
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "pbrun", path_str, "[green]OK[/green]"
    return "pbrun", f"{pbrun_path} (not found)", "[red]FAIL[/red]"


def _gpackage_check(gpackage_path: str) -> tuple[str, str, str]:
    """Return (label, value, status) for the gpackage row."""
    normalized = normalize_gpackage_path(gpackage_path) or "/"
    if Path(normalized).is_dir():
        return "gpackage", normalized, "[green]OK[/green]"
    return "gpackage", f"{normalized} (missing)", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    # Parabricks ships for Linux only.
    status = "[green]OK[/green]" if system_raw == "Linux" else "[yellow]WARN[/yellow]"
    return "OS", value, status


def _pbdvwrap_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the pbdv-wrap version row."""
    return "pbdv-wrap", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\npbdv-wrap doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<40} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(
    pbrun_path: str = DEFAULT_PBRUN_PATH,
    gpackage_path: str = DEFAULT_GPACKAGE_PATH,
) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _pbdvwrap_version_check(),
        _python_version_check(),
        _pbrun_check(pbrun_path),
        _gpackage_check(gpackage_path),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="pbdv-wrap doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
