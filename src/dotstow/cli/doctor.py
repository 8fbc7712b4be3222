"""``dotstow doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can install the dotfiles package.

No business logic resides here; it purely collects and displays
diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from dotstow.cli import exit_codes
from dotstow.cli.console import console
from dotstow.core.models import StowConfig, StowStatus
from dotstow.infra.stow_detector import detect_stow
from dotstow.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _stow_check(status_obj: StowStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the stow row."""
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "stow", path_str, "[green]OK[/green]"
    return "stow", "not found", "[red]FAIL[/red]"


def _package_check(config: StowConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the package directory row."""
    path = config.package_path
    if path.is_dir():
        return "Package", str(path), "[green]OK[/green]"
    return "Package", f"{path} (missing)", "[red]FAIL[/red]"


def _target_check(config: StowConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the target directory row."""
    if config.target.is_dir():
        return "Target", str(config.target), "[green]OK[/green]"
    return "Target", f"{config.target} (missing)", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Linux": "Linux",
        "Darwin": "macOS",
        "Windows": "Windows",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _dotstow_version_check() -> tuple[str, str, str]:
    return "dotstow", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ndotstow doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(config: StowConfig | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    config = config if config is not None else StowConfig()
    stow_status = detect_stow(config.executable)
    checks = [
        _dotstow_version_check(),
        _python_version_check(),
        _stow_check(stow_status),
        _package_check(config),
        _target_check(config),
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
            title="dotstow doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Show stow install guidance when missing.
    if not stow_status.found and stow_status.install_commands:
        lines = ["stow is not installed.", "Install using one of the following commands:\n"]
        lines.extend(f"  {cmd}" for cmd in stow_status.install_commands)
        for line in lines:
            if rich_available:
                console.print(line)
            else:
                print(line, file=sys.stderr)

    if has_failure:
        message = "Some checks failed."
        code = exit_codes.GENERAL_ERROR
    else:
        message = "All checks passed."
        code = exit_codes.SUCCESS

    if rich_available:
        colour = "red" if has_failure else "green"
        console.print(f"[bold {colour}]{message}[/bold {colour}]")
    else:
        print(message, file=sys.stderr)
    return code
