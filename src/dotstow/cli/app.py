"""CLI application entry point and command routing for dotstow.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dotstow.exceptions.DotstowError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotstow.cli import exit_codes
from dotstow.cli.console import console
from dotstow.core.models import DEFAULT_EXECUTABLE, DEFAULT_PACKAGE, StowConfig
from dotstow.core.stow_service import StowService
from dotstow.exceptions import DotstowError, StowFailedError
from dotstow.version import __version__


DEFAULT_COMMAND: str = "install"
"""Command run when none is given on the command line."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_common_options(parser: argparse.ArgumentParser, *, suppress: bool = False) -> None:
    """Add the options shared by every command.

    With *suppress*, unset options leave the namespace untouched so a
    sub-command does not overwrite values given before it.
    """

    def default(value: object) -> object:
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "--package",
        default=default(DEFAULT_PACKAGE),
        help=f"Package directory to stow (default: {DEFAULT_PACKAGE}).",
    )
    parser.add_argument(
        "--target",
        type=Path,
        default=default(None),
        help="Directory to create the links in (default: your home directory).",
    )
    parser.add_argument(
        "--dir",
        dest="stow_dir",
        type=Path,
        default=default(None),
        help="Directory containing the package (default: current directory).",
    )
    parser.add_argument(
        "--stow",
        dest="executable",
        default=default(DEFAULT_EXECUTABLE),
        help=f"Stow executable to run (default: {DEFAULT_EXECUTABLE}).",
    )
    parser.add_argument(
        "-n",
        "--simulate",
        action="store_true",
        default=default(False),
        help="Ask stow for a dry run; nothing is changed on disk.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default(False),
        help="Enable debug logging.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``dotstow [install]`` — link the package into the target (default)
    * ``dotstow uninstall`` — remove the links again
    * ``dotstow check``     — print the stow path found on PATH (alias ``stow``)
    * ``dotstow doctor``    — environment diagnostics

    The shared options are accepted before or after the command.
    """
    parser = argparse.ArgumentParser(
        prog="dotstow",
        description="Install a dotfiles package into your home directory with GNU Stow.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _add_common_options(parser)

    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, suppress=True)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser(
        "install",
        parents=[common],
        help="Link the package into the target, adopting existing files (default).",
    )
    subparsers.add_parser(
        "uninstall",
        parents=[common],
        help="Remove the links created for the package.",
    )
    subparsers.add_parser(
        "check",
        aliases=["stow"],
        parents=[common],
        help="Print the path of the stow executable found on PATH.",
    )
    subparsers.add_parser(
        "doctor",
        parents=[common],
        help="Show environment diagnostics.",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> StowConfig:
    overrides: dict[str, object] = {
        "package": args.package,
        "executable": args.executable,
        "simulate": args.simulate,
    }
    if args.target is not None:
        overrides["target"] = args.target.expanduser().resolve()
    if args.stow_dir is not None:
        overrides["stow_dir"] = args.stow_dir.expanduser().resolve()
    return StowConfig(**overrides)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service(config: StowConfig) -> StowService:
    """Wire the concrete infra adapters into a :class:`StowService`."""
    from dotstow.infra.stow_detector import detect_stow
    from dotstow.infra.subprocess_runner import SubprocessRunner

    return StowService(SubprocessRunner(), detect_stow, config)


def _handle_install(config: StowConfig) -> int:
    """Check for stow, then link the package into the target."""
    service = _build_service(config)
    console.print(
        f"[bold]Installing[/bold] {config.package} into {config.target}"
        + (" [yellow](simulate)[/yellow]" if config.simulate else "")
    )
    service.install()
    console.print("[bold green]Install complete.[/bold green]")
    return exit_codes.SUCCESS


def _handle_uninstall(config: StowConfig) -> int:
    """Remove the package links; no dependency check is made first."""
    service = _build_service(config)
    console.print(
        f"[bold]Uninstalling[/bold] {config.package} from {config.target}"
        + (" [yellow](simulate)[/yellow]" if config.simulate else "")
    )
    service.uninstall()
    console.print("[bold green]Uninstall complete.[/bold green]")
    return exit_codes.SUCCESS


def _handle_check(config: StowConfig) -> int:
    """Print the stow path to stdout, like ``which``."""
    path = _build_service(config).check()
    print(path)
    return exit_codes.SUCCESS


def _handle_doctor(config: StowConfig) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from dotstow.cli.doctor import run_doctor

    return run_doctor(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the dotstow CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    DotstowError
        Propagated to :func:`cli`, which maps it to an exit code.
    """
    from dotstow.cli.logging_setup import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    command: str = args.command or DEFAULT_COMMAND
    config = _config_from_args(args)

    if command == "uninstall":
        return _handle_uninstall(config)
    if command in ("check", "stow"):
        return _handle_check(config)
    if command == "doctor":
        return _handle_doctor(config)
    return _handle_install(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.  A failing stow run exits with
    stow's own exit status.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except StowFailedError as exc:
        _render_error(exc)
        sys.exit(exc.returncode)
    except DotstowError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)


def _render_error(exc: DotstowError) -> None:
    console.print(f"[bold red]Error:[/bold red] {exc}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
