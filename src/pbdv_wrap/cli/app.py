"""CLI application entry point and command routing for pbdv-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pbdv_wrap.exceptions.PbdvWrapError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Options are single getopt-style letters
  (``-o -p -f -s -r -g -L -l -w -h``); required options are checked by
  :func:`~pbdv_wrap.core.validation.validate`, not by argparse, so the
  first missing parameter is reported in a fixed order.
* This module is the only place that translates between the domain world
  and the OS process exit code.  A failing ``pbrun`` run keeps its own
  exit status.
"""

from __future__ import annotations

import argparse
import shlex
import sys
from typing import TYPE_CHECKING, NoReturn

from pbdv_wrap.cli import exit_codes
from pbdv_wrap.cli.console import console, escape
from pbdv_wrap.core.models import DEFAULT_GPACKAGE_PATH, RunConfig
from pbdv_wrap.core.validation import validate
from pbdv_wrap.exceptions import ExternalToolError, PbdvWrapError, UsageError, ValidationError
from pbdv_wrap.infra.pbrun_detector import DEFAULT_PBRUN_PATH
from pbdv_wrap.version import __version__

if TYPE_CHECKING:
    from pbdv_wrap.core.pipeline_service import PipelineService

_USAGE = (
    "%(prog)s -o <output_files_path> -p <panel_folder_name> -f <flowcell_id> "
    "-s <sample_id> -r <refseq> [-g <alternate_gpackage_path>] "
    "[-L <interval_file>] [-l] [-w] [--] fastq1 fastq2 ..."
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=self.format_usage().strip())


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    ``-h`` is handled by :func:`main` rather than argparse because help
    terminates with exit status 1.
    """
    parser = _ArgumentParser(
        prog="pbdv-wrap",
        usage=_USAGE,
        description="Run Nvidia Clara Parabricks DeepVariant Pipeline",
        add_help=False,
    )

    required = parser.add_argument_group("Required Parameters")
    required.add_argument(
        "-o", dest="output_path", default="", metavar="<output_files_path>",
        help="The path where the output files should be generated",
    )
    required.add_argument(
        "-p", dest="panel_folder", default="", metavar="<panel_folder_name>",
        help="The name of the common folder for panel samples (e.g. PEDSALL-V#)",
    )
    required.add_argument(
        "-f", dest="flowcell_id", default="", metavar="<flowcell_id>",
        help="The flowcell identifier",
    )
    required.add_argument(
        "-s", dest="sample_id", default="", metavar="<sample_id>",
        help="The sample accession identifier",
    )
    required.add_argument(
        "-r", dest="reference_sequence", default="", metavar="<refseq>",
        help=(
            "The internal Docker path where the reference sequence .fasta "
            "file is mounted (usually in /gpackage)"
        ),
    )

    optional = parser.add_argument_group("Optional Parameters")
    optional.add_argument(
        "-g", dest="gpackage_path", default=DEFAULT_GPACKAGE_PATH,
        metavar="<gpackage_path>",
        help=f"Supply a different gpackage path (defaults to {DEFAULT_GPACKAGE_PATH})",
    )
    optional.add_argument(
        "-L", dest="interval_file", default=None, metavar="<interval_file_path>",
        help="Interval file to be supplied to the pipeline",
    )
    optional.add_argument(
        "--pbrun-path", dest="pbrun_path", default=DEFAULT_PBRUN_PATH,
        metavar="<path>",
        help=f"Parabricks pbrun executable (defaults to {DEFAULT_PBRUN_PATH})",
    )

    flags = parser.add_argument_group("Optional Flags")
    flags.add_argument(
        "-l", dest="low_memory", action="store_true",
        help="Use low-memory mode for GPUs with 16GB of memory",
    )
    flags.add_argument(
        "-w", dest="wes_mode", action="store_true",
        help="Use WES mode",
    )
    flags.add_argument(
        "--dry-run", dest="dry_run", action="store_true",
        help="Validate and print the pbrun command without running it",
    )
    flags.add_argument(
        "--doctor", dest="doctor", action="store_true",
        help="Check the runtime environment and exit",
    )
    flags.add_argument(
        "-h", "--help", dest="help", action="store_true",
        help="Print help and exit",
    )
    flags.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # getopt semantics: option parsing stops at the first FASTQ file.
    parser.add_argument(
        "fastq_files",
        nargs=argparse.REMAINDER,
        metavar="fastq",
        help="Paired FASTQ files: read1 read2 [read1 read2 ...]",
    )
    return parser


def _strip_separator(files: list[str]) -> list[str]:
    """Drop a leading ``--`` end-of-options marker from *files*."""
    if files[:1] == ["--"]:
        return files[1:]
    return files


def _config_from_args(args: argparse.Namespace) -> RunConfig:
    """Map parsed options onto an (unvalidated) :class:`RunConfig`."""
    return RunConfig(
        output_path=args.output_path,
        panel_folder=args.panel_folder,
        flowcell_id=args.flowcell_id,
        sample_id=args.sample_id,
        reference_sequence=args.reference_sequence,
        gpackage_path=args.gpackage_path,
        interval_file=args.interval_file,
        low_memory=args.low_memory,
        wes_mode=args.wes_mode,
        fastq_files=tuple(_strip_separator(args.fastq_files)),
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service(pbrun_path: str) -> PipelineService:
    """Instantiate the pipeline service with its infrastructure adapters."""
    from pbdv_wrap.core.pipeline_service import PipelineService
    from pbdv_wrap.infra.filesystem import LocalDirectoryCreator
    from pbdv_wrap.infra.pbrun_runner import PbrunRunner

    return PipelineService(PbrunRunner(), LocalDirectoryCreator(), pbrun_path)


def _handle_run(config: RunConfig, pbrun_path: str) -> int:
    """Create the output tree and run ``pbrun deepvariant_germline``.

    Flow:
    1. Confirm the pbrun executable exists (before touching the filesystem).
    2. Create the bam / logs / QC_stats / variants directories.
    3. Run pbrun in the foreground and wait for it.
    """
    from pbdv_wrap.infra.pbrun_detector import require_pbrun

    require_pbrun(pbrun_path)
    service = _build_service(pbrun_path)
    return service.run(
        config,
        progress_callback=lambda message: console.print(escape(message)),
    )


def _handle_dry_run(config: RunConfig, pbrun_path: str) -> int:
    """Print the directories and command a run would use; change nothing."""
    layout, command = _build_service(pbrun_path).plan(config)
    for kind, path in layout.directories():
        console.print(f"Would create {kind} directory: {escape(str(path))}")
    print(shlex.join(command))
    return exit_codes.SUCCESS


def _handle_doctor(pbrun_path: str, gpackage_path: str) -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from pbdv_wrap.cli.doctor import run_doctor

    return run_doctor(pbrun_path=pbrun_path, gpackage_path=gpackage_path)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the pbdv-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ValidationError
        For any invalid command line; :attr:`hint` carries the usage line.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.help:
        print(parser.format_help(), end="", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if args.doctor:
        return _handle_doctor(args.pbrun_path, args.gpackage_path)

    try:
        config = validate(_config_from_args(args))
    except ValidationError as exc:
        if exc.hint is None:
            exc.hint = parser.format_usage().strip()
        raise

    if args.dry_run:
        return _handle_dry_run(config, args.pbrun_path)

    return _handle_run(config, args.pbrun_path)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except ExternalToolError as exc:
        # pbrun has already reported its own diagnostics on stderr.
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exc.returncode)
    except PbdvWrapError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(escape(exc.hint))
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
