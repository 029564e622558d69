"""Construction of the ``pbrun deepvariant_germline`` command line.

The command is always an explicit list of discrete tokens handed to a
process launcher that performs no shell interpretation.
"""

from __future__ import annotations

from collections.abc import Sequence

from pbdv_wrap.core.models import OutputLayout, RunConfig
from pbdv_wrap.core.validation import pair_inputs

PIPELINE_SUBCOMMAND: str = "deepvariant_germline"


def build_invocation(config: RunConfig, layout: OutputLayout) -> list[str]:
    """Return the ``deepvariant_germline`` arguments for *config*.

    Each read pair contributes ``--in-fq <read1> <read2>``: the flag
    precedes only the first file of the pair, which is the grammar
    ``pbrun`` expects.
    """
    sample_id = config.sample_id
    arguments: list[str] = []

    if config.wes_mode:
        arguments.append("--use-wes-model")
    if config.low_memory:
        arguments.append("--low-memory")

    arguments += [
        "--consider-strand-bias",
        "--ref", config.reference_sequence,
        "--out-bam", f"{layout.bam_dir}/{sample_id}.bam",
        "--out-duplicate-metrics",
        f"{layout.qc_dir}/{sample_id}_duplicate_metrics.txt",
        "--out-variants",
        f"{layout.variants_dir}/variants_deepvariant_caller_{sample_id}.vcf",
        "--logfile",
        f"{layout.logs_dir}/parabricks_deepvariant_germline_{sample_id}.log",
    ]

    if config.interval_file:
        arguments += ["--interval", config.interval_file]

    for pair in pair_inputs(config.fastq_files):
        arguments += ["--in-fq", pair.read1, pair.read2]

    return arguments


def build_command(executable: str, arguments: Sequence[str]) -> list[str]:
    """Prefix *arguments* with the executable and pipeline sub-command."""
    return [executable, PIPELINE_SUBCOMMAND, *arguments]
