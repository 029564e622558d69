"""Tests for pbrun command construction (core/invocation.py).

Coverage:
* Fixed token order and derived output file names.
* Optional ``--use-wes-model`` / ``--low-memory`` / ``--interval`` tokens.
* ``--in-fq`` appears only before the first file of each pair.
* ``build_command`` prefixes executable and sub-command.
"""

from __future__ import annotations

from pbdv_wrap.core.invocation import PIPELINE_SUBCOMMAND, build_command, build_invocation
from pbdv_wrap.core.layout import build_layout
from pbdv_wrap.core.models import RunConfig


def _make_config(**overrides: object) -> RunConfig:
    defaults: dict[str, object] = {
        "output_path": "/out",
        "panel_folder": "PANEL",
        "flowcell_id": "FC1",
        "sample_id": "S1",
        "reference_sequence": "/ref.fasta",
        "fastq_files": ("a_1.fastq.gz", "a_2.fastq.gz"),
    }
    defaults.update(overrides)
    return RunConfig(**defaults)  # type: ignore[arg-type]


def _invocation(**overrides: object) -> list[str]:
    config = _make_config(**overrides)
    return build_invocation(config, build_layout(config))


# ---------------------------------------------------------------------------
# Fixed arguments
# ---------------------------------------------------------------------------

class TestFixedArguments:
    def test_full_vector_without_options(self) -> None:
        assert _invocation() == [
            "--consider-strand-bias",
            "--ref", "/ref.fasta",
            "--out-bam", "/out/FC1/PANEL/S1/bam/S1.bam",
            "--out-duplicate-metrics",
            "/out/FC1/PANEL/S1/QC_stats/S1_duplicate_metrics.txt",
            "--out-variants",
            "/out/FC1/PANEL/S1/variants/variants_deepvariant_caller_S1.vcf",
            "--logfile",
            "/out/FC1/PANEL/S1/logs/parabricks_deepvariant_germline_S1.log",
            "--in-fq", "a_1.fastq.gz", "a_2.fastq.gz",
        ]

    def test_tokens_are_strings(self) -> None:
        assert all(isinstance(token, str) for token in _invocation())

    def test_absolute_sample_id_keeps_outputs_under_root(self) -> None:
        args = _invocation(sample_id="/S1")
        for flag in ("--out-bam", "--out-duplicate-metrics", "--out-variants", "--logfile"):
            assert args[args.index(flag) + 1].startswith("/out/FC1/PANEL/S1/")

    def test_path_with_spaces_stays_one_token(self) -> None:
        args = _invocation(reference_sequence="/my refs/hg38.fasta")
        assert args[args.index("--ref") + 1] == "/my refs/hg38.fasta"


# ---------------------------------------------------------------------------
# Optional flags
# ---------------------------------------------------------------------------

class TestOptionalFlags:
    def test_wes_and_low_memory_order(self) -> None:
        args = _invocation(wes_mode=True, low_memory=True)
        assert args[:3] == [
            "--use-wes-model",
            "--low-memory",
            "--consider-strand-bias",
        ]

    def test_wes_only(self) -> None:
        args = _invocation(wes_mode=True)
        assert args[:2] == ["--use-wes-model", "--consider-strand-bias"]
        assert "--low-memory" not in args

    def test_low_memory_only(self) -> None:
        args = _invocation(low_memory=True)
        assert args[:2] == ["--low-memory", "--consider-strand-bias"]
        assert "--use-wes-model" not in args

    def test_no_interval_token_by_default(self) -> None:
        assert "--interval" not in _invocation()

    def test_interval_appears_once(self) -> None:
        args = _invocation(interval_file="foo.bed")
        assert args.count("--interval") == 1
        assert args[args.index("--interval") + 1] == "foo.bed"

    def test_interval_precedes_inputs(self) -> None:
        args = _invocation(interval_file="foo.bed")
        assert args.index("--interval") < args.index("--in-fq")
        assert args.index("--interval") > args.index("--logfile")


# ---------------------------------------------------------------------------
# Paired inputs
# ---------------------------------------------------------------------------

class TestPairedInputs:
    def test_in_fq_only_before_first_file_of_each_pair(self) -> None:
        args = _invocation(
            fastq_files=(
                "a_1.fastq.gz", "a_2.fastq.gz", "b_1.fastq.gz", "b_2.fastq.gz",
            ),
        )
        assert args[-6:] == [
            "--in-fq", "a_1.fastq.gz", "a_2.fastq.gz",
            "--in-fq", "b_1.fastq.gz", "b_2.fastq.gz",
        ]
        assert args.count("--in-fq") == 2

    def test_pair_order_is_preserved(self) -> None:
        files = tuple(f"r{i}.fq" for i in range(6))
        args = _invocation(fastq_files=files)
        tail = args[args.index("--in-fq"):]
        assert [token for token in tail if token != "--in-fq"] == list(files)


# ---------------------------------------------------------------------------
# build_command
# ---------------------------------------------------------------------------

class TestBuildCommand:
    def test_prefixes_executable_and_subcommand(self) -> None:
        command = build_command("/usr/local/parabricks/pbrun", ["--ref", "x"])
        assert command == [
            "/usr/local/parabricks/pbrun",
            "deepvariant_germline",
            "--ref",
            "x",
        ]

    def test_subcommand_constant(self) -> None:
        assert PIPELINE_SUBCOMMAND == "deepvariant_germline"
