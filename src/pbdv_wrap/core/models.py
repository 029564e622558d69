"""Domain models for pbdv-wrap.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_GPACKAGE_PATH: str = "/gpackage"
"""Mount point of the genomics package inside the Parabricks container."""


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunConfig:
    """Every parameter of a single DeepVariant germline run.

    Built once from the command line and passed explicitly to each
    downstream step.  Validation returns a *new* instance rather than
    mutating this one.
    """

    output_path: str
    """Root directory under which the sample tree is created (``-o``)."""

    panel_folder: str
    """Common folder shared by samples of the same panel (``-p``)."""

    flowcell_id: str
    """Flowcell identifier (``-f``)."""

    sample_id: str
    """Sample accession identifier (``-s``)."""

    reference_sequence: str
    """Path to the reference ``.fasta`` as seen by ``pbrun`` (``-r``)."""

    gpackage_path: str = DEFAULT_GPACKAGE_PATH
    """Genomics package directory (``-g``)."""

    interval_file: str | None = None
    """Optional interval file restricting the called regions (``-L``)."""

    low_memory: bool = False
    """Run ``pbrun`` in low-memory mode for 16GB GPUs (``-l``)."""

    wes_mode: bool = False
    """Use the whole-exome model (``-w``)."""

    fastq_files: tuple[str, ...] = ()
    """Positional FASTQ paths, in command-line order."""


# ---------------------------------------------------------------------------
# Paired-end input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InputPair:
    """One paired-end FASTQ set."""

    read1: str
    read2: str


# ---------------------------------------------------------------------------
# Output directory tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OutputLayout:
    """Derived output paths for one sample.

    ``sample_dir`` is ``{output}/{flowcell}/{panel}/{sample}``; the other
    four fields are its fixed subdirectories.
    """

    sample_dir: Path
    bam_dir: Path
    logs_dir: Path
    qc_dir: Path
    variants_dir: Path

    def directories(self) -> tuple[tuple[str, Path], ...]:
        """Return ``(kind, path)`` for each directory, in creation order."""
        return (
            ("bam", self.bam_dir),
            ("logs", self.logs_dir),
            ("qc", self.qc_dir),
            ("variants", self.variants_dir),
        )
