"""Run-parameter validation and FASTQ pairing.

Checks are fail-fast: the first problem found is raised and nothing
else is inspected.  The only filesystem access is the read-only
interval-file probe.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from pathlib import Path

from pbdv_wrap.core.models import InputPair, RunConfig
from pbdv_wrap.exceptions import (
    InvalidPathError,
    MissingParameterError,
    NoInputError,
    OddInputCountError,
)

# (attribute, flag, description) in the order they are checked.
_REQUIRED_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("output_path", "-o", "the output files path for processing"),
    ("panel_folder", "-p", "the panel folder name"),
    ("flowcell_id", "-f", "the flowcell identifier"),
    ("sample_id", "-s", "the sample identifier"),
    ("reference_sequence", "-r", "the genomic reference sequence .fasta"),
    ("gpackage_path", "-g", "a valid gpackage directory path"),
)


def normalize_gpackage_path(path: str) -> str:
    """Strip trailing slashes from *path*.

    Idempotent: ``/gpackage/`` and ``/gpackage`` both give ``/gpackage``.
    """
    return path.rstrip("/")


def pair_inputs(files: Sequence[str]) -> tuple[InputPair, ...]:
    """Split *files* into read pairs by position.

    Elements 1, 3, 5, … are ``read1`` and each following element is the
    matching ``read2``.  Input order is preserved.

    Raises
    ------
    NoInputError
        When *files* is empty.
    OddInputCountError
        When *files* has an odd number of elements.
    """
    if not files:
        raise NoInputError("No .fastq files supplied.")
    if len(files) % 2 != 0:
        raise OddInputCountError(
            "FASTQ files must be paired. "
            f"Odd number of files passed to program ({len(files)})",
        )
    return tuple(
        InputPair(read1=files[i], read2=files[i + 1])
        for i in range(0, len(files), 2)
    )


def validate(config: RunConfig) -> RunConfig:
    """Validate *config* and return a normalised copy.

    Order of checks: required parameters (``-o``, ``-p``, ``-f``, ``-s``,
    ``-r``, ``-g``), the interval file, then the FASTQ pairing.

    Raises
    ------
    MissingParameterError
        For the first empty required parameter.
    InvalidPathError
        When ``-L`` names something that is not a regular file.
    NoInputError, OddInputCountError
        When the FASTQ files cannot be paired.
    """
    for field, flag, description in _REQUIRED_FIELDS:
        if not getattr(config, field):
            raise MissingParameterError(
                f"you must supply {description} ({flag})",
                field=field,
                flag=flag,
            )

    if config.interval_file and not Path(config.interval_file).is_file():
        raise InvalidPathError(
            "you must supply a valid interval file that exists: "
            f"{config.interval_file}",
        )

    pair_inputs(config.fastq_files)

    return dataclasses.replace(
        config,
        gpackage_path=normalize_gpackage_path(config.gpackage_path),
    )
