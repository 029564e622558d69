"""Shared pytest fixtures and configuration for the pbdv-wrap test suite.

Guidelines
----------
* No test launches Parabricks; ``pbrun`` is mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Real directories are only created under ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def interval_file(tmp_path: Path) -> Path:
    path = tmp_path / "foo.bed"
    path.write_text("chr1\t100\t200\n")
    return path


@pytest.fixture
def required_args(tmp_path: Path) -> list[str]:
    """A complete set of required options rooted in ``tmp_path``."""
    return [
        "-o", str(tmp_path / "out"),
        "-p", "PANEL",
        "-f", "FC1",
        "-s", "S1",
        "-r", "/ref.fasta",
    ]
