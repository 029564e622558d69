"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class DirectoryCreator(Protocol):
    """Contract for creating the output directory tree."""

    def create(self, path: Path) -> None:
        """Create *path* and any missing ancestors.

        Must be idempotent: an existing directory is not an error.

        Raises
        ------
        DirectoryCreationError
            On permission or filesystem failures.
        """
        ...  # pragma: no cover


class ToolRunner(Protocol):
    """Contract for launching the external pipeline executable."""

    def run(self, command: Sequence[str]) -> int:
        """Run *command* to completion and return its exit status.

        Standard output and error are inherited, never captured.

        Raises
        ------
        PbrunNotFoundError
            When the executable cannot be launched at all.
        """
        ...  # pragma: no cover
