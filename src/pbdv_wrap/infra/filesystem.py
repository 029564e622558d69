"""Infrastructure: output directory creation.

Rules
-----
* Idempotent — an existing directory is never an error.
* Every ``OSError`` is re-raised as :class:`DirectoryCreationError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from pathlib import Path

from pbdv_wrap.exceptions import DirectoryCreationError


class LocalDirectoryCreator:
    """Concrete :class:`~pbdv_wrap.core.protocols.DirectoryCreator` for the local filesystem."""

    def create(self, path: Path) -> None:
        """Create *path* with any missing parents."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(
                f"Cannot create directory {path}: {exc.strerror or exc}",
                hint="Check that the output path is writable and not a file.",
            ) from exc
