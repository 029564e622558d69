"""Infrastructure: Parabricks ``pbrun`` detection.

The executable normally lives at a fixed install path inside the
Parabricks container; a bare command name is looked up on PATH.

Rules
-----
* Detection only — nothing is executed here.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from pbdv_wrap.exceptions import PbrunNotFoundError

DEFAULT_PBRUN_PATH: str = "/usr/local/parabricks/pbrun"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PbrunStatus:
    """Result of a ``pbrun`` detection probe.

    Attributes
    ----------
    found : bool
        Whether an executable file was located.
    path : Path | None
        Resolved path to the binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    """

    found: bool
    path: Path | None
    version_hint: str


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_pbrun(executable: str = DEFAULT_PBRUN_PATH) -> PbrunStatus:
    """Probe for the ``pbrun`` binary named by *executable*.

    Returns a :class:`PbrunStatus` regardless of whether it is present —
    the caller decides whether to abort or merely warn.
    """
    if os.sep in executable:
        candidate = Path(executable)
        located = (
            str(candidate)
            if candidate.is_file() and os.access(candidate, os.X_OK)
            else None
        )
    else:
        located = shutil.which(executable)

    if located is not None:
        resolved = Path(located).resolve()
        return PbrunStatus(
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
        )

    return PbrunStatus(found=False, path=None, version_hint="not found")


def require_pbrun(executable: str = DEFAULT_PBRUN_PATH) -> Path:
    """Locate ``pbrun`` or raise :class:`PbrunNotFoundError`."""
    status = detect_pbrun(executable)
    if not status.found or status.path is None:
        raise PbrunNotFoundError(
            f"Parabricks executable not found: {executable}",
            hint=(
                "Run inside the Parabricks container, or point --pbrun-path "
                "at the pbrun binary."
            ),
        )
    return status.path
