"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system and the
Parabricks ``pbrun`` executable.  Every raw ``OSError`` must be caught
here and re-raised as a :class:`~pbdv_wrap.exceptions.PbdvWrapError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from pbdv_wrap.infra.filesystem import LocalDirectoryCreator
from pbdv_wrap.infra.pbrun_detector import (
    DEFAULT_PBRUN_PATH,
    PbrunStatus,
    detect_pbrun,
    require_pbrun,
)
from pbdv_wrap.infra.pbrun_runner import PbrunRunner

__all__: list[str] = [
    "DEFAULT_PBRUN_PATH",
    "LocalDirectoryCreator",
    "PbrunRunner",
    "PbrunStatus",
    "detect_pbrun",
    "require_pbrun",
]
