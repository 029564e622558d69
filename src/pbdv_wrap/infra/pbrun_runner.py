"""``subprocess`` backed implementation of :class:`~pbdv_wrap.core.protocols.ToolRunner`.

This module is the **only** place in the codebase that launches the
Parabricks pipeline.  Launch failures are re-raised as
:class:`~pbdv_wrap.exceptions.PbrunNotFoundError`; the tool's own exit
status is returned, not interpreted.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from pbdv_wrap.exceptions import PbrunNotFoundError


class PbrunRunner:
    """Concrete :class:`ToolRunner` that runs ``pbrun`` in the foreground.

    stdout and stderr are inherited so the tool's diagnostics reach the
    operator unmodified.  There is no timeout: a germline run can take
    hours and the wrapper lives exactly as long as the tool.
    """

    def run(self, command: Sequence[str]) -> int:
        """Run *command* without a shell and return its exit status.

        Raises
        ------
        PbrunNotFoundError
            When the executable is missing or not executable.
        """
        try:
            completed = subprocess.run(list(command), check=False)
        except (FileNotFoundError, PermissionError) as exc:
            raise PbrunNotFoundError(
                f"Cannot launch {command[0]}: {exc.strerror or exc}",
                hint="Point --pbrun-path at the pbrun binary.",
            ) from exc
        return completed.returncode
