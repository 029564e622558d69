"""Core pipeline service — orchestrates a single DeepVariant run.

The service owns the step ordering (layout → directories → invocation)
and delegates every side effect to injected adapters satisfying
:mod:`pbdv_wrap.core.protocols`.

Guarantees
----------
* No ``print()`` — progress messages go through ``progress_callback``.
* No subprocess import.
* Directories are created before the tool is launched; a creation
  failure aborts the run.
"""

from __future__ import annotations

from collections.abc import Callable

from pbdv_wrap.core.invocation import build_command, build_invocation
from pbdv_wrap.core.layout import build_layout
from pbdv_wrap.core.models import OutputLayout, RunConfig
from pbdv_wrap.core.protocols import DirectoryCreator, ToolRunner
from pbdv_wrap.exceptions import ExternalToolError


def _exit_status(returncode: int) -> int:
    """Map a ``subprocess`` return code to a process exit status.

    Negative values mean the child was killed by a signal and become
    ``128 + signal``, as a shell would report them.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


class PipelineService:
    """Drives validation output through directory setup and ``pbrun``.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ToolRunner` protocol.
    directory_creator:
        Any object satisfying the :class:`DirectoryCreator` protocol.
    executable:
        Path of the ``pbrun`` binary placed first in the command.
    """

    def __init__(
        self,
        runner: ToolRunner,
        directory_creator: DirectoryCreator,
        executable: str,
    ) -> None:
        self._runner: ToolRunner = runner
        self._directory_creator: DirectoryCreator = directory_creator
        self._executable: str = executable

    def plan(self, config: RunConfig) -> tuple[OutputLayout, list[str]]:
        """Return the layout and full command for *config* without side effects."""
        layout = build_layout(config)
        command = build_command(self._executable, build_invocation(config, layout))
        return layout, command

    def run(
        self,
        config: RunConfig,
        *,
        progress_callback: Callable[[str], None] | None = None,
    ) -> int:
        """Create the output tree and run the pipeline for *config*.

        *config* must already have been validated.

        Returns
        -------
        int
            ``0`` when ``pbrun`` succeeded.

        Raises
        ------
        DirectoryCreationError
            When the output tree cannot be created.  ``pbrun`` is not run.
        ExternalToolError
            When ``pbrun`` exits with a nonzero status.
        """
        report = progress_callback or (lambda _message: None)
        layout, command = self.plan(config)

        report("Creating output directory structure")
        for kind, path in layout.directories():
            report(f"Creating {kind} directory: {path}")
            self._directory_creator.create(path)
        report("Directories created successfully")

        report("Running Nvidia Clara Parabricks DeepVariant Pipeline")
        returncode = self._runner.run(command)
        if returncode != 0:
            status = _exit_status(returncode)
            raise ExternalToolError(
                f"pbrun {command[1]} exited with status {status}",
                returncode=status,
                hint=f"See {layout.logs_dir} for the Parabricks log.",
            )
        return returncode
