"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No subprocesses and no filesystem writes.
* No imports from ``cli`` or ``infra``.
"""

from pbdv_wrap.core.invocation import build_command, build_invocation
from pbdv_wrap.core.layout import build_layout
from pbdv_wrap.core.models import InputPair, OutputLayout, RunConfig
from pbdv_wrap.core.pipeline_service import PipelineService
from pbdv_wrap.core.protocols import DirectoryCreator, ToolRunner
from pbdv_wrap.core.validation import normalize_gpackage_path, pair_inputs, validate

__all__: list[str] = [
    "DirectoryCreator",
    "InputPair",
    "OutputLayout",
    "PipelineService",
    "RunConfig",
    "ToolRunner",
    "build_command",
    "build_invocation",
    "build_layout",
    "normalize_gpackage_path",
    "pair_inputs",
    "validate",
]
