"""Allow ``python -m pbdv_wrap`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m pbdv_wrap`` behaves identically to the ``pbdv-wrap``
console script.
"""

from __future__ import annotations

from pbdv_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
