"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``-h``, ``--version``) remain
functional even when Rich is not installed.  All output targets stderr;
stdout belongs to ``pbrun``.
"""

from __future__ import annotations

import sys
from typing import Any

from pbdv_wrap.exceptions import PbdvWrapError


class _RichUnavailable(PbdvWrapError):
	"""Raised internally when Rich cannot be imported."""


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``_RichUnavailable``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise _RichUnavailable(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def escape(text: str) -> str:
	"""Escape Rich markup in user-supplied *text*.

	Without Rich nothing interprets markup, so *text* is returned as is.
	"""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except _RichUnavailable:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
