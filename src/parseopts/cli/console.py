"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
``--help`` output and parse errors still reach the user when Rich is
not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from parseopts.exceptions import ParseOptionsError


class RichUnavailableError(ParseOptionsError):
	"""Raised when Rich is needed but cannot be imported."""


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``RichUnavailableError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise RichUnavailableError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	User-controlled text goes through :meth:`write`, which bypasses
	Rich markup entirely (argv echo, usage strings).
	"""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except RichUnavailableError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, highlight=False, soft_wrap=True)

	def write(self, text: str) -> None:
		"""Write *text* exactly as given, without any Rich processing."""
		sys.stderr.write(text)
		sys.stderr.flush()


console = _ConsoleProxy()
