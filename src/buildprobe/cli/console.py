"""Diagnostic console for stderr, with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.  Without Rich, messages fall back to
plain ``print`` on stderr with markup tags removed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from buildprobe.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan)(?: [a-z]+)?\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr.

	Soft wrapping keeps long paths on one line when stderr is captured,
	and emoji codes such as ``:rocket:`` in paths are printed verbatim.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True, emoji=False)


def escape(text: str) -> str:
	"""Escape user-supplied *text* so brackets are not read as markup."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Remove the console's markup tags from *text*."""
	return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print.

		Pass ``markup=False`` for text that may contain literal brackets.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			if markup:
				objects = tuple(
					strip_markup(obj) if isinstance(obj, str) else obj
					for obj in objects
				)
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, markup=markup, highlight=False)


console = _ConsoleProxy()
