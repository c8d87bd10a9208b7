"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Markup, emoji codes and highlighting are disabled in :meth:`_ConsoleProxy.print`,
so ``[1, 2]`` never turns into a style tag; Rich still expands tabs and
drops carriage returns.  Command data (evaluated values, evaluation
failure messages) goes through :meth:`_ConsoleProxy.write`, which is a
plain ``print`` and leaves the text byte-for-byte intact.
"""

from __future__ import annotations

import sys
from typing import Any

from tact_cli.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain print."""
		text = " ".join(str(obj) for obj in objects)
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(text, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(
			text,
			style=style,
			markup=False,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)

	def write(self, *objects: object) -> None:
		"""Print *objects* unrendered, exactly as ``print`` would."""
		print(*objects, file=sys.stderr if self._stderr else sys.stdout)


console = _ConsoleProxy(stderr=False)
error_console = _ConsoleProxy(stderr=True)
