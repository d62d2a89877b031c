"""Diagnostics channel with strict stderr discipline.

The library never writes to stdout: translated data is returned to the
caller, and the request/response trace goes to stderr through a Rich
:class:`~rich.console.Console`.

* **Colour control** -- respects ``NO_COLOR`` and ``TERM=dumb``.
* **Verbosity** -- :meth:`~OutputManager.debug` only prints when the
  manager is verbose; a default manager is silent.

The module exposes two layers:

1. :class:`OutputManager` -- a stateful object holding the stderr console
   and the verbose flag.  An embedding application installs one via
   :func:`set_output` (for example a verbose one while debugging requests).
2. :func:`get_output` -- returns the installed manager, lazily creating a
   non-verbose default, so the clients can trace without being handed a
   manager.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Central manager for library diagnostics on stderr.

    Args:
        no_color: Disable all colour and Rich markup.
        verbose: Enable debug-level messages (request/response trace).
        file: Stream to write to; defaults to ``sys.stderr``.
    """

    def __init__(
        self,
        no_color: bool = False,
        verbose: bool = False,
        file: Optional[TextIO] = None,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._verbose = verbose
        self._file = file
        self._stderr = Console(
            file=file or sys.stderr,
            no_color=self._no_color,
            stderr=file is None,
            highlight=False,
        )

    @property
    def is_verbose(self) -> bool:
        """Whether verbose mode is enabled."""
        return self._verbose

    def debug(self, message: str) -> None:
        """Print a debug message. Only shown when ``verbose`` is active.

        Args:
            message: The debug text (prefixed with ``[debug]`` on output).
        """
        if not self._verbose:
            return
        if self._no_color:
            print(f"[debug] {message}", file=self._file or sys.stderr, flush=True)
        else:
            self._stderr.print(f"[dim]\\[debug] {escape(message)}[/dim]")


def _should_disable_color() -> bool:
    """Check if color should be disabled.

    Returns True when NO_COLOR env var is set (any value) or TERM=dumb.
    """
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False


# ------------------------------------------------------------------ #
# Global output instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager` instance.

    If no instance has been installed via :func:`set_output`, a default
    non-verbose ``OutputManager`` is created lazily.

    Returns:
        The active :class:`OutputManager`.
    """
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager` instance.

    Args:
        output: The configured manager to install.
    """
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager` to ``None``.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _output
    _output = None
