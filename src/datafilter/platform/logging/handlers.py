"""Rich logging handler used for console diagnostics.

Where: platform/logging/handlers.py
What: Render log records on standard error without timestamps or source paths.
Why: Warnings and fatal messages are user-facing text, not debug traces.
"""

from __future__ import annotations

import logging
from typing import Any

from typing_extensions import override

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class PlainRichHandler(RichHandler):
    """Rich handler that prints messages verbatim to the error console."""

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        kwargs.setdefault("rich_tracebacks", False)
        super().__init__(
            console=console or Console(stderr=True, soft_wrap=True),
            **kwargs,
        )

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        # Operands and paths may contain brackets; never interpret them as markup.
        return Text(message)


__all__ = ["PlainRichHandler"]
