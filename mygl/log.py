"""Prefixed log output routed through a user-supplied callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

LogFunc = Callable[[str], None]

PREFIX = "[MYGL] "


@dataclass
class _Sink:
    func: Optional[LogFunc] = None

    def emit(self, text: str) -> None:
        if self.func is not None:
            self.func(PREFIX + text)


_sink = _Sink()


def set_log_func(func: Optional[LogFunc]) -> None:
    """Install the callback that receives log lines; ``None`` silences logging."""
    _sink.func = func


def logout(fmt: str, *args: object) -> None:
    """Log a printf-style formatted message followed by a newline."""
    if _sink.func is None:
        return
    _sink.emit((fmt % args) + "\n")


def logout2(text: str, newline: bool = True) -> None:
    """Log ``text`` verbatim, optionally followed by a newline."""
    if _sink.func is None:
        return
    _sink.emit(text + ("\n" if newline else ""))


def logout_no_newline(fmt: str, *args: object) -> None:
    """Log a printf-style formatted message without a trailing newline."""
    if _sink.func is None:
        return
    _sink.emit(fmt % args)