"""Fixed-capacity string helpers: values never exceed ``size - 1`` bytes."""

from __future__ import annotations

STR24 = 24
STR40 = 40
STR64 = 64
STR80 = 80


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"fixed string size must be at least 1, got {size}")


def _terminate(text: str) -> str:
    """Cut ``text`` at its first NUL character."""
    return text.split("\0", 1)[0]


def _clip(text: str, size: int) -> str:
    """Keep at most ``size - 1`` UTF-8 bytes, never splitting a character."""
    raw = text.encode("utf-8")[: size - 1]
    return raw.decode("utf-8", errors="ignore")


def fixed_str(text: str, size: int) -> str:
    """Return ``text`` as it would be stored in a buffer of ``size`` bytes."""
    _check_size(size)
    return _clip(_terminate(text), size)


def fixed_cat(base: str, text: str, size: int) -> str:
    """Append ``text`` to ``base`` within a buffer of ``size`` bytes."""
    _check_size(size)
    return _clip(_terminate(base) + _terminate(text), size)


def fixed_fmt(size: int, fmt: str, *args: object) -> str:
    """Format printf-style into a buffer of ``size`` bytes."""
    _check_size(size)
    return _clip(_terminate(fmt % args), size)