"""String helpers: C-style comparison, number parsing, lookup tables,
bounded buffers, tokenizing, line feeds and key/value parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

T = TypeVar("T")

_UINT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63

DEFAULT_BUFFER_SIZE = 256
DEFAULT_MAX_TOKENS = 32


def _cstr(text: str) -> str:
    """Cut ``text`` at its first NUL character."""
    return text.split("\0", 1)[0]


def _strncmp_eq(lhs: str, rhs: str, n: int) -> bool:
    """True when the first ``n`` characters of two C strings agree."""
    return _cstr(lhs)[:n] == _cstr(rhs)[:n]


def equals(lhs: str, rhs: str, n: int = 0) -> bool:
    """Compare two strings whole, or only their first ``n`` characters when ``n > 0``."""
    if n <= 0:
        return _cstr(lhs) == _cstr(rhs)
    return _strncmp_eq(lhs, rhs, n)


def _parse_digits(digits: str, original: str) -> int:
    value = 0
    for c in digits:
        if not "0" <= c <= "9":
            raise ValueError(f"not a decimal number: {original!r}")
        value = value * 10 + (ord(c) - ord("0"))
    return value


def to_unsigned(s: str) -> int:
    """Parse an unsigned decimal number; wraps to 64 bits. Empty text gives 0."""
    return _parse_digits(s, s) & _UINT64_MASK


def to_signed(s: str) -> int:
    """Parse a decimal number with an optional leading ``-``; wraps to 64 bits."""
    negative = s.startswith("-")
    value = _parse_digits(s[1:] if negative else s, s)
    if negative:
        value = -value
    value &= _UINT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


class Lut:
    """A 256-entry character translation table, identity by default."""

    SIZE = 256

    def __init__(self, other: Optional[Lut] = None) -> None:
        if other is None:
            self.chars: List[str] = [chr(i) for i in range(self.SIZE)]
        else:
            self.chars = list(other.chars)

    @staticmethod
    def _clamp(i: int) -> int:
        return 0 if i < 0 else 255 if i > 255 else i

    def __getitem__(self, i: int) -> str:
        return self.chars[self._clamp(i)]

    def __setitem__(self, i: int, c: str) -> None:
        self.chars[self._clamp(i)] = c

    def __call__(self, c: str) -> str:
        code = ord(c)
        return self.chars[code] if code < self.SIZE else c

    def copy(self) -> Lut:
        return Lut(self)

    def delimit(self, delims: str) -> None:
        """Map every character in ``delims`` to NUL."""
        for c in _cstr(delims):
            code = ord(c)
            if code < self.SIZE:
                self.chars[code] = "\0"

    def upper(self) -> None:
        """Map lower-case ASCII letters to upper case."""
        for code in range(ord("a"), ord("z") + 1):
            self.chars[code] = chr(code - ord("a") + ord("A"))

    def lower(self) -> None:
        """Map upper-case ASCII letters to lower case."""
        for code in range(ord("A"), ord("Z") + 1):
            self.chars[code] = chr(code - ord("A") + ord("a"))


class Buffer:
    """Text held in a buffer of ``size`` slots, so at most ``size - 1`` characters."""

    def __init__(self, text: str, size: int = DEFAULT_BUFFER_SIZE, lut: Optional[Lut] = None) -> None:
        if size < 1:
            raise ValueError(f"buffer size must be at least 1, got {size}")
        self.size = size
        self.init(text, lut)

    def init(self, text: str, lut: Optional[Lut] = None) -> None:
        """Replace the contents with ``text``, translated through ``lut`` if given."""
        clipped = text[: self.size - 1]
        self._chars = "".join(lut(c) for c in clipped) if lut is not None else clipped

    @property
    def text(self) -> str:
        """Contents as a string, up to the first NUL."""
        return _cstr(self._chars)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def length(self) -> int:
        return len(self._chars)

    def __getitem__(self, i: int) -> str:
        i %= self.size
        return self._chars[i] if i < len(self._chars) else "\0"

    def at(self, n: int) -> str:
        """Contents from position ``n``, clamped into the text."""
        if not self._chars:
            return ""
        n = max(0, min(n, len(self._chars) - 1))
        return _cstr(self._chars[n:])

    def skip_over(self, offset: int, c: str) -> Optional[str]:
        """Contents after any run of ``c`` starting at ``offset``; None if only ``c`` remains."""
        length = len(self._chars)
        if not length:
            return None
        o = max(0, min(offset, length - 1))
        while o < length and self._chars[o] == c:
            o += 1
        if o == length:
            return None
        return _cstr(self._chars[o:])

    def begins_with(self, prefix: str) -> bool:
        """True when the contents start with ``prefix``."""
        return self._chars.startswith(_cstr(prefix))

    def index_of(self, c: str, start: int = 0) -> int:
        """Position of the first ``c`` at or after ``start``, or -1."""
        return self._chars.find(c, max(0, start))

    def equals(self, s: str, n: Optional[int] = None) -> bool:
        """Compare the first ``n`` characters (all by default) with ``s``."""
        if n is None:
            n = self.size - 1
        return _strncmp_eq(s, self._chars, n)

    def clip(self, sub: str, n: int = 0) -> None:
        """Cut the contents at the first place ``sub`` matches.

        With ``n <= 0`` the rest of the text must equal ``sub``; otherwise
        only the first ``n`` characters are compared.
        """
        for i in range(len(self._chars)):
            rest = self._chars[i:]
            matched = _cstr(rest) == _cstr(sub) if n <= 0 else _strncmp_eq(rest, sub, n)
            if matched:
                self._chars = self._chars[:i]
                return


class Tokenizer:
    """Splits text on delimiter characters into at most ``max_tokens`` tokens."""

    def __init__(self, max_length: int = DEFAULT_BUFFER_SIZE, max_tokens: int = DEFAULT_MAX_TOKENS) -> None:
        if max_length < 1 or max_tokens < 0:
            raise ValueError("tokenizer limits must be positive")
        self.max_length = max_length
        self.max_tokens = max_tokens
        self.clear()

    def clear(self) -> None:
        """Forget any tokens."""
        self._str = ""
        self._tokens: List[str] = []

    @property
    def count(self) -> int:
        return len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def tokenize(self, text: str, delims: str) -> None:
        """Split ``text`` on any character of ``delims``, dropping empty runs."""
        lut = Lut()
        lut.delimit(delims)
        self.clear()
        clipped = _cstr(text)[: self.max_length - 1]
        self._str = "".join(lut(c) for c in clipped)
        self._tokens = [t for t in self._str.split("\0") if t][: self.max_tokens]

    def to_list(self) -> List[str]:
        """The tokens in order."""
        return list(self._tokens)

    def __getitem__(self, i: int) -> str:
        if 0 <= i < len(self._tokens):
            return self._tokens[i]
        return _cstr(self._str)

    def contains(self, tok: str) -> int:
        """Index of the token equal to ``tok``, or -1."""
        for i, token in enumerate(self._tokens):
            if _strncmp_eq(token, tok, self.max_length):
                return i
        return -1


@dataclass
class LineInfo:
    no: int = -1
    buffer: Optional[Buffer] = None


CharSource = Union[str, Callable[[Any], str]]


class LineFeed:
    """Reads lines, one at a time, from a string or a character callback."""

    def __init__(
        self,
        source: CharSource,
        param: Any = None,
        lut: Optional[Lut] = None,
        size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        if size < 1:
            raise ValueError(f"line size must be at least 1, got {size}")
        if isinstance(source, str):
            self._text: Optional[str] = source
            self._pos = 0
            self._get_char: Optional[Callable[[Any], str]] = None
        elif callable(source):
            self._text = None
            self._get_char = source
        else:
            raise TypeError("source must be a string or a callable")
        self._param = param
        self.lut = lut
        self.size = size
        self.lines: List[Buffer] = []
        self.line_count = 0

    def _next_char(self) -> str:
        if self._text is not None:
            if self._pos >= len(self._text):
                return "\0"
            c = self._text[self._pos]
            if c != "\0":
                self._pos += 1
            return c
        c = self._get_char(self._param)
        return c if c else "\0"

    def get_line(self) -> Optional[LineInfo]:
        """Next line, with a newline turned into a trailing space; None at the end."""
        chars: List[str] = []
        for _ in range(self.size - 1):
            c = self._next_char()
            if c == "\0":
                break
            if c == "\n":
                chars.append(" ")
                break
            chars.append(c)
        if not chars:
            return None
        buffer = Buffer("".join(chars), self.size, self.lut)
        self.lines.append(buffer)
        info = LineInfo(self.line_count, buffer)
        self.line_count += 1
        return info

    def __iter__(self) -> Iterator[LineInfo]:
        while (info := self.get_line()) is not None:
            yield info


TokenMatcher = Union[str, Callable[[str], bool]]

_NO_FALLBACK = object()


def _token_matches(matcher: TokenMatcher, token: str) -> bool:
    if isinstance(matcher, str):
        return equals(token, matcher)
    return bool(matcher(token))


class KVParse(Generic[T]):
    """Matches a key against aliases and maps a value token to a value.

    A supported value that is callable is called with the value token and
    returns the parsed value; raising ``ValueError`` marks the token invalid.
    """

    def __init__(self, fallback: Any = _NO_FALLBACK) -> None:
        self._fallback = fallback
        self.aliases: List[TokenMatcher] = []
        self.values: List[Tuple[TokenMatcher, Any]] = []

    @property
    def fallback(self) -> Optional[T]:
        return None if self._fallback is _NO_FALLBACK else self._fallback

    def key_alias(self, key: TokenMatcher) -> None:
        """Accept ``key`` (a string or a predicate) as a name for this setting."""
        self.aliases.append(key)

    def support_value(self, name: TokenMatcher, value: Any) -> None:
        """Accept value tokens matching ``name``, resolving to ``value``."""
        self.values.append((name, value))

    def parse_tokens(self, key_token: str, value_token: str) -> Tuple[bool, bool, Optional[T]]:
        """Return (key matched, value resolved, value or fallback)."""
        output = self.fallback
        if not any(_token_matches(alias, key_token) for alias in self.aliases):
            return False, False, output
        for name, value in self.values:
            if _token_matches(name, value_token):
                if callable(value):
                    try:
                        return True, True, value(value_token)
                    except ValueError:
                        return True, False, output
                return True, True, value
        return True, False, output