"""Reading and writing of simple ``key = value`` configuration files."""

from __future__ import annotations

import re
from typing import IO, Any, Callable, Iterator, Optional

_WHITESPACE = " \n\t\v\r\f"
_FALSE_WORDS = frozenset({"FALSE", "F", "NO", "N", "0", "NONE"})
_INT_PREFIX = re.compile(r"[ \n\t\v\r\f]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \n\t\v\r\f]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


class ConfigKeyError(KeyError):
    """Raised when a required key is not present in a configuration."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


def parse_bool(text: str) -> bool:
    """Interpret FALSE, F, NO, N, 0 and NONE (any case) as false, else true."""
    return text.upper() not in _FALSE_WORDS


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def _convert(text: str, kind: Callable[[str], Any]) -> Any:
    if kind is str:
        return text
    if kind is bool:
        return parse_bool(text)
    if kind is int:
        match = _INT_PREFIX.match(text)
        return int(match.group(1)) if match else 0
    if kind is float:
        match = _FLOAT_PREFIX.match(text)
        return float(match.group(1)) if match else 0.0
    return kind(text)


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class ConfigFile:
    """Named string values read from a configuration source.

    Values may span several lines; a blank line, a line holding a key, the
    end of input or the sentry ends a value.  Text after the comment marker
    is ignored.
    """

    def __init__(
        self, delimiter: str = "=", comment: str = "#", sentry: str = ""
    ) -> None:
        self.delimiter = delimiter
        self.comment = comment
        self.sentry = sentry
        self._contents: dict[str, str] = {}

    @classmethod
    def from_file(
        cls,
        filename: str,
        delimiter: str = "=",
        comment: str = "#",
        sentry: str = "EndConfigFile",
    ) -> "ConfigFile":
        """Load a configuration from the named file."""
        config = cls(delimiter, comment, sentry)
        with open(filename, encoding="utf-8") as stream:
            config.load(stream)
        return config

    def _strip_comment(self, line: str) -> str:
        position = line.find(self.comment)
        return line if position < 0 else line[:position]

    def _has_sentry(self, line: str) -> bool:
        return bool(self.sentry) and self.sentry in line

    def load(self, stream: IO[str]) -> None:
        """Read keys and values from a text stream, keeping inner whitespace."""
        lines: Iterator[str] = (raw.rstrip("\n") for raw in stream)
        pending = ""
        while True:
            if pending:
                line, pending = pending, ""
            else:
                next_line = next(lines, None)
                if next_line is None:
                    return
                line = next_line

            line = self._strip_comment(line)
            if self._has_sentry(line):
                return

            position = line.find(self.delimiter)
            if position < 0:
                continue
            key = line[:position]
            value = line[position + len(self.delimiter):]

            while True:
                next_line = next(lines, None)
                if next_line is None:
                    pending = ""
                    break
                pending = next_line
                if not _trim(pending):
                    break
                pending = self._strip_comment(pending)
                if self.delimiter in pending or self._has_sentry(pending):
                    break
                if _trim(pending):
                    value += "\n"
                value += pending
                pending = ""

            self._contents[_trim(key)] = _trim(value)

    def dump(self, stream: IO[str]) -> None:
        """Write every key and value, in key order, to a text stream."""
        for key in sorted(self._contents):
            stream.write(f"{key} {self.delimiter} {self._contents[key]}\n")

    def read(self, key: str, kind: Callable[[str], Any] = str) -> Any:
        """Return the value of ``key`` converted by ``kind``."""
        try:
            text = self._contents[key]
        except KeyError:
            raise ConfigKeyError(key) from None
        return _convert(text, kind)

    def get(
        self,
        key: str,
        default: Any = None,
        kind: Optional[Callable[[str], Any]] = None,
    ) -> Any:
        """Return the value of ``key`` or ``default`` when it is absent.

        Without ``kind`` the value is converted to the type of ``default``.
        """
        if key not in self._contents:
            return default
        if kind is None:
            kind = str if default is None else type(default)
        return _convert(self._contents[key], kind)

    def add(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, both trimmed of whitespace."""
        self._contents[_trim(key)] = _trim(_as_text(value))

    def remove(self, key: str) -> None:
        """Remove ``key`` and its value."""
        try:
            del self._contents[key]
        except KeyError:
            raise ConfigKeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._contents