"""Encode workflow commands as single ``::name key=value::message`` lines."""

from __future__ import annotations

import json
import re
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import IO, Any, Union

CMD_STRING = "::"

Properties = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]

_DATA_ESCAPES = (("%", "%25"), ("\r", "%0D"), ("\n", "%0A"))
_PROPERTY_ESCAPES = _DATA_ESCAPES + ((":", "%3A"), (",", "%2C"))

_DATA_UNESCAPES = {"%25": "%", "%0D": "\r", "%0A": "\n"}
_PROPERTY_UNESCAPES = {**_DATA_UNESCAPES, "%3A": ":", "%2C": ","}

_DATA_ESCAPE_RE = re.compile("|".join(_DATA_UNESCAPES))
_PROPERTY_ESCAPE_RE = re.compile("|".join(_PROPERTY_UNESCAPES))


class CommandParseError(ValueError):
    """Raised when a line does not follow the command grammar."""


def to_command_value(value: Any) -> str:
    """Normalize a value to the string that gets escaped onto the wire."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        return str(value)
    return json.dumps(value, separators=(",", ":"))


def _replace_all(value: str, escapes: tuple[tuple[str, str], ...]) -> str:
    for raw, escaped in escapes:
        value = value.replace(raw, escaped)
    return value


def escape_data(value: Any) -> str:
    """Escape a message body."""
    return _replace_all(to_command_value(value), _DATA_ESCAPES)


def escape_property(value: Any) -> str:
    """Escape a property value, which additionally cannot hold ``:`` or ``,``."""
    return _replace_all(to_command_value(value), _PROPERTY_ESCAPES)


def unescape_data(value: str) -> str:
    return _DATA_ESCAPE_RE.sub(lambda m: _DATA_UNESCAPES[m.group(0)], value)


def unescape_property(value: str) -> str:
    return _PROPERTY_ESCAPE_RE.sub(lambda m: _PROPERTY_UNESCAPES[m.group(0)], value)


def _pairs(properties: Properties) -> tuple[tuple[str, Any], ...]:
    if not properties:
        return ()
    if isinstance(properties, Mapping):
        return tuple(properties.items())
    return tuple((key, value) for key, value in properties)


@dataclass(frozen=True)
class Command:
    name: str
    properties: tuple[tuple[str, Any], ...] = field(default=())
    message: Any = ""

    @classmethod
    def create(cls, name: str, properties: Properties = None, message: Any = "") -> Command:
        """Build a command from a mapping or an ordered sequence of pairs."""
        return cls(name=name, properties=_pairs(properties), message=message)

    def __str__(self) -> str:
        line = CMD_STRING + self.name
        if self.properties:
            line += " " + ",".join(
                f"{key}={escape_property(value)}" for key, value in self.properties
            )
        return f"{line}{CMD_STRING}{escape_data(self.message)}"


def encode(name: str, properties: Properties = None, message: Any = "") -> str:
    """Return the single line representing the command."""
    return str(Command.create(name, properties, message))


def decode(line: str) -> Command:
    """Parse a command line back into its name, properties, and message.

    This mirrors what the runner does with each line it reads; values come
    back as strings with every escape sequence reversed.
    """
    line = line.rstrip("\r\n")
    if not line.startswith(CMD_STRING):
        raise CommandParseError(f"Not a command line: {line!r}")

    end = line.find(CMD_STRING, len(CMD_STRING))
    if end == -1:
        raise CommandParseError(f"Missing message separator: {line!r}")

    head = line[len(CMD_STRING) : end]
    message = unescape_data(line[end + len(CMD_STRING) :])

    name, _, props = head.partition(" ")
    if not name:
        raise CommandParseError(f"Missing command name: {line!r}")

    properties: list[tuple[str, str]] = []
    if props:
        for pair in props.split(","):
            key, sep, value = pair.partition("=")
            if not key or not sep:
                raise CommandParseError(f"Malformed property {pair!r} in {line!r}")
            properties.append((key, unescape_property(value)))

    return Command(name=name, properties=tuple(properties), message=message)


def issue_command(
    name: str,
    properties: Properties = None,
    message: Any = "",
    stream: IO[str] | None = None,
) -> None:
    """Write one encoded command line to the stream (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    print(encode(name, properties, message), file=out, flush=True)


def issue(name: str, message: Any = "", stream: IO[str] | None = None) -> None:
    """Write a command that carries no properties."""
    issue_command(name, None, message, stream=stream)
