"""Client library for talking to a workflow runner over stdout commands."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from contextlib import AbstractContextManager
from typing import Any, TypeVar

from actions_core.command import (
    Command,
    CommandParseError,
    decode,
    encode,
    escape_data,
    escape_property,
    issue,
    issue_command,
    to_command_value,
)
from actions_core.inputs import (
    InputError,
    get_boolean_input,
    get_input,
    get_multiline_input,
)
from actions_core.session import ActionSession, ExitCode

T = TypeVar("T")

_default_session: ActionSession | None = None


def get_session() -> ActionSession:
    """Return the session for this process, creating it on first use."""
    global _default_session
    if _default_session is None:
        _default_session = ActionSession()
    return _default_session


def export_variable(name: str, value: Any) -> None:
    get_session().export_variable(name, value)


def export_secret(name: str, value: Any) -> None:
    get_session().export_secret(name, value)


def set_secret(value: Any) -> None:
    get_session().set_secret(value)


def add_path(path: str) -> None:
    get_session().add_path(path)


def set_output(name: str, value: Any) -> None:
    get_session().set_output(name, value)


def save_state(name: str, value: Any) -> None:
    get_session().save_state(name, value)


def get_state(name: str) -> str:
    return get_session().get_state(name)


def set_failed(message: str | BaseException) -> None:
    get_session().set_failed(message)


def exit_code() -> ExitCode:
    """Return the status to exit with, e.g. ``sys.exit(actions_core.exit_code())``."""
    return get_session().exit_code


def is_debug() -> bool:
    return get_session().is_debug()


def debug(message: str) -> None:
    get_session().debug(message)


def error(message: str | BaseException, **annotation: Any) -> None:
    get_session().error(message, **annotation)


def warning(message: str | BaseException, **annotation: Any) -> None:
    get_session().warning(message, **annotation)


def notice(message: str | BaseException, **annotation: Any) -> None:
    get_session().notice(message, **annotation)


def info(message: str) -> None:
    get_session().info(message)


def start_group(name: str) -> None:
    get_session().start_group(name)


def end_group() -> None:
    get_session().end_group()


def group(name: str) -> AbstractContextManager[None]:
    return get_session().group(name)


def with_group(name: str, fn: Callable[[], T]) -> T:
    return get_session().with_group(name, fn)


async def with_group_async(name: str, fn: Callable[[], Awaitable[T]]) -> T:
    return await get_session().with_group_async(name, fn)


__all__ = [
    "ActionSession",
    "Command",
    "CommandParseError",
    "ExitCode",
    "InputError",
    "add_path",
    "debug",
    "decode",
    "encode",
    "end_group",
    "error",
    "escape_data",
    "escape_property",
    "exit_code",
    "export_secret",
    "export_variable",
    "get_boolean_input",
    "get_input",
    "get_multiline_input",
    "get_session",
    "get_state",
    "group",
    "info",
    "is_debug",
    "issue",
    "issue_command",
    "notice",
    "save_state",
    "set_failed",
    "set_output",
    "set_secret",
    "start_group",
    "to_command_value",
    "warning",
    "with_group",
    "with_group_async",
]
