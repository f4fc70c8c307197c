"""Action session: variables, outputs, secrets, logging, and log groups.

An ``ActionSession`` owns the state a running action shares with the
runner: the environment it mutates, the stream commands are written to,
the current log group depth and the exit code to report.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Awaitable, Callable, Iterator, MutableMapping
from contextlib import contextmanager
from enum import IntEnum
from typing import IO, Any, TypeVar

from actions_core import inputs
from actions_core.command import issue, issue_command, to_command_value

T = TypeVar("T")

_ANNOTATION_KEYS = (
    ("title", "title"),
    ("file", "file"),
    ("line", "line"),
    ("end_line", "endLine"),
    ("col", "col"),
    ("end_column", "endColumn"),
)


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1


def _annotation_properties(annotation: dict[str, Any]) -> list[tuple[str, Any]]:
    unknown = set(annotation) - {key for key, _ in _ANNOTATION_KEYS}
    if unknown:
        raise TypeError(f"Unknown annotation properties: {', '.join(sorted(unknown))}")
    return [
        (wire_key, annotation[key])
        for key, wire_key in _ANNOTATION_KEYS
        if annotation.get(key) is not None
    ]


class ActionSession:
    def __init__(
        self,
        environ: MutableMapping[str, str] | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        self._stream = stream
        self.group_depth = 0
        self.exit_code = ExitCode.SUCCESS

    @property
    def stream(self) -> IO[str]:
        # Resolved per write so a replaced sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def _command(self, name: str, properties: Any = None, message: Any = "") -> None:
        issue_command(name, properties, message, stream=self.stream)

    # --- Variables ---

    def export_variable(self, name: str, value: Any) -> None:
        """Set a variable for this process and for later steps in the job."""
        self.environ[name] = to_command_value(value)
        self._command("set-env", {"name": name}, value)

    def export_secret(self, name: str, value: Any) -> None:
        """Export a variable and register its value to be masked in logs."""
        self.export_variable(name, value)
        self.set_secret(value)

    def set_secret(self, value: Any) -> None:
        """Register a value to be masked in logs without exporting it."""
        self._command("add-mask", None, value)

    def add_path(self, path: str) -> None:
        """Prepend a directory to PATH for this process and later steps."""
        self._command("add-path", None, path)
        self.environ["PATH"] = f"{path}{os.pathsep}{self.environ.get('PATH', '')}"

    # --- Inputs, outputs and state ---

    def get_input(self, name: str, required: bool = False, trim_whitespace: bool = True) -> str:
        return inputs.get_input(
            name, required=required, trim_whitespace=trim_whitespace, environ=self.environ
        )

    def get_boolean_input(self, name: str, required: bool = False) -> bool:
        return inputs.get_boolean_input(name, required=required, environ=self.environ)

    def get_multiline_input(self, name: str, required: bool = False) -> list[str]:
        return inputs.get_multiline_input(name, required=required, environ=self.environ)

    def set_output(self, name: str, value: Any) -> None:
        """Set an action output value."""
        self._command("set-output", {"name": name}, value)

    def save_state(self, name: str, value: Any) -> None:
        """Save state for the action's post step, readable there via get_state."""
        self._command("save-state", {"name": name}, value)

    def get_state(self, name: str) -> str:
        return self.environ.get(f"STATE_{name}", "")

    def set_command_echo(self, enabled: bool) -> None:
        self._command("echo", None, "on" if enabled else "off")

    # --- Results ---

    def set_failed(self, message: str | BaseException) -> None:
        """Mark the action as failed and log the message as an error.

        Execution continues; the caller decides whether to stop. The recorded
        status only reaches the process through the caller, typically
        ``sys.exit(session.exit_code)`` at the end of the entrypoint.
        """
        self.exit_code = ExitCode.FAILURE
        self.error(message)

    # --- Logging ---

    def is_debug(self) -> bool:
        return self.environ.get("RUNNER_DEBUG") == "1"

    def debug(self, message: str) -> None:
        """Write a debug message, shown only when step debugging is enabled."""
        self._command("debug", None, message)

    def error(self, message: str | BaseException, **annotation: Any) -> None:
        """Add an error issue, optionally annotating a file location."""
        self._command("error", _annotation_properties(annotation), message)

    def warning(self, message: str | BaseException, **annotation: Any) -> None:
        """Add a warning issue, optionally annotating a file location."""
        self._command("warning", _annotation_properties(annotation), message)

    def notice(self, message: str | BaseException, **annotation: Any) -> None:
        """Add a notice issue, optionally annotating a file location."""
        self._command("notice", _annotation_properties(annotation), message)

    def info(self, message: str) -> None:
        """Write a plain log line; it is not a command and is not escaped."""
        print(message, file=self.stream, flush=True)

    # --- Groups ---

    def start_group(self, name: str) -> None:
        """Begin a foldable output group."""
        issue("group", name, stream=self.stream)
        self.group_depth += 1

    def end_group(self) -> None:
        """End the current output group. Unbalanced calls are not checked."""
        issue("endgroup", stream=self.stream)
        self.group_depth -= 1

    @contextmanager
    def group(self, name: str) -> Iterator[None]:
        """Wrap a block in an output group that is closed on every exit path."""
        self.start_group(name)
        try:
            yield
        finally:
            self.end_group()

    def with_group(self, name: str, fn: Callable[[], T]) -> T:
        """Call ``fn`` inside an output group and return its result."""
        with self.group(name):
            return fn()

    async def with_group_async(self, name: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Await ``fn()`` inside an output group and return its result.

        The group stays open across suspensions and is closed even when the
        awaited work raises or is cancelled.
        """
        with self.group(name):
            return await fn()
