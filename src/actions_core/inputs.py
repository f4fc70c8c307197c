"""Read action inputs from INPUT_* environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


class InputError(Exception):
    """Raised when an action input is missing or invalid."""


def input_env_key(name: str) -> str:
    """Map an input name to its variable, e.g. ``my name`` -> ``INPUT_MY_NAME``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    required: bool = False,
    trim_whitespace: bool = True,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Get the value of an input, trimmed unless ``trim_whitespace`` is off."""
    env = os.environ if environ is None else environ
    value = env.get(input_env_key(name), "")
    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value.strip() if trim_whitespace else value


def get_boolean_input(
    name: str,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Get an input as a YAML 1.2 core schema boolean."""
    value = get_input(name, required=required, environ=environ)
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InputError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def get_multiline_input(
    name: str,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Split a newline-separated input into a list, dropping blank lines."""
    value = get_input(name, required=required, environ=environ)
    return [line.strip() for line in value.splitlines() if line.strip()]
