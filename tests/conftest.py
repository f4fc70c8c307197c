import io

import pytest

from actions_core import ActionSession


@pytest.fixture
def environ():
    return {"PATH": "/usr/bin"}


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def session(environ, stream):
    return ActionSession(environ=environ, stream=stream)


@pytest.fixture
def emitted(stream):
    """Return the lines written to the session stream so far."""

    def _lines() -> list[str]:
        return stream.getvalue().splitlines()

    return _lines
