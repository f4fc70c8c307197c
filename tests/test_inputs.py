"""Tests for actions_core.inputs module."""

import pytest

from actions_core.inputs import (
    InputError,
    get_boolean_input,
    get_input,
    get_multiline_input,
    input_env_key,
)


class TestInputEnvKey:
    def test_spaces_become_underscores(self):
        assert input_env_key("my name") == "INPUT_MY_NAME"

    def test_hyphens_are_kept(self):
        assert input_env_key("dry-run") == "INPUT_DRY-RUN"


class TestGetInput:
    def test_reads_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("INPUT_MY_NAME", "value")
        assert get_input("my name") == "value"

    def test_value_is_trimmed(self, monkeypatch):
        monkeypatch.setenv("INPUT_MY_NAME", "  hi  ")
        assert get_input("my name", required=True) == "hi"

    def test_trim_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("INPUT_MY_NAME", "  hi  ")
        assert get_input("my name", trim_whitespace=False) == "  hi  "

    def test_missing_required_raises(self, monkeypatch):
        monkeypatch.delenv("INPUT_MY_NAME", raising=False)
        with pytest.raises(InputError, match="Input required and not supplied: my name"):
            get_input("my name", required=True)

    def test_empty_required_raises(self, monkeypatch):
        monkeypatch.setenv("INPUT_MY_NAME", "")
        with pytest.raises(InputError, match="not supplied"):
            get_input("my name", required=True)

    def test_missing_optional_is_empty(self, monkeypatch):
        monkeypatch.delenv("INPUT_MY_NAME", raising=False)
        assert get_input("my name") == ""

    def test_explicit_environ(self):
        assert get_input("token", environ={"INPUT_TOKEN": " abc\n"}) == "abc"


class TestBooleanParsing:
    @pytest.mark.parametrize("value", ["true", "True", "TRUE", " true "])
    def test_truthy_values(self, value):
        assert get_boolean_input("flag", environ={"INPUT_FLAG": value}) is True

    @pytest.mark.parametrize("value", ["false", "False", "FALSE"])
    def test_falsy_values(self, value):
        assert get_boolean_input("flag", environ={"INPUT_FLAG": value}) is False

    @pytest.mark.parametrize("value", ["yes", "1", "tRuE", ""])
    def test_invalid_values_raise(self, value):
        with pytest.raises(InputError, match="YAML 1.2"):
            get_boolean_input("flag", environ={"INPUT_FLAG": value})

    def test_missing_required_raises(self):
        with pytest.raises(InputError, match="not supplied: flag"):
            get_boolean_input("flag", required=True, environ={})


class TestMultilineParsing:
    def test_lines_with_blank_entries(self):
        env = {"INPUT_FILES": "a.yaml\n\n  \n  b.yaml \n"}
        assert get_multiline_input("files", environ=env) == ["a.yaml", "b.yaml"]

    def test_empty_input(self):
        assert get_multiline_input("files", environ={}) == []

    def test_missing_required_raises(self):
        with pytest.raises(InputError, match="not supplied: files"):
            get_multiline_input("files", required=True, environ={})
