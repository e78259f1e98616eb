# pyright: reportAny=false, reportUnknownArgumentType=false
import copy
from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from gitprompt.config._loader import (
    deep_merge,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from gitprompt.exceptions import ConfigLoadError


class TestReadTomlFile:
    def test_parses_valid_toml(self, fs: FakeFilesystem) -> None:
        content = """
shell = "bash"

[symbols]
clean = "ok"
"""
        path = Path("/test/config.toml")
        fs.create_file(path, contents=content)

        result = read_toml_file(path)

        assert result == {"shell": "bash", "symbols": {"clean": "ok"}}

    def test_raises_file_not_found_for_missing_file(self, fs: FakeFilesystem) -> None:
        with pytest.raises(FileNotFoundError):
            _ = read_toml_file(Path("/test/missing.toml"))

    def test_config_load_error_includes_line_and_column(
        self, fs: FakeFilesystem
    ) -> None:
        content = """[tokens]
prefix = "("

[invalid section
"""
        path = Path("/test/syntax_error.toml")
        fs.create_file(path, contents=content)

        with pytest.raises(ConfigLoadError) as exc_info:
            _ = read_toml_file(path)

        error = exc_info.value
        assert error.path == path
        assert error.line == 4
        assert error.column is not None

    def test_config_load_error_chains_original_exception(
        self, fs: FakeFilesystem
    ) -> None:
        path = Path("/test/bad.toml")
        fs.create_file(path, contents="[bad")

        with pytest.raises(ConfigLoadError) as exc_info:
            _ = read_toml_file(path)

        assert exc_info.value.__cause__ is not None


class TestDeepMerge:
    def test_override_scalar(self) -> None:
        assert deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_merges_nested_dicts(self) -> None:
        base = {"tokens": {"prefix": "[", "suffix": "]"}}
        override = {"tokens": {"prefix": "("}}

        assert deep_merge(base, override) == {"tokens": {"prefix": "(", "suffix": "]"}}

    def test_lists_are_replaced(self) -> None:
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}

    def test_type_mismatch_override_wins(self) -> None:
        assert deep_merge({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}

    def test_inputs_are_not_modified(self) -> None:
        base = {"a": {"b": [1]}}
        override = {"a": {"c": 2}}
        base_before = copy.deepcopy(base)
        override_before = copy.deepcopy(override)

        result = deep_merge(base, override)
        result["a"]["b"].append(9)

        assert base == base_before
        assert override == override_before


class TestParseEnvVars:
    def test_maps_double_underscore_to_nesting(self) -> None:
        environ = {"GITPROMPT_LOGGING__LEVEL": "debug"}
        assert parse_env_vars(environ=environ) == {"logging": {"level": "debug"}}

    def test_top_level_key(self) -> None:
        assert parse_env_vars(environ={"GITPROMPT_SHELL": "bash"}) == {"shell": "bash"}

    def test_values_stay_strings(self) -> None:
        environ = {"GITPROMPT_COLORS__BOLD": "false"}
        assert parse_env_vars(environ=environ) == {"colors": {"bold": "false"}}

    def test_ignores_unprefixed_and_bare_prefix(self) -> None:
        environ = {"HOME": "/root", "GITPROMPT_": "x", "GIT_DIR": "/x"}
        assert parse_env_vars(environ=environ) == {}

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITPROMPT_TOKENS__SUFFIX", ">")
        assert parse_env_vars() == {"tokens": {"suffix": ">"}}


class TestSetNestedKey:
    def test_creates_intermediate_dicts(self) -> None:
        d: dict[str, object] = {}
        set_nested_key(d, "a.b.c", 1)
        assert d == {"a": {"b": {"c": 1}}}

    def test_replaces_non_dict_intermediate(self) -> None:
        d: dict[str, object] = {"a": "scalar"}
        set_nested_key(d, "a.b", 1)
        assert d == {"a": {"b": 1}}
