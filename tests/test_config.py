"""Tests for options loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from untranslated.config import (
    CONFIG_FILENAME,
    ConfigError,
    find_config,
    load_options,
    resolve_options,
)
from untranslated.models import LintOptions


def _write_config(directory: Path, content) -> Path:
    path = directory / CONFIG_FILENAME
    path.write_text(content if isinstance(content, str) else json.dumps(content))
    return path


class TestLintOptions:
    """Tests for the LintOptions model."""

    def test_defaults(self):
        options = LintOptions()
        assert options.ignore == []
        assert options.ignore_function == []
        assert options.ignore_attribute == []
        assert options.type_aware is True

    def test_camel_case_keys(self):
        options = LintOptions.model_validate({"ignoreFunction": ["track"], "ignoreAttribute": ["testID"]})
        assert options.ignore_function == ["track"]
        assert options.ignore_attribute == ["testID"]

    def test_unknown_key_is_rejected(self):
        with pytest.raises(ValidationError):
            LintOptions.model_validate({"ignoreFunctions": ["track"]})

    def test_bad_regex_is_rejected(self):
        with pytest.raises(ValidationError, match="invalid regex"):
            LintOptions(ignore=["(unclosed"])

    def test_merged_appends(self):
        options = LintOptions(ignore=["^a"], ignoreFunction=["track"])
        merged = options.merged(ignore=("^b",), ignore_function=("logger.info",), type_aware=False)

        assert merged.ignore == ["^a", "^b"]
        assert merged.ignore_function == ["track", "logger.info"]
        assert merged.type_aware is False
        assert options.ignore == ["^a"]

    def test_merged_keeps_type_awareness(self):
        assert LintOptions(typeAware=False).merged().type_aware is False


class TestLoadOptions:
    """Tests for load_options."""

    def test_valid_file(self, temp_dir: Path):
        path = _write_config(temp_dir, {"ignore": ["^https?://"], "ignoreFunction": ["logger.info"]})

        options = load_options(path)
        assert options.ignore == ["^https?://"]
        assert options.ignore_function == ["logger.info"]

    def test_invalid_json(self, temp_dir: Path):
        path = _write_config(temp_dir, "{not json")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_options(path)

    def test_not_an_object(self, temp_dir: Path):
        path = _write_config(temp_dir, ["^a"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_options(path)

    def test_invalid_options(self, temp_dir: Path):
        path = _write_config(temp_dir, {"ignore": ["["]})
        with pytest.raises(ConfigError, match="Invalid options"):
            load_options(path)

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_options(temp_dir / CONFIG_FILENAME)


class TestFindConfig:
    """Tests for config discovery."""

    def test_found_in_parent(self, temp_dir: Path):
        path = _write_config(temp_dir, {})
        nested = temp_dir / "src" / "components"
        nested.mkdir(parents=True)
        source = nested / "Button.tsx"
        source.write_text("")

        assert find_config(nested) == path.resolve()
        assert find_config(source) == path.resolve()

    def test_resolve_options_prefers_explicit_path(self, temp_dir: Path):
        _write_config(temp_dir, {"ignore": ["^found"]})
        explicit = temp_dir / "other.json"
        explicit.write_text(json.dumps({"ignore": ["^explicit"]}))

        assert resolve_options(explicit, search_from=temp_dir).ignore == ["^explicit"]
        assert resolve_options(None, search_from=temp_dir).ignore == ["^found"]

    def test_resolve_options_defaults(self):
        assert resolve_options(None) == LintOptions()
