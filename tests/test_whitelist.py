"""Tests for the compiled allow-lists."""

import pytest

from untranslated.analyzers.parser import parse_source
from untranslated.analyzers.whitelist import (
    DEFAULT_IGNORED_ATTRIBUTES,
    DEFAULT_SIMPLE_CALLEES,
    Whitelist,
)
from untranslated.models import LintOptions


def _callee(find_nodes, source: str):
    tree = parse_source(source, "javascript")
    call = find_nodes(tree.root_node, "call_expression")[0]
    return call.child_by_field_name("function")


class TestFromOptions:
    """Tests for Whitelist.from_options."""

    def test_defaults(self) -> None:
        whitelist = Whitelist.from_options()
        assert whitelist.patterns[0].pattern == "^[^A-Za-z]+$"
        assert len(whitelist.patterns) == 1
        assert set(DEFAULT_SIMPLE_CALLEES) <= whitelist.callee_simple
        assert "t" in whitelist.callee_simple
        assert "i18n._" in whitelist.callee_complex
        assert set(DEFAULT_IGNORED_ATTRIBUTES) == whitelist.attribute_names

    def test_user_patterns_follow_builtin(self) -> None:
        whitelist = Whitelist.from_options(LintOptions(ignore=["^foo", "bar$"]))
        assert [p.pattern for p in whitelist.patterns] == ["^[^A-Za-z]+$", "^foo", "bar$"]

    def test_dotted_functions_are_complex(self) -> None:
        whitelist = Whitelist.from_options(LintOptions(ignoreFunction=["logger.info", "track"]))
        assert "logger.info" in whitelist.callee_complex
        assert "track" in whitelist.callee_simple
        assert "logger.info" not in whitelist.callee_simple

    def test_extra_attributes(self) -> None:
        whitelist = Whitelist.from_options(LintOptions(ignoreAttribute=["testID"]))
        assert whitelist.is_ignored_attribute("testID") is True
        assert whitelist.is_ignored_attribute("className") is True
        assert whitelist.is_ignored_attribute("title") is False
        assert whitelist.is_ignored_attribute(None) is False


class TestMatches:
    """Tests for Whitelist.matches."""

    def test_no_letters_always_match(self) -> None:
        whitelist = Whitelist.from_options()
        assert whitelist.matches("42") is True
        assert whitelist.matches("--:--") is True
        assert whitelist.matches("Hello") is False

    def test_user_pattern(self) -> None:
        whitelist = Whitelist.from_options(LintOptions(ignore=["^Hello"]))
        assert whitelist.matches("Hello world") is True
        assert whitelist.matches("Say Hello") is False


class TestIsAllowedCallee:
    """Tests for callee matching."""

    @pytest.mark.parametrize(
        "source",
        [
            't("Hello there")',
            'plural(count, "Some items")',
            'i18n._("Hello there")',
            'list.includes("Some value")',
            'window.addEventListener("click", handler)',
            'require("Some module")',
        ],
    )
    def test_allowed(self, find_nodes, source: str) -> None:
        whitelist = Whitelist.from_options()
        assert whitelist.is_allowed_callee(_callee(find_nodes, source)) is True

    @pytest.mark.parametrize(
        "source",
        [
            'alert("Hello there")',
            'i18n.translate("Hello there")',
            'this.props.t("Hello there")',
            'getT()("Hello there")',
        ],
    )
    def test_not_allowed(self, find_nodes, source: str) -> None:
        whitelist = Whitelist.from_options()
        assert whitelist.is_allowed_callee(_callee(find_nodes, source)) is False

    def test_configured_qualified_name(self, find_nodes) -> None:
        whitelist = Whitelist.from_options(LintOptions(ignoreFunction=["logger.info"]))
        assert whitelist.is_allowed_callee(_callee(find_nodes, 'logger.info("Started up")')) is True
        assert whitelist.is_allowed_callee(_callee(find_nodes, 'console.info("Started up")')) is False

    def test_missing_callee(self) -> None:
        assert Whitelist.from_options().is_allowed_callee(None) is False
