"""Compiled allow-lists: text patterns, callee names and JSX attribute names."""

import re
from dataclasses import dataclass

from tree_sitter import Node

from untranslated.analyzers.content import NO_LETTERS_PATTERN, matches_any_whitelist_pattern
from untranslated.analyzers.syntax import node_text, unwrap_parens
from untranslated.models import LintOptions

# DOM, event, store and string helpers whose string arguments are never prose
POPULAR_CALLEES: tuple[str, ...] = (
    "addEventListener",
    "removeEventListener",
    "postMessage",
    "getElementById",
    "dispatch",
    "commit",
    "includes",
    "indexOf",
    "endsWith",
    "startsWith",
)

DEFAULT_SIMPLE_CALLEES: tuple[str, ...] = ("t", "plural", "select", *POPULAR_CALLEES)
DEFAULT_COMPLEX_CALLEES: tuple[str, ...] = ("i18n._",)

DEFAULT_IGNORED_ATTRIBUTES: tuple[str, ...] = (
    "className",
    "styleName",
    "type",
    "id",
    "width",
    "height",
)

# Callees that load modules; their arguments are specifiers
MODULE_LOADERS = frozenset({"require"})


@dataclass(frozen=True)
class Whitelist:
    """Allow-lists compiled once per lint invocation.

    Attributes:
        patterns: Compiled text patterns, the no-letters pattern first.
        callee_simple: Bare function or method names.
        callee_complex: ``object.method`` qualified names.
        attribute_names: JSX attribute names whose values are not inspected.
    """

    patterns: tuple[re.Pattern[str], ...]
    callee_simple: frozenset[str]
    callee_complex: frozenset[str]
    attribute_names: frozenset[str]

    @classmethod
    def from_options(cls, options: LintOptions | None = None) -> "Whitelist":
        options = options or LintOptions()

        simple = list(DEFAULT_SIMPLE_CALLEES)
        complex_ = list(DEFAULT_COMPLEX_CALLEES)
        for name in options.ignore_function:
            if "." in name:
                complex_.append(name)
            else:
                simple.append(name)

        return cls(
            patterns=tuple(re.compile(p) for p in (NO_LETTERS_PATTERN, *options.ignore)),
            callee_simple=frozenset(simple),
            callee_complex=frozenset(complex_),
            attribute_names=frozenset((*DEFAULT_IGNORED_ATTRIBUTES, *options.ignore_attribute)),
        )

    def matches(self, text: str) -> bool:
        """True if ``text`` is covered by any allow pattern."""
        return matches_any_whitelist_pattern(text, self.patterns)

    def is_ignored_attribute(self, name: str | None) -> bool:
        return name is not None and name in self.attribute_names

    def is_allowed_callee(self, callee: Node | None) -> bool:
        """Check the callee of a call or the constructor of a ``new``.

        ``require(...)`` and dynamic ``import(...)`` are always allowed. A bare
        identifier is allowed when it is a simple or qualified allow-listed
        name. ``obj.method`` is allowed when ``method`` is a simple name or
        ``obj.method`` a qualified one; both sides must be plain identifiers.
        """
        callee = unwrap_parens(callee)
        if callee is None:
            return False

        if callee.type == "import":
            return True

        if callee.type == "identifier":
            name = node_text(callee)
            if name in MODULE_LOADERS:
                return True
            return name in self.callee_simple or name in self.callee_complex

        if callee.type == "member_expression":
            obj = callee.child_by_field_name("object")
            prop = callee.child_by_field_name("property")
            if obj is None or prop is None:
                return False
            if obj.type != "identifier" or prop.type != "property_identifier":
                return False
            if node_text(prop) in self.callee_simple:
                return True
            return f"{node_text(obj)}.{node_text(prop)}" in self.callee_complex

        return False
