"""Exemption rules for string-bearing nodes.

Context rules look at where a literal sits (its parent and ancestor chain)
and decide whether it is exempt; they never report. They are kept in one
table, ``CONTEXT_RULES``, and each checks a distinct structural shape, so the
order of the table does not matter.

Two kinds of verdicts follow the context rules:

- ``judge_markup_text`` handles JSX text and literals placed directly in JSX
  children. The node is marked exempt first and then judged on its own text.
- ``judge_template`` and ``judge_string`` are the terminal rules, run once
  per node after every context rule had the chance to exempt it.

Verdict functions return the normalized text to report, or None.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from tree_sitter import Node

from untranslated.analyzers.content import (
    is_all_upper,
    is_allowed_markup_symbol,
    is_trivial_or_empty,
    looks_like_human_text,
)
from untranslated.analyzers.dom import is_allowed_dom_attribute
from untranslated.analyzers.syntax import (
    JSX_TAG_TYPES,
    ancestors,
    is_field,
    is_tagged_template_call,
    jsx_attribute_name,
    jsx_attribute_values,
    jsx_element_name,
    literal_kind,
    literal_value,
    nearest_ancestor,
    node_text,
    string_value,
    syntactic_parent,
    template_static_text,
    unwrap_parens,
)
from untranslated.analyzers.types import TypeQuery
from untranslated.analyzers.whitelist import Whitelist

# Class fields whose values name things for developer tooling
IGNORED_CLASS_PROPERTIES = frozenset({"displayName"})

# Components whose children are translated by the component itself
PASS_THROUGH_COMPONENTS = frozenset({"Trans"})

STRING_KINDS = frozenset({"string", "template"})

_PAIR_TYPES = frozenset({"pair", "pair_pattern"})
# Fallback operators; their string operands are usually shown to the user
_LOGICAL_OPERATORS = frozenset({"||", "&&", "??"})
_CLASS_FIELD_TYPES = frozenset({"public_field_definition", "field_definition"})
_MEMBER_HOLDERS = frozenset({
    "pair",
    "pair_pattern",
    "public_field_definition",
    "field_definition",
    "method_definition",
    "method_signature",
    "abstract_method_signature",
    "property_signature",
})
_FUNCTION_TYPES = frozenset({
    "function_declaration",
    "function_expression",
    "function",
    "generator_function_declaration",
    "generator_function",
    "arrow_function",
    "method_definition",
})


class ExemptionSet:
    """Identity-keyed set of exempt nodes for one file.

    Membership only grows; nothing is ever removed.
    """

    def __init__(self) -> None:
        self._ids: set[int] = set()

    def add(self, node: Node) -> None:
        self._ids.add(node.id)

    def __contains__(self, node: Node) -> bool:
        return node.id in self._ids

    def __len__(self) -> int:
        return len(self._ids)


@dataclass
class LintContext:
    """Per-file state shared by the rules."""

    whitelist: Whitelist
    type_query: TypeQuery
    exempt: ExemptionSet = field(default_factory=ExemptionSet)


@dataclass(frozen=True)
class ContextRule:
    """A structural predicate that can exempt a literal.

    Attributes:
        name: Rule name used in debug logs.
        kinds: Literal kinds the rule applies to.
        predicate: Returns True when the node is exempt.
    """

    name: str
    kinds: frozenset[str]
    predicate: Callable[[Node, Whitelist], bool]


# =============================================================================
# Helpers
# =============================================================================


def _member_key(holder: Node) -> Node | None:
    """Key node of an object pair, class member or interface member."""
    if holder.type in _PAIR_TYPES:
        return holder.child_by_field_name("key")
    if holder.type == "field_definition":
        return holder.child_by_field_name("property")
    return holder.child_by_field_name("name")


def _static_text(node: Node) -> str:
    """Stripped text of a string or template, used for all-upper checks."""
    if node.type == "template_string":
        return template_static_text(node).strip()
    if node.type == "string":
        return string_value(node)
    return node_text(node)


def _is_upper_key(key: Node | None) -> bool:
    if key is None:
        return False
    if key.type == "computed_property_name":
        inner = unwrap_parens(key.named_children[0]) if key.named_children else None
        return _is_upper_key(inner)
    if key.type in ("property_identifier", "identifier", "string", "template_string"):
        return is_all_upper(_static_text(key))
    return False


def _is_directive(statement: Node) -> bool:
    """True if ``statement`` belongs to a directive prologue."""
    body = statement.parent
    if body is None:
        return False
    if body.type == "statement_block":
        if body.parent is None or body.parent.type not in _FUNCTION_TYPES:
            return False
    elif body.type != "program":
        return False

    for sibling in body.named_children:
        if sibling.type in ("comment", "hash_bang_line"):
            continue
        expression = sibling.named_children[0] if sibling.named_children else None
        if sibling.type != "expression_statement" or expression is None or expression.type != "string":
            return False
        if sibling.id == statement.id:
            return True
    return False


# =============================================================================
# Context rules
# =============================================================================


def in_module_source(node: Node, whitelist: Whitelist) -> bool:
    """``import ... from "x"``, ``export ... from "x"``, ``declare module "x"``."""
    if nearest_ancestor(node, {"import_statement"}) is not None:
        return True
    parent = node.parent
    if parent is None:
        return False
    if parent.type == "export_statement":
        return is_field(parent, "source", node)
    if parent.type == "module":
        return is_field(parent, "name", node)
    return False


def in_type_position(node: Node, whitelist: Whitelist) -> bool:
    """``let a: "x"``, ``T["member"]`` and template literal types."""
    return nearest_ancestor(node, {"literal_type", "template_literal_type"}) is not None


def in_enum_member(node: Node, whitelist: Whitelist) -> bool:
    parent = syntactic_parent(node)
    return parent is not None and parent.type in ("enum_body", "enum_assignment")


def in_markup_attribute(node: Node, whitelist: Whitelist) -> bool:
    """Values of ignored attributes and known non-text DOM attributes."""
    attribute = nearest_ancestor(node, {"jsx_attribute"})
    if attribute is None:
        return False

    name = jsx_attribute_name(attribute)
    # allow <MyComponent className="active" />
    if whitelist.is_ignored_attribute(name):
        return True

    tag = nearest_ancestor(attribute, JSX_TAG_TYPES)
    if tag is None:
        return False
    return is_allowed_dom_attribute(jsx_element_name(tag), name, jsx_attribute_values(tag))


def is_member_key(node: Node, whitelist: Whitelist) -> bool:
    """``{"key": value}``, ``{["key"]: value}``, ``class A { "key" = 1 }``."""
    parent = node.parent
    if parent is None:
        return False

    key_node, holder = node, parent
    if parent.type == "computed_property_name":
        key_node, holder = parent, parent.parent

    if holder is None or holder.type not in _MEMBER_HOLDERS:
        return False
    key = _member_key(holder)
    return key is not None and key.id == key_node.id


def has_upper_sibling(node: Node, whitelist: Whitelist) -> bool:
    """``{ FOO: "Some text" }`` or ``{ "Some text": "BAR" }``."""
    parent = syntactic_parent(node)
    if parent is None or parent.type not in _PAIR_TYPES:
        return False

    if _is_upper_key(parent.child_by_field_name("key")):
        return True

    value = unwrap_parens(parent.child_by_field_name("value"))
    return value is not None and value.type == "string" and is_all_upper(string_value(value))


def in_ignored_class_property(node: Node, whitelist: Whitelist) -> bool:
    """``static displayName = "Some Name"`` and upper-case field names."""
    parent = syntactic_parent(node)
    if parent is None or parent.type not in _CLASS_FIELD_TYPES:
        return False
    if not is_field(parent, "value", node):
        return False

    name = _member_key(parent)
    if name is None or name.type != "property_identifier":
        return False
    text = node_text(name)
    return text in IGNORED_CLASS_PROPERTIES or is_all_upper(text)


def in_comparison(node: Node, whitelist: Whitelist) -> bool:
    """Operands of ``===``, ``in``, ``<`` and friends.

    Concatenation (``+``) and logical fallbacks (``||``, ``&&``, ``??``) are
    not comparisons.
    """
    parent = syntactic_parent(node)
    if parent is None or parent.type != "binary_expression":
        return False
    if not (is_field(parent, "left", node) or is_field(parent, "right", node)):
        return False
    operator = node_text(parent.child_by_field_name("operator"))
    return operator != "+" and operator not in _LOGICAL_OPERATORS


def in_allowed_call(node: Node, whitelist: Whitelist) -> bool:
    """Anything inside ``t(...)``, ``el.addEventListener(...)``, ``require(...)``."""
    for parent in ancestors(node):
        if parent.type == "call_expression" and not is_tagged_template_call(parent):
            return whitelist.is_allowed_callee(parent.child_by_field_name("function"))
    return False


def in_allowed_constructor(node: Node, whitelist: Whitelist) -> bool:
    new_expression = nearest_ancestor(node, {"new_expression"})
    if new_expression is None:
        return False
    return whitelist.is_allowed_callee(new_expression.child_by_field_name("constructor"))


def is_switch_case_test(node: Node, whitelist: Whitelist) -> bool:
    parent = syntactic_parent(node)
    return parent is not None and parent.type == "switch_case" and is_field(parent, "value", node)


def in_tagged_template(node: Node, whitelist: Whitelist) -> bool:
    """The template of ``gql`...``` and literals interpolated into it."""
    for candidate in (node, *ancestors(node)):
        if candidate.type != "template_string" or candidate.parent is None:
            continue
        if is_tagged_template_call(candidate.parent) and is_field(candidate.parent, "arguments", candidate):
            return True
    return False


def is_constant_initializer(node: Node, whitelist: Whitelist) -> bool:
    """``const GREETING = "Hi there"``."""
    parent = syntactic_parent(node)
    if parent is None or parent.type != "variable_declarator":
        return False
    if not is_field(parent, "value", node):
        return False
    name = parent.child_by_field_name("name")
    return name is not None and name.type == "identifier" and is_all_upper(node_text(name))


def is_directive(node: Node, whitelist: Whitelist) -> bool:
    """``"use strict"`` and ``"use client"`` prologues."""
    parent = node.parent
    return parent is not None and parent.type == "expression_statement" and _is_directive(parent)


CONTEXT_RULES: tuple[ContextRule, ...] = (
    ContextRule("module-source", STRING_KINDS, in_module_source),
    ContextRule("type-literal", STRING_KINDS, in_type_position),
    ContextRule("enum-member", STRING_KINDS, in_enum_member),
    ContextRule("markup-attribute", STRING_KINDS, in_markup_attribute),
    ContextRule("member-key", STRING_KINDS, is_member_key),
    ContextRule("upper-key-value", STRING_KINDS, has_upper_sibling),
    ContextRule("class-property", STRING_KINDS, in_ignored_class_property),
    ContextRule("comparison-operand", STRING_KINDS, in_comparison),
    ContextRule("call-argument", STRING_KINDS, in_allowed_call),
    ContextRule("constructor-argument", STRING_KINDS, in_allowed_constructor),
    ContextRule("switch-case", STRING_KINDS, is_switch_case_test),
    ContextRule("tagged-template", STRING_KINDS, in_tagged_template),
    ContextRule("constant-declarator", STRING_KINDS, is_constant_initializer),
    ContextRule("directive", frozenset({"string"}), is_directive),
)


def find_exemption(node: Node, whitelist: Whitelist) -> ContextRule | None:
    """Return the first context rule that exempts ``node``, if any."""
    kind = literal_kind(node)
    for rule in CONTEXT_RULES:
        if kind in rule.kinds and rule.predicate(node, whitelist):
            return rule
    return None


# =============================================================================
# Markup text
# =============================================================================


def is_markup_child(node: Node) -> bool:
    """JSX text anywhere, or a literal in an expression child of a JSX element.

    Covers ``<p>Text</p>``, ``<>Text</>``, ``<p>{"Text"}</p>`` and
    ``<p>{`Text`}</p>``. Literals inside fragments such as ``<>{"Text"}</>``
    are left to the terminal verdicts.
    """
    if literal_kind(node) == "text":
        return True
    parent = node.parent
    return (
        parent is not None
        and parent.type == "jsx_expression"
        and parent.parent is not None
        and parent.parent.type == "jsx_element"
        # fragments parse as jsx_element with an unnamed opening tag
        and jsx_element_name(parent.parent) is not None
    )


def in_pass_through_component(node: Node) -> bool:
    return any(
        jsx_element_name(parent) in PASS_THROUGH_COMPONENTS
        for parent in ancestors(node)
        if parent.type == "jsx_element"
    )


def judge_markup_text(node: Node, ctx: LintContext) -> str | None:
    """Mark a JSX child exempt, then judge its own text."""
    text = literal_value(node).strip()
    ctx.exempt.add(node)

    if not text or ctx.whitelist.matches(text):
        return None
    if in_pass_through_component(node) or is_allowed_markup_symbol(text):
        return None
    return text


# =============================================================================
# Terminal rules
# =============================================================================


def judge_template(node: Node, ctx: LintContext) -> str | None:
    if node in ctx.exempt:
        return None
    text = template_static_text(node).strip()
    if is_all_upper(text):
        return None
    if ctx.whitelist.matches(text) or not looks_like_human_text(text):
        return None
    return text


def judge_string(node: Node, ctx: LintContext) -> str | None:
    if node in ctx.exempt:
        return None
    text = string_value(node).strip()
    if is_trivial_or_empty(text):
        return None
    # allow const a = "FOO"
    if is_all_upper(text):
        return None
    if ctx.whitelist.matches(text) or not looks_like_human_text(text):
        return None
    # var a: 'abc' = 'abc'
    if ctx.type_query.is_named_literal_type(node):
        return None
    return text


TERMINAL_RULES: dict[str, Callable[[Node, LintContext], str | None]] = {
    "string": judge_string,
    "template": judge_template,
}
