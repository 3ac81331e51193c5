"""Type lookups consulted before reporting a plain string literal.

The linter depends only on the ``TypeQuery`` protocol. ``NullTypeQuery`` is
used when no type information is available (JavaScript sources, or type
awareness switched off) and never changes a decision.
``DeclaredTypeQuery`` approximates a type checker from the declarations of a
single TypeScript file: a literal is treated as typed when it sits in a
position whose declared type resolves to a set of string-literal types that
contains it, e.g.::

    type Mode = "Dark mode" | "Light mode"
    const mode: Mode = "Dark mode"
"""

from typing import Protocol

from tree_sitter import Node

from untranslated.analyzers.syntax import (
    is_field,
    node_text,
    string_value,
    syntactic_parent,
    unwrap_parens,
)

# Node types that carry a declared type for their ``value``
_ANNOTATED_VALUE_HOLDERS = frozenset({
    "variable_declarator",
    "public_field_definition",
    "required_parameter",
    "optional_parameter",
})

_TYPE_ASSERTIONS = frozenset({"as_expression", "satisfies_expression"})


class TypeQuery(Protocol):
    def is_named_literal_type(self, node: Node) -> bool:
        """True if the contextual type of ``node`` is a named string-literal type."""
        ...


class NullTypeQuery:
    """Type query used when no type information is available."""

    def is_named_literal_type(self, node: Node) -> bool:
        return False


class DeclaredTypeQuery:
    """File-local type query built from ``type`` alias declarations.

    Args:
        root: Root node of the parsed file.
    """

    def __init__(self, root: Node):
        self._aliases: dict[str, Node] = {}
        self._resolved: dict[str, frozenset[str] | None] = {}
        self._index_aliases(root)

    def _index_aliases(self, root: Node) -> None:
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "type_alias_declaration":
                name = node.child_by_field_name("name")
                value = node.child_by_field_name("value")
                if name is not None and value is not None:
                    self._aliases[node_text(name)] = value
            stack.extend(node.named_children)

    def literal_members(
        self,
        type_node: Node | None,
        seen: frozenset[str] = frozenset(),
    ) -> frozenset[str] | None:
        """Resolve a type node to the string literals it admits.

        Returns None when the type admits anything that is not a string
        literal (``string``, object types, unknown references, ...).
        """
        if type_node is None:
            return None

        kind = type_node.type
        if kind in ("type_annotation", "parenthesized_type"):
            inner = type_node.named_children[-1] if type_node.named_children else None
            return self.literal_members(inner, seen)

        if kind == "literal_type":
            inner = type_node.named_children[0] if type_node.named_children else None
            if inner is not None and inner.type == "string":
                return frozenset({string_value(inner)})
            return None

        if kind == "union_type":
            members: set[str] = set()
            for child in type_node.named_children:
                resolved = self.literal_members(child, seen)
                if resolved is None:
                    return None
                members |= resolved
            return frozenset(members)

        if kind == "type_identifier":
            return self._resolve_alias(node_text(type_node), seen)

        return None

    def alias_members(self, name: str) -> frozenset[str] | None:
        """Resolve a ``type`` alias declared in the file by name."""
        return self._resolve_alias(name, frozenset())

    def _resolve_alias(self, name: str, seen: frozenset[str]) -> frozenset[str] | None:
        if name in self._resolved:
            return self._resolved[name]
        if name in seen or name not in self._aliases:
            return None
        resolved = self.literal_members(self._aliases[name], seen | {name})
        self._resolved[name] = resolved
        return resolved

    def declared_type(self, node: Node) -> Node | None:
        """Find the type declared for the position ``node`` occupies."""
        parent = syntactic_parent(node)
        if parent is None:
            return None

        if parent.type in _TYPE_ASSERTIONS:
            children = parent.named_children
            operand = unwrap_parens(children[0]) if children else None
            if len(children) >= 2 and operand is not None and operand.id == node.id:
                return children[-1]
            return None

        if parent.type in _ANNOTATED_VALUE_HOLDERS:
            if not is_field(parent, "value", node):
                return None
            return parent.child_by_field_name("type")

        return None

    def is_named_literal_type(self, node: Node) -> bool:
        if node.type != "string":
            return False
        members = self.literal_members(self.declared_type(node))
        return members is not None and string_value(node) in members
