"""Tree-sitter helpers for string-bearing nodes.

Covers literal kind detection, value extraction (quotes stripped, escapes
decoded, template substitutions removed) and ancestor navigation.
"""

import re
from collections.abc import Iterator

from tree_sitter import Node

# Literal node type -> kind
LITERAL_KINDS: dict[str, str] = {
    "string": "string",
    "template_string": "template",
    "jsx_text": "text",
}

JSX_TAG_TYPES = frozenset({"jsx_opening_element", "jsx_self_closing_element"})

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    # Line continuations
    "\n": "",
    "\r": "",
    "\r\n": "",
    "\u2028": "",
    "\u2029": "",
}


def _decode_escape(match: re.Match[str]) -> str:
    escape = match.group(1)
    if escape.startswith("u{"):
        return chr(int(escape[2:-1], 16))
    if escape[0] in "ux" and len(escape) > 1:
        return chr(int(escape[1:], 16))
    return _SIMPLE_ESCAPES.get(escape, escape)


def unescape(text: str) -> str:
    """Decode JavaScript string escape sequences."""
    if "\\" not in text:
        return text
    return _ESCAPE_RE.sub(_decode_escape, text)


def node_text(node: Node | None) -> str:
    """Return the source text of a node, or "" for None."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def literal_kind(node: Node) -> str | None:
    """Return "string", "template" or "text" for literal nodes, else None."""
    return LITERAL_KINDS.get(node.type)


def string_value(node: Node) -> str:
    """Value of a ``string`` node with quotes removed and escapes decoded.

    JSX attribute strings are returned verbatim since JSX has no escapes.
    """
    text = node_text(node)
    if len(text) >= 2 and text[0] in "'\"" and text[-1] == text[0]:
        text = text[1:-1]
    if node.parent is not None and node.parent.type == "jsx_attribute":
        return text
    return unescape(text)


def template_static_text(node: Node) -> str:
    """Concatenate the static segments of a template string.

    Every ``${...}`` substitution is dropped, so `Order ${id} confirmed`
    yields "Order  confirmed".
    """
    source = node.text or b""
    base = node.start_byte
    cursor = base + 1  # opening backtick
    pieces: list[bytes] = []
    for child in node.named_children:
        if child.type == "template_substitution":
            pieces.append(source[cursor - base:child.start_byte - base])
            cursor = child.end_byte
    pieces.append(source[cursor - base:node.end_byte - base - 1])
    return unescape(b"".join(pieces).decode("utf-8", errors="replace"))


def literal_value(node: Node) -> str:
    """Raw textual value of any literal node."""
    kind = literal_kind(node)
    if kind == "string":
        return string_value(node)
    if kind == "template":
        return template_static_text(node)
    return node_text(node)


def ancestors(node: Node) -> Iterator[Node]:
    """Yield the parents of ``node`` from nearest to the root."""
    current = node.parent
    while current is not None:
        yield current
        current = current.parent


def nearest_ancestor(node: Node, types: set[str] | frozenset[str]) -> Node | None:
    """Return the closest ancestor whose type is in ``types``."""
    for parent in ancestors(node):
        if parent.type in types:
            return parent
    return None


def syntactic_parent(node: Node) -> Node | None:
    """Parent of ``node`` with parenthesized expressions skipped."""
    parent = node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        parent = parent.parent
    return parent


def unwrap_parens(node: Node | None) -> Node | None:
    """Strip any parenthesized_expression wrappers around ``node``."""
    while node is not None and node.type == "parenthesized_expression":
        node = node.named_children[0] if node.named_children else None
    return node


def is_field(parent: Node, field_name: str, node: Node) -> bool:
    """True if ``node`` (or a parenthesized wrapper of it) fills ``field_name``."""
    child = parent.child_by_field_name(field_name)
    if child is None:
        return False
    inner = unwrap_parens(child)
    return inner is not None and inner.id == node.id


def is_tagged_template_call(node: Node) -> bool:
    """True for call_expression nodes that are really tagged templates."""
    if node.type != "call_expression":
        return False
    arguments = node.child_by_field_name("arguments")
    return arguments is not None and arguments.type == "template_string"


def jsx_element_name(element: Node) -> str | None:
    """Tag name of a JSX element, opening tag or self-closing tag.

    Returns None for fragments.
    """
    tag = element
    if element.type == "jsx_element":
        tag = element.child_by_field_name("open_tag") or (
            element.named_children[0] if element.named_children else None
        )
    if tag is None or tag.type not in JSX_TAG_TYPES:
        return None
    name = tag.child_by_field_name("name")
    return node_text(name) if name is not None else None


def jsx_attribute_name(attribute: Node) -> str | None:
    """Name of a jsx_attribute node (``className``, ``xlink:href``, ...)."""
    for child in attribute.named_children:
        if child.type in ("property_identifier", "jsx_namespace_name", "identifier"):
            return node_text(child)
    return None


def jsx_attribute_values(tag: Node) -> dict[str, str | None]:
    """Map attribute names of a JSX tag to their string values.

    Attributes without a plain string value map to None.
    """
    attributes: dict[str, str | None] = {}
    for child in tag.named_children:
        if child.type != "jsx_attribute":
            continue
        name = jsx_attribute_name(child)
        if name is None:
            continue
        value = None
        for part in child.named_children[1:]:
            if part.type == "string":
                value = string_value(part)
        attributes[name] = value
    return attributes
