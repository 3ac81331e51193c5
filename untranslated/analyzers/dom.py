"""Known non-text attributes of intrinsic HTML and SVG elements.

Answers "is this attribute of this element structural rather than visible
text?" for lower-case (intrinsic) JSX tags. Components are never covered;
their attributes can only be exempted through the configured attribute
allow-list.
"""

from collections.abc import Mapping

SVG_TAGS = frozenset({
    "svg", "g", "defs", "symbol", "use", "path", "rect", "circle", "ellipse",
    "line", "polyline", "polygon", "linearGradient", "radialGradient", "stop",
    "clipPath", "mask", "pattern", "filter", "feBlend", "feColorMatrix",
    "feComposite", "feFlood", "feGaussianBlur", "feMerge", "feMergeNode",
    "feOffset", "image", "marker", "foreignObject", "text", "tspan", "textPath",
})

# Attributes whose value is read by people even on SVG elements
TEXT_ATTRIBUTES = frozenset({
    "alt",
    "title",
    "placeholder",
    "label",
    "summary",
    "abbr",
    "aria-label",
    "aria-description",
    "aria-placeholder",
    "aria-roledescription",
    "aria-valuetext",
})

# Structural attributes valid on any HTML element
GLOBAL_ATTRIBUTES = frozenset({
    "accept",
    "acceptCharset",
    "action",
    "allow",
    "as",
    "autoCapitalize",
    "autoComplete",
    "charSet",
    "crossOrigin",
    "decoding",
    "dir",
    "download",
    "encType",
    "enterKeyHint",
    "fetchPriority",
    "form",
    "formAction",
    "formMethod",
    "href",
    "hrefLang",
    "htmlFor",
    "httpEquiv",
    "inputMode",
    "integrity",
    "key",
    "lang",
    "loading",
    "media",
    "method",
    "name",
    "pattern",
    "preload",
    "referrerPolicy",
    "rel",
    "role",
    "sandbox",
    "scope",
    "sizes",
    "slot",
    "src",
    "srcDoc",
    "srcLang",
    "srcSet",
    "step",
    "tabIndex",
    "target",
    "wrap",
    "xmlns",
})

# input types whose ``value`` is never shown as text
NON_TEXT_INPUT_TYPES = frozenset({
    "hidden", "checkbox", "radio", "color", "date", "datetime-local", "email",
    "file", "month", "number", "range", "tel", "time", "url", "week",
})

# Element-specific attributes that are structural
ELEMENT_ATTRIBUTES: dict[str, frozenset[str]] = {
    "option": frozenset({"value"}),
    "param": frozenset({"value"}),
    "data": frozenset({"value"}),
    "select": frozenset({"value", "defaultValue"}),
    "meter": frozenset({"value", "min", "max", "low", "high", "optimum"}),
    "progress": frozenset({"value", "max"}),
    "li": frozenset({"value"}),
    "time": frozenset({"dateTime"}),
    "del": frozenset({"dateTime", "cite"}),
    "ins": frozenset({"dateTime", "cite"}),
    "blockquote": frozenset({"cite"}),
    "q": frozenset({"cite"}),
    "object": frozenset({"data"}),
    "ol": frozenset({"start"}),
}


def is_intrinsic_tag(tag: str | None) -> bool:
    """True for lower-case tags such as ``div`` or ``svg``."""
    return bool(tag) and tag[0].islower() and "." not in tag


def is_allowed_dom_attribute(
    tag: str | None,
    attribute: str | None,
    attributes: Mapping[str, str | None] | None = None,
) -> bool:
    """Check whether ``attribute`` on ``tag`` holds structural, non-text data.

    Args:
        tag: JSX tag name of the enclosing element.
        attribute: Attribute name holding the literal.
        attributes: All attributes of the element mapped to their string
            values (None when not a plain string).

    Returns:
        True if the attribute value is not user-facing text.
    """
    if not is_intrinsic_tag(tag) or not attribute:
        return False
    attributes = attributes or {}

    if attribute in TEXT_ATTRIBUTES:
        return False

    if tag in SVG_TAGS:
        return True

    if attribute.startswith("data-"):
        return True
    if attribute.startswith("aria-"):
        return True
    if attribute in GLOBAL_ATTRIBUTES:
        return True
    if attribute in ELEMENT_ATTRIBUTES.get(tag, frozenset()):
        return True

    if tag == "input" and attribute in ("value", "defaultValue"):
        return (attributes.get("type") or "text") in NON_TEXT_INPUT_TYPES
    if tag == "meta" and attribute == "content":
        return "httpEquiv" in attributes or "charSet" in attributes

    return False
