"""Tree-sitter language loading and parsing.

Grammars are imported lazily and parsers are cached per language.
"""

from pathlib import Path

from tree_sitter import Language, Parser, Tree

# Lazy imports for tree-sitter language bindings
_LANGUAGES: dict[str, Language] = {}
_PARSERS: dict[str, Parser] = {}


def _get_language(name: str) -> Language | None:
    """Lazily load tree-sitter language bindings."""
    if name in _LANGUAGES:
        return _LANGUAGES[name]

    if name == "typescript":
        import tree_sitter_typescript as ts_typescript

        _LANGUAGES[name] = Language(ts_typescript.language_typescript())
    elif name == "tsx":
        import tree_sitter_typescript as ts_typescript

        _LANGUAGES[name] = Language(ts_typescript.language_tsx())
    elif name == "javascript":
        import tree_sitter_javascript as ts_javascript

        _LANGUAGES[name] = Language(ts_javascript.language())
    else:
        return None

    return _LANGUAGES[name]


# File extension to language mapping
EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}

SUPPORTED_EXTENSIONS = frozenset(EXTENSION_TO_LANGUAGE)

# Languages whose sources carry type annotations
TYPED_LANGUAGES = frozenset({"typescript", "tsx"})


def language_for_path(filepath: Path) -> str | None:
    """Return the grammar name for a file, or None if unsupported."""
    return EXTENSION_TO_LANGUAGE.get(filepath.suffix.lower())


def get_parser(language: str) -> Parser:
    """Get the cached parser for a language.

    Raises:
        ValueError: If no grammar is known for the language.
    """
    parser = _PARSERS.get(language)
    if parser is None:
        ts_language = _get_language(language)
        if ts_language is None:
            raise ValueError(f"Unsupported language: {language}")
        parser = Parser(ts_language)
        _PARSERS[language] = parser
    return parser


def parse_source(source: str | bytes, language: str) -> Tree:
    """Parse source text with the grammar for ``language``."""
    if isinstance(source, str):
        source = source.encode("utf-8")
    return get_parser(language).parse(source)
