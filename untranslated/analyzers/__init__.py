"""Analyzers for finding untranslated string literals."""

from untranslated.analyzers.content import (
    is_all_upper,
    is_trivial_or_empty,
    looks_like_human_text,
    matches_any_whitelist_pattern,
)
from untranslated.analyzers.dom import is_allowed_dom_attribute
from untranslated.analyzers.ignore import (
    DEFAULT_IGNORES,
    load_ignore_patterns,
    should_ignore,
)
from untranslated.analyzers.linter import (
    collect_files,
    lint_directory,
    lint_file,
    lint_paths,
    lint_source,
    lint_tree,
)
from untranslated.analyzers.parser import EXTENSION_TO_LANGUAGE, parse_source
from untranslated.analyzers.rules import CONTEXT_RULES, ContextRule, ExemptionSet
from untranslated.analyzers.types import DeclaredTypeQuery, NullTypeQuery, TypeQuery
from untranslated.analyzers.whitelist import Whitelist

__all__ = [
    # Content heuristics
    "is_all_upper",
    "is_trivial_or_empty",
    "looks_like_human_text",
    "matches_any_whitelist_pattern",
    "is_allowed_dom_attribute",
    # File selection
    "DEFAULT_IGNORES",
    "load_ignore_patterns",
    "should_ignore",
    # Linting
    "collect_files",
    "lint_directory",
    "lint_file",
    "lint_paths",
    "lint_source",
    "lint_tree",
    "EXTENSION_TO_LANGUAGE",
    "parse_source",
    # Rules and collaborators
    "CONTEXT_RULES",
    "ContextRule",
    "ExemptionSet",
    "DeclaredTypeQuery",
    "NullTypeQuery",
    "TypeQuery",
    "Whitelist",
]
