"""Walk parsed files and report literals that need translation.

The walker produces enter/exit events for every node. On entering a literal
the context rules run (and, for JSX children, the markup verdict); on exiting
it the terminal verdict runs. Exemptions live in a set scoped to a single
``lint_tree`` call.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from tree_sitter import Node, Tree

from untranslated import __version__
from untranslated.analyzers.ignore import create_should_ignore_func
from untranslated.analyzers.parser import (
    SUPPORTED_EXTENSIONS,
    TYPED_LANGUAGES,
    language_for_path,
    parse_source,
)
from untranslated.analyzers.rules import (
    TERMINAL_RULES,
    LintContext,
    find_exemption,
    is_markup_child,
    judge_markup_text,
)
from untranslated.analyzers.syntax import literal_kind
from untranslated.analyzers.types import DeclaredTypeQuery, NullTypeQuery, TypeQuery
from untranslated.analyzers.whitelist import Whitelist
from untranslated.logging import log_operation, logger, progress_bar
from untranslated.models import Diagnostic, LintOptions, LintReport, ReportMetadata

# Type declaration files carry no runtime strings
_DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")


def _walk(root: Node) -> Iterator[tuple[Node, bool]]:
    """Yield ``(node, entering)`` pairs in depth-first order.

    Every node is yielded once with ``entering=True`` before its children
    and once with ``entering=False`` after them.
    """
    stack: list[tuple[Node, bool]] = [(root, True)]
    while stack:
        node, entering = stack.pop()
        yield node, entering
        if entering:
            stack.append((node, False))
            stack.extend((child, True) for child in reversed(node.named_children))


def _make_diagnostic(node: Node, text: str, file: str) -> Diagnostic:
    return Diagnostic(
        file=file,
        line=node.start_point[0] + 1,
        column=node.start_point[1] + 1,
        end_line=node.end_point[0] + 1,
        end_column=node.end_point[1] + 1,
        kind=literal_kind(node),
        text=text,
    )


def default_type_query(tree: Tree, language: str, options: LintOptions) -> TypeQuery:
    """Pick the type query for a file: declared types for TypeScript, else none."""
    if options.type_aware and language in TYPED_LANGUAGES:
        return DeclaredTypeQuery(tree.root_node)
    return NullTypeQuery()


def lint_tree(
    tree: Tree,
    whitelist: Whitelist,
    type_query: TypeQuery | None = None,
    file: str = "<source>",
) -> list[Diagnostic]:
    """Lint an already parsed tree.

    Args:
        tree: tree-sitter tree of one source file.
        whitelist: Compiled allow-lists.
        type_query: Optional type lookup; defaults to ``NullTypeQuery``.
        file: Name recorded on each diagnostic.

    Returns:
        Diagnostics sorted by position.
    """
    ctx = LintContext(whitelist=whitelist, type_query=type_query or NullTypeQuery())
    diagnostics: list[Diagnostic] = []

    for node, entering in _walk(tree.root_node):
        kind = literal_kind(node)
        if kind is None:
            continue

        if entering:
            rule = find_exemption(node, whitelist)
            if rule is not None:
                ctx.exempt.add(node)
                logger.debug("  %s:%d exempt by %s", file, node.start_point[0] + 1, rule.name)
            if is_markup_child(node):
                text = judge_markup_text(node, ctx)
                if text is not None:
                    diagnostics.append(_make_diagnostic(node, text, file))
            continue

        judge = TERMINAL_RULES.get(kind)
        if judge is None:
            continue
        text = judge(node, ctx)
        if text is not None:
            diagnostics.append(_make_diagnostic(node, text, file))

    diagnostics.sort(key=lambda d: (d.line, d.column, d.end_line, d.end_column))
    return diagnostics


def lint_source(
    source: str | bytes,
    language: str = "tsx",
    options: LintOptions | None = None,
    whitelist: Whitelist | None = None,
    type_query: TypeQuery | None = None,
    file: str = "<source>",
) -> list[Diagnostic]:
    """Parse and lint one source text.

    Args:
        source: File contents.
        language: Grammar name ("typescript", "tsx" or "javascript").
        options: Lint options; defaults are used when omitted.
        whitelist: Pre-compiled allow-lists (compiled from ``options`` if None).
        type_query: Type lookup override (picked from ``options`` if None).
        file: Name recorded on each diagnostic.

    Returns:
        Diagnostics sorted by position.

    Raises:
        ValueError: If the language is not supported.
    """
    options = options or LintOptions()
    whitelist = whitelist or Whitelist.from_options(options)
    tree = parse_source(source, language)
    if type_query is None:
        type_query = default_type_query(tree, language, options)
    return lint_tree(tree, whitelist, type_query, file=file)


def lint_file(
    filepath: Path,
    base_dir: Path | None = None,
    options: LintOptions | None = None,
    whitelist: Whitelist | None = None,
) -> dict[str, Any]:
    """Lint a single file.

    Args:
        filepath: Path to the file.
        base_dir: Optional base directory for relative paths.
        options: Lint options.
        whitelist: Pre-compiled allow-lists shared across files.

    Returns:
        Dictionary with 'diagnostics' list, or 'error' and 'file' on failure.
    """
    language = language_for_path(filepath)
    if language is None:
        logger.debug("  Skipping %s: unsupported file type", filepath)
        return {"error": f"Unsupported file type: {filepath.suffix}", "file": str(filepath)}

    try:
        source = filepath.read_bytes()
    except OSError as e:
        return {"error": str(e), "file": str(filepath)}

    try:
        rel_path = str(filepath.relative_to(base_dir)) if base_dir else str(filepath)
    except ValueError:
        rel_path = str(filepath)

    options = options or LintOptions()
    whitelist = whitelist or Whitelist.from_options(options)
    tree = parse_source(source, language)
    if tree.root_node.has_error:
        logger.warning("  Syntax errors in %s, skipping", rel_path)
        return {"error": "Syntax error", "file": rel_path}

    type_query = default_type_query(tree, language, options)
    return {"diagnostics": lint_tree(tree, whitelist, type_query, file=rel_path)}


def _is_lintable(filepath: Path) -> bool:
    name = filepath.name.lower()
    return filepath.suffix.lower() in SUPPORTED_EXTENSIONS and not name.endswith(_DECLARATION_SUFFIXES)


def collect_files(directory: Path) -> list[Path]:
    """List lintable files under ``directory``, honoring ignore patterns."""
    is_ignored = create_should_ignore_func(directory)
    return sorted(
        filepath
        for filepath in directory.rglob("*")
        if filepath.is_file() and _is_lintable(filepath) and not is_ignored(filepath)
    )


def lint_directory(directory: Path, options: LintOptions | None = None) -> LintReport:
    """Lint every supported file in a directory.

    Args:
        directory: Path to the directory to scan.
        options: Lint options.

    Returns:
        LintReport with diagnostics, file_count, errors, and metadata.
    """
    directory = Path(directory).resolve()
    return _lint_files(collect_files(directory), directory, options, source_directory=str(directory))


def lint_paths(paths: Iterable[Path], options: LintOptions | None = None) -> LintReport:
    """Lint a mix of files and directories into one report."""
    options = options or LintOptions()
    diagnostics: list[Diagnostic] = []
    errors: list[dict[str, Any]] = []
    file_count = 0
    elapsed_ms = 0.0

    for path in paths:
        path = Path(path)
        if path.is_dir():
            report = lint_directory(path, options)
        else:
            report = _lint_files([path], None, options)
        diagnostics.extend(report.diagnostics)
        errors.extend(report.errors)
        file_count += report.file_count
        elapsed_ms += report.metadata.elapsed_ms

    return LintReport(
        diagnostics=diagnostics,
        file_count=file_count,
        errors=errors,
        metadata=ReportMetadata(
            version=__version__,
            total_diagnostics=len(diagnostics),
            elapsed_ms=elapsed_ms,
        ),
    )


def _lint_files(
    files: list[Path],
    base_dir: Path | None,
    options: LintOptions | None,
    source_directory: str | None = None,
) -> LintReport:
    options = options or LintOptions()
    whitelist = Whitelist.from_options(options)
    diagnostics: list[Diagnostic] = []
    errors: list[dict[str, Any]] = []

    with log_operation("lint", {"files": len(files), "root": source_directory or "-"}) as timing:
        for filepath in progress_bar(files, desc="Linting", total=len(files)):
            result = lint_file(filepath, base_dir=base_dir, options=options, whitelist=whitelist)
            if "error" in result:
                errors.append(result)
            else:
                diagnostics.extend(result["diagnostics"])

    return LintReport(
        diagnostics=diagnostics,
        file_count=len(files),
        errors=errors,
        metadata=ReportMetadata(
            version=__version__,
            source_directory=source_directory,
            total_diagnostics=len(diagnostics),
            elapsed_ms=timing.elapsed_ms,
        ),
    )
