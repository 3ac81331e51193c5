"""File and directory filtering for directory scans.

Configuration:
    - DEFAULT_IGNORES: dependency, build and VCS directories never worth linting
    - .untranslatedignore: per-project additions using gitignore-style lines
"""

from collections.abc import Callable
from pathlib import Path

from untranslated.logging import logger

DEFAULT_IGNORES: frozenset[str] = frozenset({
    # Version control
    ".git",
    ".svn",
    ".hg",
    # Dependencies
    "node_modules",
    "bower_components",
    "vendor",
    # Build outputs
    "dist",
    "build",
    "out",
    ".next",
    ".nuxt",
    ".output",
    ".svelte-kit",
    ".turbo",
    ".cache",
    ".parcel-cache",
    "storybook-static",
    # Test coverage
    "coverage",
    ".nyc_output",
    # Python tooling that lives next to front-end code
    "__pycache__",
    ".venv",
    "venv",
    # IDE
    ".idea",
    ".vscode",
})

UNTRANSLATEDIGNORE_FILENAME = ".untranslatedignore"


def parse_untranslatedignore(root: Path) -> set[str]:
    """Parse .untranslatedignore if it exists.

    Supports gitignore-style syntax:
    - Lines starting with # are comments
    - Empty lines are ignored
    - Patterns are directory or file names
    - Lines starting with ! are negations (not supported, skipped)

    Args:
        root: Directory being scanned.

    Returns:
        Set of patterns, empty if the file doesn't exist.
    """
    ignore_file = root / UNTRANSLATEDIGNORE_FILENAME
    if not ignore_file.exists():
        return set()

    patterns: set[str] = set()
    try:
        content = ignore_file.read_text(encoding="utf-8")
        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("!"):
                logger.debug("  Negation patterns not supported: %s", line)
                continue
            patterns.add(line.strip("/"))
    except OSError as e:
        logger.warning("  Failed to read %s: %s", ignore_file, e)

    return patterns


def load_ignore_patterns(root: Path) -> set[str]:
    """Combine the default ignores with the project's .untranslatedignore."""
    patterns = set(DEFAULT_IGNORES)
    custom_patterns = parse_untranslatedignore(root)
    if custom_patterns:
        patterns.update(custom_patterns)
        logger.debug("  Loaded %d patterns from %s", len(custom_patterns), UNTRANSLATEDIGNORE_FILENAME)
    return patterns


def should_ignore(path: Path, root: Path, patterns: set[str]) -> bool:
    """Check if a path should be skipped.

    A path is skipped when any of its parts relative to ``root`` equals a
    pattern, or when its relative POSIX path starts with a multi-segment
    pattern such as ``src/generated``.

    Args:
        path: Path to check.
        root: Scan root for relative path calculation.
        patterns: Set of ignore patterns.

    Returns:
        True if the path should be ignored.
    """
    try:
        rel_path = path.relative_to(root)
    except ValueError:
        # Path is outside the scan root
        return True

    if any(part in patterns for part in rel_path.parts):
        return True

    rel_posix = rel_path.as_posix()
    return any(
        "/" in pattern and (rel_posix == pattern or rel_posix.startswith(pattern + "/"))
        for pattern in patterns
    )


def create_should_ignore_func(
    root: Path,
    patterns: set[str] | None = None,
) -> Callable[[Path], bool]:
    """Create a callable for checking if paths under ``root`` should be ignored.

    Args:
        root: Scan root.
        patterns: Pre-computed patterns (if None, will load).

    Returns:
        Function that takes a Path and returns True if it should be ignored.
    """
    if patterns is None:
        patterns = load_ignore_patterns(root)

    def _should_ignore(path: Path) -> bool:
        return should_ignore(path, root, patterns)

    return _should_ignore
