"""Loading lint options from ``.untranslatedrc.json``.

The options file is a JSON object with the same keys as the rule options::

    {
        "ignore": ["^https?://"],
        "ignoreFunction": ["logger.info", "track"],
        "ignoreAttribute": ["testID"]
    }
"""

import json
from pathlib import Path

from pydantic import ValidationError

from untranslated.logging import logger
from untranslated.models import LintOptions

CONFIG_FILENAME = ".untranslatedrc.json"


class ConfigError(ValueError):
    """Raised when an options file cannot be read or is invalid."""


def find_config(start: Path) -> Path | None:
    """Look for the options file in ``start`` and its parents.

    Args:
        start: File or directory to start from.

    Returns:
        Path to the nearest options file, or None.
    """
    start = Path(start).resolve()
    directory = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_options(path: Path) -> LintOptions:
    """Read and validate an options file.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or fails validation.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    try:
        options = LintOptions.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid options in {path}: {e}") from e

    logger.debug("  Loaded options from %s", path)
    return options


def resolve_options(config_path: Path | None, search_from: Path | None = None) -> LintOptions:
    """Options from an explicit file, a discovered file, or defaults."""
    if config_path is not None:
        return load_options(config_path)
    if search_from is not None:
        found = find_config(search_from)
        if found is not None:
            return load_options(found)
    return LintOptions()
