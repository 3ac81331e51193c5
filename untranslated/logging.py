"""Logging configuration for untranslated.

Logs go to stderr so that report output on stdout stays machine-readable.
Provides tqdm progress bars for directory scans.
"""

import logging
import os
import sys
import time
from collections.abc import Generator, Iterable
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TypeVar

from tqdm import tqdm

# - UNTRANSLATED_DISABLE_PROGRESS=1 explicitly disables progress bars
# - Non-TTY stderr also disables them (CI logs, pipes)
_DISABLE_PROGRESS = (
    os.getenv("UNTRANSLATED_DISABLE_PROGRESS", "").lower() in ("1", "true", "yes")
    or not sys.stderr.isatty()
)

logger = logging.getLogger("untranslated")
logger.setLevel(logging.INFO)

# Only add handler if not already configured
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "[untranslated] %(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def set_verbosity(verbose: int) -> None:
    """Raise or lower the package log level.

    Args:
        verbose: 0 for warnings only, 1 for info, 2 or more for debug.
    """
    if verbose >= 2:
        logger.setLevel(logging.DEBUG)
    elif verbose == 1:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)


@dataclass
class Timing:
    """Wall-clock duration of a logged operation, filled in when it ends."""

    started: float = field(default_factory=time.perf_counter)
    elapsed: float = 0.0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000


@contextmanager
def log_operation(
    operation: str,
    details: dict[str, Any] | None = None,
) -> Generator[Timing, None, None]:
    """Log the start and end of an operation and measure it.

    Args:
        operation: Name of the operation, e.g. "lint".
        details: Extra ``key=value`` pairs for the start message.

    Yields:
        Timing whose ``elapsed`` is set once the block exits, also on error.
    """
    suffix = "".join(f" {k}={v}" for k, v in (details or {}).items())
    logger.info("▶ Starting %s%s", operation, suffix)

    timing = Timing()
    try:
        yield timing
    except Exception as e:
        timing.elapsed = time.perf_counter() - timing.started
        logger.error("✗ %s failed after %.2fs: %s", operation, timing.elapsed, e)
        raise
    timing.elapsed = time.perf_counter() - timing.started
    logger.info("✓ Completed %s in %.2fs", operation, timing.elapsed)


T = TypeVar("T")


def progress_bar(
    iterable: Iterable[T],
    desc: str,
    total: int,
    unit: str = "files",
) -> Iterable[T]:
    """Show a tqdm bar on stderr while iterating, unless progress is disabled.

    Without a bar, large runs get one info line instead.
    """
    if _DISABLE_PROGRESS:
        if total > 100:
            logger.info("  %s %d %s...", desc, total, unit)
        return iterable

    return tqdm(
        iterable,
        desc=f"  {desc}",
        total=total,
        unit=unit,
        file=sys.stderr,
        ncols=80,
        leave=False,
    )
