import logging
import re
from functools import lru_cache

import pathspec

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> pathspec.PathSpec | None:
    """Compile a single gitignore-style pattern, or return None if it cannot be compiled."""
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", [pattern])
    except (ValueError, re.error) as e:
        logger.warning("Ignoring invalid pattern '%s': %s", pattern, e)
        return None


def matches(pattern: str, path: str) -> bool:
    """Return True if ``path`` matches ``pattern``.

    An invalid pattern matches nothing.
    """
    spec = compile_pattern(pattern)
    if spec is None:
        return False
    return spec.match_file(path)
