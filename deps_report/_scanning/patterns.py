"""Compilation and matching of user-supplied regular expressions."""

import re
from typing import Iterable, List, Optional, Pattern

from deps_report.exceptions import InvalidPatternError


def compile_patterns(patterns: Optional[Iterable[str]]) -> List[Pattern[str]]:
    """
    Compile raw pattern strings into regular expressions.

    Args:
        patterns: Pattern strings, or None

    Returns:
        Compiled patterns; empty when no patterns are given

    Raises:
        InvalidPatternError: If any pattern fails to compile
    """
    if not patterns:
        return []

    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
    return compiled


def matches_any(patterns: Iterable[Pattern[str]], text: str) -> bool:
    """Return True if any pattern matches anywhere in text."""
    return any(pattern.search(text) for pattern in patterns)
