"""
Line classification against the configured levels.

Every level is tried, in ascending order, so that lines matching more
than one level can be reported. The lowest-indexed match wins.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from hrc.core.levels import LevelConfig


@dataclass
class LevelMatch:
    """A single level that matched a line."""

    level: LevelConfig
    match: re.Match[str]

    @property
    def level_index(self) -> int:
        return self.level.level_index


@dataclass
class LineClassification:
    """All level matches for one line.

    Attributes:
        matches: Matching levels in ascending level order (never empty).
    """

    matches: list[LevelMatch]

    @property
    def winner(self) -> LevelMatch:
        """The lowest-indexed matching level."""
        return self.matches[0]

    @property
    def matched_levels(self) -> list[int]:
        return [m.level_index for m in self.matches]

    @property
    def is_ambiguous(self) -> bool:
        return len(self.matches) > 1

    def warning_for_line(self, line_number: int) -> str:
        """Format the multiple-match warning for a 1-based line number."""
        levels = ", ".join(str(level) for level in self.matched_levels)
        return f"Line {line_number} matched multiple levels: {levels}"


def classify_line(
    line: str, levels: Sequence[LevelConfig]
) -> LineClassification | None:
    """Match a line against every level.

    Args:
        line: Raw input line.
        levels: Level configurations in ascending index order.

    Returns:
        The classification, or None when no level matches.
    """
    matches: list[LevelMatch] = []
    for level in levels:
        match = level.matcher.match(line)
        if match:
            matches.append(LevelMatch(level=level, match=match))

    if not matches:
        return None
    return LineClassification(matches=matches)
