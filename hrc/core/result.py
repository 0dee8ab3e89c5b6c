"""
Processing result models.

Both records are created once at the end of a run and are not modified
afterwards: sequences are stored as tuples and per-level counts as a
read-only mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class ProcessingSummary:
    """Counts describing a single renumbering run.

    Attributes:
        total_lines: Number of input lines.
        transformed_lines_count: Lines rewritten by some level.
        multi_match_warning_count: Lines that matched more than one level.
        level_match_counts: Transformations per 1-based level index.
        levels_with_zero_matches: Sorted level indices that never won a line.
        skipped_out_of_order_count: Kept for the result shape; never set.
    """

    total_lines: int = 0
    transformed_lines_count: int = 0
    multi_match_warning_count: int = 0
    level_match_counts: Mapping[int, int] = field(default_factory=dict)
    levels_with_zero_matches: tuple[int, ...] = ()
    skipped_out_of_order_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "level_match_counts", MappingProxyType(dict(self.level_match_counts))
        )
        object.__setattr__(
            self, "levels_with_zero_matches", tuple(self.levels_with_zero_matches)
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "total_lines": self.total_lines,
            "transformed_lines_count": self.transformed_lines_count,
            "skipped_out_of_order_count": self.skipped_out_of_order_count,
            "multi_match_warning_count": self.multi_match_warning_count,
            "level_match_counts": {
                str(level): count for level, count in self.level_match_counts.items()
            },
            "levels_with_zero_matches": list(self.levels_with_zero_matches),
        }


@dataclass(frozen=True)
class ProcessingResult:
    """Output of ``process_lines``.

    Attributes:
        output_lines: One output line per input line, in order.
        warnings: Human-readable warnings, in line order.
        summary: Aggregate counts for the run.
    """

    output_lines: tuple[str, ...]
    warnings: tuple[str, ...]
    summary: ProcessingSummary

    def __post_init__(self) -> None:
        object.__setattr__(self, "output_lines", tuple(self.output_lines))
        object.__setattr__(self, "warnings", tuple(self.warnings))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "output_lines": list(self.output_lines),
            "warnings": list(self.warnings),
            "summary": self.summary.to_dict(),
        }
