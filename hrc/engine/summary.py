"""Run-level counts and warnings."""

from __future__ import annotations

from hrc.core.result import ProcessingSummary


class SummaryAggregator:
    """Accumulates counts and warnings during a single pass.

    Args:
        level_indices: Configured 1-based level indices.
        total_lines: Number of lines in the input.

    Example::

        aggregator = SummaryAggregator([1, 2], total_lines=10)
        aggregator.record_transformation(1)
        summary = aggregator.build()
    """

    def __init__(self, level_indices: list[int], total_lines: int) -> None:
        self._total_lines = total_lines
        self._transformed = 0
        self._multi_match = 0
        self._level_counts: dict[int, int] = {index: 0 for index in level_indices}
        self._warnings: list[str] = []

    @property
    def warnings(self) -> list[str]:
        return list(self._warnings)

    def record_multi_match(self, warning: str) -> None:
        """Record a line that matched more than one level."""
        self._multi_match += 1
        self._warnings.append(warning)

    def record_transformation(self, level_index: int) -> None:
        """Record a line rewritten by ``level_index``."""
        self._transformed += 1
        self._level_counts[level_index] = self._level_counts.get(level_index, 0) + 1

    def build(self) -> ProcessingSummary:
        """Produce the final summary for the pass.

        Returns:
            ProcessingSummary with ``levels_with_zero_matches`` computed.
        """
        zero_matches = sorted(
            index for index, count in self._level_counts.items() if count == 0
        )
        return ProcessingSummary(
            total_lines=self._total_lines,
            transformed_lines_count=self._transformed,
            multi_match_warning_count=self._multi_match,
            level_match_counts=dict(self._level_counts),
            levels_with_zero_matches=zero_matches,
        )
