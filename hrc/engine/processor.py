"""
Hierarchical line renumbering.

``process_lines`` makes one left-to-right pass over the document. Each
line is classified against the levels; lines that match are rewritten as

    <item type> <markers> :<composite code> <remainder>

where the composite code joins the identifiers of every open level and
the marker run grows with depth. Lines that match no level pass through
unchanged. State lives only for the duration of a call, so identical
inputs always give identical results.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from hrc.core.levels import LevelConfig
from hrc.core.result import ProcessingResult
from hrc.engine.classifier import classify_line
from hrc.engine.codes import actual_depth, build_markers, composite_code
from hrc.engine.resolver import resolve_identifier
from hrc.engine.rewriter import line_remainder, rewrite_line
from hrc.engine.state import HierarchyState
from hrc.engine.summary import SummaryAggregator

logger = logging.getLogger(__name__)


def process_lines(
    lines: Sequence[str], levels: Sequence[LevelConfig]
) -> ProcessingResult:
    """Renumber a document against an ordered list of levels.

    Args:
        lines: Input lines without line terminators.
        levels: Validated level configurations, level 1 first.

    Returns:
        ProcessingResult with one output line per input line, the
        multiple-match warnings and the run summary.
    """
    state = HierarchyState.for_levels(len(levels))
    aggregator = SummaryAggregator(
        [level.level_index for level in levels], total_lines=len(lines)
    )
    base_marker_count = levels[0].base_marker_count if levels else 0
    output_lines: list[str] = []

    for line_number, line in enumerate(lines, start=1):
        classification = classify_line(line, levels)
        if classification is None:
            output_lines.append(line)
            continue

        if classification.is_ambiguous:
            warning = classification.warning_for_line(line_number)
            logger.debug("%s", warning)
            aggregator.record_multi_match(warning)

        winner = classification.winner
        level = winner.level
        index = level.level_index

        resolve_identifier(level, winner.match, state)

        markers = build_markers(base_marker_count, actual_depth(state, index))
        code = composite_code(state, index)
        remainder = line_remainder(line, winner.match)

        output_lines.append(rewrite_line(level.item_type, markers, code, remainder))
        aggregator.record_transformation(index)

    summary = aggregator.build()
    logger.debug(
        "Processed %d lines: %d transformed, %d multi-match, zero-match levels %s",
        summary.total_lines,
        summary.transformed_lines_count,
        summary.multi_match_warning_count,
        summary.levels_with_zero_matches,
    )

    return ProcessingResult(
        output_lines=output_lines,
        warnings=aggregator.warnings,
        summary=summary,
    )
