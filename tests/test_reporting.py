"""Tests for the operator summary text."""

from __future__ import annotations

from hrc.core.result import ProcessingResult, ProcessingSummary
from hrc.reporting import build_summary_text


def _result(warnings=None, zero=None) -> ProcessingResult:
    warnings = warnings or []
    return ProcessingResult(
        output_lines=[],
        warnings=warnings,
        summary=ProcessingSummary(
            total_lines=10,
            transformed_lines_count=4,
            multi_match_warning_count=len(warnings),
            levels_with_zero_matches=zero or [],
        ),
    )


class TestBuildSummaryText:
    """Tests for build_summary_text."""

    def test_clean_run(self):
        """Test clean run."""
        text = build_summary_text(_result(), "out.processed.md")
        assert text == (
            "✓ Processing Complete!\n"
            "\n"
            "Output file: out.processed.md\n"
            "Total lines: 10\n"
            "Lines altered: 4\n"
            "Skipped (out-of-order) lines: 0\n"
            "Lines with multiple matches: 0\n"
        )

    def test_zero_match_levels_and_warnings(self):
        """Test zero match levels and warnings."""
        result = _result(
            warnings=["Line 3 matched multiple levels: 1, 2"],
            zero=[2, 4],
        )
        text = build_summary_text(result, "out.md")
        assert text.endswith(
            "Lines with multiple matches: 1\n"
            "\n"
            "⚠ Warning: The following levels had zero matches: 2, 4\n"
            "\n"
            "Detailed warnings:\n"
            " - Line 3 matched multiple levels: 1, 2\n"
        )
