"""Operator-facing summary text for a processing run."""

from __future__ import annotations

from pathlib import Path

from hrc.core.result import ProcessingResult


def build_summary_text(result: ProcessingResult, output_path: Path | str) -> str:
    """Render the completion message shown after a file is processed.

    Args:
        result: Engine result.
        output_path: Where the output was written.

    Returns:
        Multi-line summary ending with a newline.
    """
    summary = result.summary
    lines = [
        "✓ Processing Complete!",
        "",
        f"Output file: {output_path}",
        f"Total lines: {summary.total_lines}",
        f"Lines altered: {summary.transformed_lines_count}",
        f"Skipped (out-of-order) lines: {summary.skipped_out_of_order_count}",
        f"Lines with multiple matches: {summary.multi_match_warning_count}",
    ]

    if summary.levels_with_zero_matches:
        levels = ", ".join(str(level) for level in summary.levels_with_zero_matches)
        lines.append("")
        lines.append(f"⚠ Warning: The following levels had zero matches: {levels}")

    if result.warnings:
        lines.append("")
        lines.append("Detailed warnings:")
        lines.extend(f" - {warning}" for warning in result.warnings)

    return "\n".join(lines) + "\n"
