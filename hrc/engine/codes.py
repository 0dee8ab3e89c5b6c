"""
Composite codes and depth markers.

Both are derived from the identifiers in effect from level 1 down to the
winning level; absent levels are skipped.
"""

from __future__ import annotations

from hrc.core.levels import MARKER_CHAR
from hrc.engine.state import HierarchyState


def parent_signature(state: HierarchyState, level: int) -> str:
    """Dot-joined identifiers of the ancestors of ``level``.

    Empty for level 1.
    """
    if level <= 1:
        return ""
    return ".".join(state.ancestor_ids(level - 1))


def composite_code(state: HierarchyState, level: int) -> str:
    """Dot-joined identifiers from level 1 through ``level``."""
    return ".".join(state.ancestor_ids(level))


def actual_depth(state: HierarchyState, level: int) -> int:
    """Number of levels 1..``level`` that currently hold an identifier."""
    return len(state.ancestor_ids(level))


def marker_length(base_marker_count: int, depth: int) -> int:
    """Length of the marker run for a line at ``depth``.

    Args:
        base_marker_count: Length of level 1's marker token.
        depth: Actual depth of the line.

    Returns:
        ``base_marker_count + depth - 1``, at least 1 when a base is set.
    """
    length = base_marker_count + depth - 1
    if base_marker_count >= 1:
        return max(length, 1)
    return max(length, 0)


def build_markers(base_marker_count: int, depth: int) -> str:
    return MARKER_CHAR * marker_length(base_marker_count, depth)
