"""
Identifier resolution for the winning level of a line.

Capture-group levels take their identifier from the match. Auto-increment
levels keep a counter per level that restarts at its seed whenever the
identifiers of the ancestor levels change, and advances otherwise.
"""

from __future__ import annotations

import re

from hrc.core.levels import AutoIncrement, CaptureGroup, LevelConfig
from hrc.engine.codes import parent_signature
from hrc.engine.counters import advance_counter
from hrc.engine.state import HierarchyState


def resolve_identifier(
    level: LevelConfig,
    match: re.Match[str],
    state: HierarchyState,
) -> str:
    """Compute and record the identifier for ``level``.

    Updates ``state``: the level's identifier (and counter, for
    auto-increment levels) is stored and every deeper level is cleared.

    Args:
        level: The winning level.
        match: The winning level's match against the line.
        state: Per-run hierarchy state.

    Returns:
        The identifier assigned to the level.
    """
    policy = level.policy
    index = level.level_index

    if isinstance(policy, CaptureGroup):
        identifier = match.group(1) or ""
    elif isinstance(policy, AutoIncrement):
        identifier = _next_counter(index, policy, state)
    else:
        raise TypeError(f"Unknown identifier policy: {policy!r}")

    state.assign(index, identifier)
    return identifier


def _next_counter(index: int, policy: AutoIncrement, state: HierarchyState) -> str:
    signature = parent_signature(state, index)
    last_signature = state.parent_signature(index)

    if last_signature is None or last_signature != signature:
        token = policy.seed
        state.set_parent_signature(index, signature)
    else:
        current = state.counter(index)
        if current is None:
            current = policy.seed
        token = advance_counter(current, policy.kind)

    state.set_counter(index, token)
    return token
