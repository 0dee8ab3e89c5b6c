"""
Level configuration models.

A level is one rule of the outline: an anchored pattern, the label written
in front of matching lines, and the policy used to pick the identifier that
goes into the composite code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

# Character repeated to build the depth marker of a rewritten line
MARKER_CHAR = "*"


class CounterKind(str, Enum):
    """Alphabet used by an auto-increment counter."""

    NUMERIC = "numeric"
    ALPHA_LOWER = "alphaLower"
    ALPHA_UPPER = "alphaUpper"

    @property
    def default_seed(self) -> str:
        """First value of a counter of this kind when no seed is given."""
        return _DEFAULT_SEEDS[self]


_DEFAULT_SEEDS = {
    CounterKind.NUMERIC: "1",
    CounterKind.ALPHA_LOWER: "a",
    CounterKind.ALPHA_UPPER: "A",
}


@dataclass(frozen=True)
class CaptureGroup:
    """Take the identifier from the first capture group of the match."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"mode": "capture"}


@dataclass(frozen=True)
class AutoIncrement:
    """Generate the identifier from a counter scoped to the parent context.

    Attributes:
        kind: Counter alphabet.
        seed: First value, and the value restored on every reset.
    """

    kind: CounterKind = CounterKind.NUMERIC
    seed: str = "1"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"mode": "auto", "counter_kind": self.kind.value, "seed": self.seed}


IdentifierPolicy = Union[CaptureGroup, AutoIncrement]


@dataclass(frozen=True)
class LevelConfig:
    """Validated, read-only configuration for one outline level.

    Instances are normally produced by ``hrc.config.build_level_configs``,
    which guarantees the pattern is anchored and compiled, and that a
    capture-group level has exactly one capturing group.

    Attributes:
        level_index: 1-based position of the level.
        pattern: Anchored pattern text.
        matcher: Compiled ``pattern``.
        item_type: Label written at the start of rewritten lines.
        policy: How the identifier for this level is produced.
        marker: Marker token; only level 1's length is used.
    """

    level_index: int
    pattern: str
    matcher: re.Pattern[str]
    item_type: str
    policy: IdentifierPolicy
    marker: str = ""

    @property
    def base_marker_count(self) -> int:
        """Length of the configured marker token."""
        return len(self.marker)

    @property
    def is_auto_increment(self) -> bool:
        return isinstance(self.policy, AutoIncrement)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (the compiled matcher is omitted)."""
        return {
            "level_index": self.level_index,
            "pattern": self.pattern,
            "item_type": self.item_type,
            "marker": self.marker,
            **self.policy.to_dict(),
        }
