"""
Per-run hierarchy state.

Holds, for every configured level, the identifier currently in effect,
the auto-increment counter token, and the parent signature the counter
was last reset under. All accessors take 1-based level indices.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HierarchyState:
    """Mutable per-run record of the open outline path.

    Attributes:
        level_count: Number of configured levels.
        current_ids: Identifier in effect per level, or None.
        auto_counters: Last counter token per level, or None.
        parent_signatures: Parent signature the counter belongs to, or None.
    """

    level_count: int
    current_ids: list[str | None] = field(default_factory=list)
    auto_counters: list[str | None] = field(default_factory=list)
    parent_signatures: list[str | None] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.current_ids:
            self.current_ids = [None] * self.level_count
        if not self.auto_counters:
            self.auto_counters = [None] * self.level_count
        if not self.parent_signatures:
            self.parent_signatures = [None] * self.level_count

    @classmethod
    def for_levels(cls, level_count: int) -> HierarchyState:
        """Allocate an empty state with one slot per level."""
        return cls(level_count=level_count)

    def current_id(self, level: int) -> str | None:
        return self.current_ids[level - 1]

    def counter(self, level: int) -> str | None:
        return self.auto_counters[level - 1]

    def parent_signature(self, level: int) -> str | None:
        return self.parent_signatures[level - 1]

    def set_counter(self, level: int, token: str) -> None:
        self.auto_counters[level - 1] = token

    def set_parent_signature(self, level: int, signature: str) -> None:
        self.parent_signatures[level - 1] = signature

    def ancestor_ids(self, level: int) -> list[str]:
        """Present identifiers for levels 1..level, in ascending order.

        Empty identifiers (an empty capture group) count as absent.
        """
        return [ident for ident in self.current_ids[:level] if ident]

    def assign(self, level: int, identifier: str) -> None:
        """Set the identifier for a level and drop all deeper context.

        Args:
            level: 1-based level that produced a match.
            identifier: Identifier resolved for that level.
        """
        self.current_ids[level - 1] = identifier
        self.clear_below(level)

    def clear_below(self, level: int) -> None:
        """Forget identifiers, counters and signatures deeper than ``level``."""
        for i in range(level, self.level_count):
            self.current_ids[i] = None
            self.auto_counters[i] = None
            self.parent_signatures[i] = None
