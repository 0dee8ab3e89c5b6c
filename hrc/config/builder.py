"""
Level configuration builder.

Turns raw level specs, as entered by an operator or read from a level
file, into validated ``LevelConfig`` values. Patterns are anchored at the
start of the line and compiled here, so the engine never compiles or
validates anything itself.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hrc.core.levels import (
    MARKER_CHAR,
    AutoIncrement,
    CaptureGroup,
    CounterKind,
    IdentifierPolicy,
    LevelConfig,
)

logger = logging.getLogger(__name__)

MODE_CAPTURE = "capture"
MODE_AUTO = "auto"

_NUMERIC_SEED_RE = re.compile(r"[0-9]+")
_LOWER_SEED_RE = re.compile(r"[a-z]+")
_UPPER_SEED_RE = re.compile(r"[A-Z]+")
# Leading global inline flags, e.g. "(?i)" or "(?im)(?x)"
_GLOBAL_FLAGS_RE = re.compile(r"(?:\(\?[aiLmsux]+\))*")


class LevelConfigError(Exception):
    """Raised when a level spec cannot be turned into a configuration."""

    def __init__(self, message: str, level: int | None = None, details: str | None = None):
        self.level = level
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "level": self.level,
            "details": self.details,
        }


@dataclass
class LevelSpec:
    """Raw, unvalidated settings for one level.

    Attributes:
        pattern: Regular expression; anchored with ``^`` if it is not already.
        item_type: Label written in front of rewritten lines.
        marker: Marker token, one or more ``*`` (level 1 only).
        mode: ``"capture"`` or ``"auto"``.
        counter_kind: Counter alphabet for auto mode.
        seed: First counter value for auto mode; defaults per kind.
    """

    pattern: str
    item_type: str
    marker: str = ""
    mode: str = MODE_CAPTURE
    counter_kind: str = CounterKind.NUMERIC.value
    seed: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "pattern": self.pattern,
            "item_type": self.item_type,
            "marker": self.marker,
            "mode": self.mode,
            "counter_kind": self.counter_kind,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LevelSpec:
        """Deserialize from dictionary."""
        seed = data.get("seed")
        return cls(
            pattern=str(data.get("pattern") or ""),
            item_type=str(data.get("item_type") or ""),
            marker=str(data.get("marker") or ""),
            mode=str(data.get("mode") or MODE_CAPTURE),
            counter_kind=str(data.get("counter_kind") or CounterKind.NUMERIC.value),
            seed=None if seed is None else str(seed),
        )


def anchor_pattern(pattern: str) -> str:
    """Anchor ``pattern`` at the start of the line.

    The ``^`` goes after any leading inline flag groups such as ``(?i)``,
    which must stay at the very start of the expression.
    """
    flags = _GLOBAL_FLAGS_RE.match(pattern).group(0)
    body = pattern[len(flags):]
    if body.startswith("^"):
        return pattern
    return flags + "^" + body


def build_level_config(spec: LevelSpec, level_index: int) -> LevelConfig:
    """Validate one level spec.

    Args:
        spec: Raw level settings.
        level_index: 1-based position of the level.

    Returns:
        The validated, compiled level configuration.

    Raises:
        LevelConfigError: If any field is invalid.
    """
    raw_pattern = (spec.pattern or "").strip()
    if not raw_pattern:
        raise LevelConfigError("RegEx pattern is required.", level=level_index)

    anchored = anchor_pattern(raw_pattern)
    try:
        matcher = re.compile(anchored)
    except re.error as exc:
        raise LevelConfigError(
            f"Invalid regex: {exc}", level=level_index, details=anchored
        ) from exc

    mode = (spec.mode or MODE_CAPTURE).strip().lower()
    if mode not in (MODE_CAPTURE, MODE_AUTO):
        raise LevelConfigError(
            f"Unknown identifier mode: {spec.mode!r}",
            level=level_index,
            details=f"Expected one of: {MODE_CAPTURE}, {MODE_AUTO}",
        )

    if mode == MODE_CAPTURE and matcher.groups != 1:
        raise LevelConfigError(
            "RegEx must contain exactly one capturing group.",
            level=level_index,
            details=f"Found {matcher.groups} capturing group(s)",
        )

    item_type = (spec.item_type or "").strip()
    if not item_type:
        raise LevelConfigError("Item type name is required.", level=level_index)

    marker = ""
    if level_index == 1:
        marker = (spec.marker or "").strip()
        if not _is_marker(marker):
            raise LevelConfigError(
                "Please enter one or more asterisks (*).", level=level_index
            )

    policy: IdentifierPolicy
    if mode == MODE_AUTO:
        policy = _build_auto_policy(spec, level_index)
    else:
        policy = CaptureGroup()

    return LevelConfig(
        level_index=level_index,
        pattern=anchored,
        matcher=matcher,
        item_type=item_type,
        policy=policy,
        marker=marker,
    )


def build_level_configs(specs: Sequence[LevelSpec]) -> list[LevelConfig]:
    """Validate an ordered list of level specs, level 1 first.

    Raises:
        LevelConfigError: On the first invalid level, or if ``specs`` is empty.
    """
    if not specs:
        raise LevelConfigError("At least one level is required.")
    configs = [build_level_config(spec, i) for i, spec in enumerate(specs, start=1)]
    logger.debug("Built %d level configuration(s)", len(configs))
    return configs


def validate_level_specs(specs: Sequence[LevelSpec]) -> list[LevelConfigError]:
    """Validate every level and collect all errors.

    Returns:
        One error per invalid level. Empty list means valid.
    """
    if not specs:
        return [LevelConfigError("At least one level is required.")]

    errors: list[LevelConfigError] = []
    for i, spec in enumerate(specs, start=1):
        try:
            build_level_config(spec, i)
        except LevelConfigError as exc:
            errors.append(exc)
    return errors


def load_level_specs(path: Path) -> list[LevelSpec]:
    """Read level specs from a JSON level file.

    The file holds either a list of level objects or an object with a
    ``levels`` list.

    Raises:
        LevelConfigError: If the file is missing or malformed.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except FileNotFoundError as exc:
        raise LevelConfigError(
            f"Level file not found: {path}", details=str(exc)
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LevelConfigError(
            f"Could not read level file: {path}", details=str(exc)
        ) from exc
    except json.JSONDecodeError as exc:
        raise LevelConfigError(
            f"Level file is not valid JSON: {path}", details=str(exc)
        ) from exc

    if isinstance(data, dict):
        data = data.get("levels")
    if not isinstance(data, list):
        raise LevelConfigError(
            "Level file must contain a list of levels.", details=str(path)
        )

    specs: list[LevelSpec] = []
    for i, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise LevelConfigError("Level entry is not an object.", level=i)
        specs.append(LevelSpec.from_dict(item))
    return specs


def _build_auto_policy(spec: LevelSpec, level_index: int) -> AutoIncrement:
    try:
        kind = CounterKind(spec.counter_kind)
    except ValueError as exc:
        valid = ", ".join(k.value for k in CounterKind)
        raise LevelConfigError(
            f"Unknown counter kind: {spec.counter_kind!r}",
            level=level_index,
            details=f"Expected one of: {valid}",
        ) from exc

    seed = kind.default_seed if spec.seed is None else spec.seed.strip()
    if not _is_valid_seed(seed, kind):
        raise LevelConfigError(
            f"Seed {seed!r} is not a valid {kind.value} counter value.",
            level=level_index,
        )
    return AutoIncrement(kind=kind, seed=seed)


def _is_marker(token: str) -> bool:
    return bool(token) and all(c == MARKER_CHAR for c in token)


def _is_valid_seed(seed: str, kind: CounterKind) -> bool:
    if kind is CounterKind.NUMERIC:
        return bool(_NUMERIC_SEED_RE.fullmatch(seed))
    if kind is CounterKind.ALPHA_LOWER:
        return bool(_LOWER_SEED_RE.fullmatch(seed))
    return bool(_UPPER_SEED_RE.fullmatch(seed))
