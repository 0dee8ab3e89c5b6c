"""Core data models for HRC."""

from hrc.core.levels import (
    AutoIncrement,
    CaptureGroup,
    CounterKind,
    IdentifierPolicy,
    LevelConfig,
)
from hrc.core.result import ProcessingResult, ProcessingSummary

__all__ = [
    "AutoIncrement",
    "CaptureGroup",
    "CounterKind",
    "IdentifierPolicy",
    "LevelConfig",
    "ProcessingResult",
    "ProcessingSummary",
]
