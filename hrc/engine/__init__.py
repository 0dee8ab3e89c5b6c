"""
Renumbering engine.

Classifies lines against level rules, resolves identifiers, and rewrites
matching lines into outline form.
"""

from hrc.engine.counters import advance_counter
from hrc.engine.processor import process_lines
from hrc.engine.state import HierarchyState
from hrc.engine.summary import SummaryAggregator

__all__ = [
    "HierarchyState",
    "SummaryAggregator",
    "advance_counter",
    "process_lines",
]
