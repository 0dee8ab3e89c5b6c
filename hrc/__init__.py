"""
HRC - hierarchical line renumbering.

Rewrites pattern-matched lines of a document into a nested outline form
with composite dot-separated codes and auto-incrementing counters.
"""

__version__ = "0.1.0"
