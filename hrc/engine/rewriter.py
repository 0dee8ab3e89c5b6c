"""Assembly of rewritten outline lines."""

from __future__ import annotations

import re


def line_remainder(line: str, match: re.Match[str]) -> str:
    """Text of ``line`` after the matched prefix, verbatim.

    Returns an empty string when the match is longer than the line.
    """
    prefix_length = len(match.group(0))
    if prefix_length > len(line):
        return ""
    return line[prefix_length:]


def rewrite_line(item_type: str, markers: str, code: str, remainder: str) -> str:
    """Format an output line as ``<item_type> <markers> :<code> <remainder>``."""
    return item_type + " " + markers + " :" + code + " " + remainder
