"""Grapheme-cluster column helpers.

Columns count user-perceived characters, never bytes or code points, so
every slice of a line goes through ``grapheme`` and every on-screen width
through ``wcwidth``.
"""

from __future__ import annotations

from typing import Tuple

import grapheme
import wcwidth as _wcwidth


def grapheme_count(text: str) -> int:
    return grapheme.length(text)


def split_at(text: str, col: int) -> Tuple[str, str]:
    """Return ``(prefix, suffix)`` split after ``col`` grapheme clusters."""

    if col <= 0:
        return "", text
    prefix = grapheme.slice(text, 0, col)
    return prefix, text[len(prefix):]


def delete_before(text: str, col: int) -> str:
    """Remove the grapheme cluster just before ``col``."""

    if col <= 0:
        return text
    head, tail = split_at(text, col)
    return grapheme.slice(head, 0, grapheme.length(head) - 1) + tail


def display_width(text: str) -> int:
    """Terminal columns needed to show ``text`` (control characters count 0)."""

    total = 0
    for cluster in grapheme.graphemes(text):
        width = _wcwidth.wcswidth(cluster)
        if width < 0:
            width = max(_wcwidth.wcwidth(cluster[0]), 0)
        total += width
    return total


__all__ = ["grapheme_count", "split_at", "delete_before", "display_width"]
