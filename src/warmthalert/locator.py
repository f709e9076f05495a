# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Locate the warmth percentage in a UI element tree.

Walks every visible widget instead of hardcoding widget IDs, so it works with
different client layouts.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from warmthalert.constants import MAX_WARMTH, MIN_WARMTH, PCT_PATTERN, WARMTH_KEYWORD
from warmthalert.logging import get_logger
from warmthalert.widgets import UIElement, child_groups

logger = get_logger(__name__)


def parse_warmth(text: str | None) -> int | None:
    """Extract a warmth percentage from a single widget text.

    Matches "Your Warmth: 37%" as well as "Warmth: 37 %". Only the first
    percentage in the text is considered.

    Args:
        text: Widget text (may be None or empty)

    Returns:
        Percentage in [0, 100], or None if the text does not qualify
    """
    if not text:
        return None

    norm = text.lower().strip()
    if WARMTH_KEYWORD not in norm:
        return None

    match = PCT_PATTERN.search(norm)
    if not match:
        return None

    try:
        pct = int(match.group(1))
    except ValueError:
        return None

    if MIN_WARMTH <= pct <= MAX_WARMTH:
        return pct
    return None


def _walk(element: UIElement | None) -> Iterator[UIElement]:
    if element is None or element.hidden:
        return
    yield element
    for group in child_groups(element):
        for child in group:
            yield from _walk(child)


def iter_visible(roots: Iterable[UIElement | None] | None) -> Iterator[UIElement]:
    """Yield visible elements in pre-order.

    Children are visited dynamic group first, then static, then nested.
    Hidden elements are skipped together with their whole subtree.
    """
    if roots is None:
        return
    for root in roots:
        yield from _walk(root)


def locate(roots: Iterable[UIElement | None] | None) -> int | None:
    """Return the first warmth percentage found in the widget forest, or None."""
    for element in iter_visible(roots):
        warmth = parse_warmth(element.text)
        if warmth is not None:
            return warmth
    logger.debug("warmth_not_found")
    return None
