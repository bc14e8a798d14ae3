"""Producer credit splitting.

A movie's producer credit is free text such as
``"Allan Carr, Jerry Weintraub and Ray Stark"``. Commas and the standalone
word "and" separate names; "and" inside a longer word never does.
"""

from __future__ import annotations

import re

_PRODUCER_SEPARATOR_RE = re.compile(r",|\band\b")


def split_producers(producers_raw: str | None) -> tuple[str, ...]:
    """Split a raw producer credit into individual producer names.

    Args:
        producers_raw: Raw producer credit, or None.

    Returns:
        Trimmed, non-empty producer names in credit order. Empty or missing
        input yields an empty tuple.
    """

    if producers_raw is None or not producers_raw.strip():
        return ()

    names = (part.strip() for part in _PRODUCER_SEPARATOR_RE.split(producers_raw))
    return tuple(name for name in names if name)
