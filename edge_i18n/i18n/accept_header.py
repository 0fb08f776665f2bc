"""
Accept-Language negotiation.

Picks the best configured locale for an ``Accept-Language`` header value:

1. Entries are ordered by quality value (default ``q=1``), then by the order
   of the configured locales, then by their position in the header.
2. ``q=0`` entries are refused outright.
3. A configured regional locale also answers for its language prefix
   (``en-US`` matches a plain ``en`` entry) unless the prefix is configured
   on its own.
4. ``*`` stands for every configured locale the header does not name.

Malformed entries are skipped so a garbled header degrades to "no match"
instead of failing the request.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

_WHITESPACE = re.compile(r"[ \t]")


@dataclass
class _Selection:
    token: str
    pos: int
    q: float = 1.0
    pref: int | None = None

    def sort_key(self) -> tuple[float, int, int, int]:
        # Entries without a configured preference sort after those with one.
        return (-self.q, 0 if self.pref is not None else 1, self.pref or 0, self.pos)


def _preference_index(supported: Sequence[str]) -> dict[str, tuple[str, int]]:
    """Map lower-cased locales and their prefixes to (original spelling, rank)."""
    lowers: dict[str, tuple[str, int]] = {}
    pos = 0
    for preference in supported:
        lower = preference.lower()
        lowers[lower] = (preference, pos)
        pos += 1
        parts = lower.split("-")
        while len(parts) > 1:
            parts.pop()
            joined = "-".join(parts)
            if joined not in lowers:
                lowers[joined] = (preference, pos)
                pos += 1
    return lowers


def _parse_quality(param: str) -> float | None:
    """Return the q-value of a ``q=...`` parameter, or None when malformed."""
    key, _, value = param.partition("=")
    if not value or key not in ("q", "Q"):
        return None
    try:
        score = float(value)
    except ValueError:
        return 1.0
    if score == 0:
        return 0.0
    if math.isfinite(score) and 0.001 <= score <= 1:
        return score
    return 1.0


def match_language(header: str | None, supported: Sequence[str]) -> str | None:
    """Return the configured locale that best matches ``header``.

    Args:
        header:    Value of the Accept-Language header, e.g.
                   "fr-CA,fr;q=0.9,en;q=0.7". ``None`` is treated as empty.
        supported: Configured locales, in preference order.

    Returns:
        The matching locale spelled as configured, or None.
    """
    if not header or not supported:
        return None

    lowers = _preference_index(supported)
    named: set[str] = set()
    selections: list[_Selection] = []

    for pos, part in enumerate(_WHITESPACE.sub("", header).split(",")):
        if not part:
            continue
        params = part.split(";")
        if len(params) > 2:
            continue
        token = params[0].lower()
        if not token:
            continue

        q = 1.0
        if len(params) == 2:
            parsed = _parse_quality(params[1])
            if parsed is None:
                continue
            q = parsed

        named.add(token)
        if q == 0:
            continue

        selection = _Selection(token=token, pos=pos, q=q)
        if token in lowers:
            selection.pref = lowers[token][1]
        selections.append(selection)

    selections.sort(key=_Selection.sort_key)

    for selection in selections:
        if selection.token == "*":
            for lower, (original, _) in lowers.items():
                if lower not in named:
                    return original
        elif selection.token in lowers:
            return lowers[selection.token][0]

    return None
