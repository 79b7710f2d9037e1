# === FILE: tennis_results/parser/next_data.py ===
"""Extraction of the Next.js ``__NEXT_DATA__`` blob from result pages.

Next.js inlines its page props like::

    <script id="__NEXT_DATA__" type="application/json">{...}</script>

The scan is a single regular-expression pass over the raw markup: first
occurrence only, not nesting-aware. A missing tag and unparsable content are
indistinguishable to callers of :func:`extract_next_data`; both give ``None``.
:func:`parse_embedded_json` keeps the failure reason for logging.

:func:`html_hints` is computed independently of extraction so that pages which
do not follow the convention (Nuxt, plain server-rendered HTML) can still be
diagnosed from the committed debug output.
"""
from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from tennis_results.logger import logger
from tennis_results.models import HtmlHints, JSONValue

__all__: Sequence[str] = (
    "ParseOutcome",
    "reject_constant",
    "parse_embedded_json",
    "extract_next_data",
    "html_hints",
)

NEXT_DATA_MARKER = "__NEXT_DATA__"
NUXT_MARKER = "__NUXT__"

_NEXT_DATA_RE = re.compile(r'<script[^>]*id="__NEXT_DATA__"[^>]*>(.*?)</script>', re.DOTALL)
_TITLE_RE = re.compile(r"<title>(.*?)</title>", re.IGNORECASE)


@dataclass(slots=True, frozen=True)
class ParseOutcome:
    """Either a decoded value or the reason decoding failed."""

    value: JSONValue = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def reject_constant(name: str) -> None:
    """``parse_constant`` hook: NaN, Infinity and -Infinity are not JSON."""
    raise ValueError(f"non-standard JSON constant {name}")


def parse_embedded_json(text: str) -> ParseOutcome:
    try:
        return ParseOutcome(value=json.loads(text, parse_constant=reject_constant))
    except ValueError as exc:
        return ParseOutcome(error=str(exc))


def extract_next_data(html: str) -> JSONValue | None:
    """Return the decoded ``__NEXT_DATA__`` payload or ``None``."""
    match = _NEXT_DATA_RE.search(html)
    if match is None:
        return None
    outcome = parse_embedded_json(match.group(1))
    if not outcome.ok:
        logger.debug("Embedded %s is not valid JSON: %s", NEXT_DATA_MARKER, outcome.error)
        return None
    return outcome.value


def html_hints(html: str) -> HtmlHints:
    title_match = _TITLE_RE.search(html)
    return HtmlHints(
        length=len(html),
        has_next_data_tag=NEXT_DATA_MARKER in html,
        has_nuxt=NUXT_MARKER in html,
        title=(title_match.group(1) if title_match else None) or None,
    )
