# tennis_results/models.py
"""
Data models for tennis_results: fetch results, debug records and the
persisted state document.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]

_KNOWN_KEYS = ("lastUpdated", "sources", "matches", "debug")


@dataclass(slots=True)
class FetchResult:
    """Raw outcome of one GET: status and body text, or the captured error."""

    url: str
    status: Optional[int] = None
    body: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class HtmlHints:
    """Markers that help diagnose pages without the expected embedded data."""

    length: int
    has_next_data_tag: bool
    has_nuxt: bool
    title: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": self.length,
            "hasNextDataTag": self.has_next_data_tag,
            "hasNuxt": self.has_nuxt,
            "title": self.title,
        }


@dataclass(slots=True)
class FetchRecord:
    """Debug entry for one source URL attempted during a run."""

    url: str
    http_status: Optional[int] = None
    has_next_data: bool = False
    next_data_top_level: Optional[JSONValue] = None
    html_hints: Optional[HtmlHints] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, url: str, error: str) -> FetchRecord:
        return cls(url=url, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"url": self.url, "error": self.error}
        return {
            "url": self.url,
            "httpStatus": self.http_status,
            "hasNextData": self.has_next_data,
            "nextDataTopLevel": self.next_data_top_level,
            "htmlHints": self.html_hints.to_dict() if self.html_hints else None,
        }


@dataclass(slots=True)
class PersistedState:
    """The single document kept on disk between runs.

    Unknown top-level keys found in the file are kept in ``extra`` and written
    back unchanged.
    """

    last_updated: Optional[str] = None
    sources: List[str] = field(default_factory=list)
    matches: List[Any] = field(default_factory=list)
    debug: Optional[List[Dict[str, Any]]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> PersistedState:
        """Build a state from decoded JSON, coercing malformed fields."""
        last_updated = data.get("lastUpdated")
        sources = data.get("sources")
        matches = data.get("matches")
        debug = data.get("debug")
        return cls(
            last_updated=last_updated if isinstance(last_updated, str) else None,
            sources=[s for s in sources if isinstance(s, str)] if isinstance(sources, list) else [],
            matches=matches if isinstance(matches, list) else [],
            debug=debug if isinstance(debug, list) else None,
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "lastUpdated": self.last_updated,
            "sources": list(self.sources),
            "matches": self.matches if isinstance(self.matches, list) else [],
        }
        if self.debug is not None:
            out["debug"] = self.debug
        out.update(self.extra)
        return out
