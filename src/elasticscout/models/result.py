"""Normalized search results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

ID_KEY = "_id"


class SearchResults(BaseModel):
    """Search response reduced to a total count and an ordered hit list.

    Each hit is the stored document with its backend identity injected
    under ``_id``. Hits keep the order the backend returned them in.
    """

    total: int = Field(default=0, ge=0, description="Total number of matching documents")
    hits: list[dict[str, Any]] = Field(default_factory=list, description="Documents in backend order")
    nb_pages: float | None = Field(
        default=None,
        description="total / per_page for paginated calls (not rounded)",
    )
    raw: dict[str, Any] = Field(default_factory=dict, description="Remaining response envelope (took, shards, ...)")

    @property
    def ids(self) -> list[str]:
        """Hit identities in order."""
        return [hit[ID_KEY] for hit in self.hits]

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> SearchResults:
        """Normalize a raw search response.

        ``hits.total`` is either a plain integer or an object of the form
        ``{"value": n, "relation": "eq"}`` depending on the backend version.
        """
        envelope = dict(response)
        hits = envelope.pop("hits", None) or {}

        total = hits.get("total", 0)
        if isinstance(total, dict):
            total = total.get("value", 0)

        documents = []
        for hit in hits.get("hits", []):
            data = dict(hit.get("_source") or {})
            data[ID_KEY] = hit["_id"]
            documents.append(data)

        return cls(total=total, hits=documents, raw=envelope)
