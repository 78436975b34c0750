"""Search request model."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from elasticscout.models.searchable import Searchable


class SearchRequest(BaseModel):
    """An abstract, backend-independent search request.

    ``wheres`` maps a key to one constraint. A constraint is either a plain
    value (exact match on the key) or a range triple
    ``(field, operator, value)`` with operator one of ``>``, ``>=``,
    ``<``, ``<=``. The pair ``(operator, value)`` is shorthand for a range
    on the key itself.

    When ``callback`` is set it replaces normal execution: it is called
    with the backend client and the composed parameters, and whatever it
    returns is handed back to the caller untouched.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    model: type[Searchable] = Field(description="Record type being searched")
    query: str = Field(default="", description="Free-text query; empty matches everything")
    wheres: dict[str, Any] = Field(default_factory=dict, description="Field constraints, one per key")
    orders: list[tuple[str, str]] = Field(default_factory=list, description="Ordered (field, direction) pairs")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of hits")
    index: str | None = Field(default=None, description="Index override; defaults to the model's index")
    callback: Callable[..., Any] | None = Field(
        default=None,
        description="Raw callback receiving (client, params); its result is returned verbatim",
    )

    @property
    def index_name(self) -> str:
        """Index the request runs against."""
        return self.index or self.model.searchable_as()
