"""Searchable record contract — The capabilities a record type exposes to the engine.

A record type that wants to be indexed and searched subclasses
``Searchable`` and provides:
  1. ``search_key()``: the identity stored as the document ``_id``
  2. ``searchable_as()``: the name of the index holding its documents
  3. ``to_searchable_dict()``: the field values written to the index

Two capabilities are optional and have explicit defaults:
  - ``searchable_properties()`` returns ``None`` when the type declares no
    field schema. Index creation then relies on dynamic mappings and
    free-text queries have no fields to match against.
  - ``resolve_by_ids()`` raises ``ConfigurationError`` when the type cannot
    be loaded back from its record store, so ``ElasticScoutEngine.map()``
    is unavailable for it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from elasticscout.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from elasticscout.models.request import SearchRequest

TEXT_FIELD_TYPE = "text"


class Searchable(ABC):
    """Abstract base class for records synchronized into a search index.

    Example:
        >>> class Product(BaseModel, Searchable):
        ...     id: int
        ...     name: str
        ...
        ...     def search_key(self) -> int:
        ...         return self.id
        ...
        ...     @classmethod
        ...     def searchable_as(cls) -> str:
        ...         return "products"
        ...
        ...     def to_searchable_dict(self) -> dict[str, Any]:
        ...         return {"name": self.name}
    """

    @abstractmethod
    def search_key(self) -> Any:
        """Identity of this record, used as the document ``_id``."""

    @classmethod
    @abstractmethod
    def searchable_as(cls) -> str:
        """Name of the index this record type is stored in."""

    @abstractmethod
    def to_searchable_dict(self) -> dict[str, Any]:
        """Field values to index for this record."""

    @classmethod
    def searchable_properties(cls) -> dict[str, dict[str, Any]] | None:
        """Field name to mapping descriptor, used only when creating the index.

        Returns:
            A mapping such as ``{"name": {"type": "text"}}``, or ``None``
            when the record type declares no schema.
        """
        return None

    @classmethod
    async def resolve_by_ids(
        cls,
        request: SearchRequest,
        ids: list[str],
    ) -> Mapping[str, Searchable] | Iterable[Searchable]:
        """Load records for the given identities from the record store.

        Args:
            request: The search request that produced the identities.
            ids: Document identities in hit order.

        Returns:
            Either a mapping keyed by identity or an iterable of records in
            any order. Identities with no record are simply absent.
        """
        raise ConfigurationError(f"{cls.__name__} does not support loading records by id")


def searchable_text_fields(model: type[Searchable]) -> list[str]:
    """Return the declared fields of ``model`` whose mapping type is ``text``."""
    properties = model.searchable_properties() or {}
    return [
        name
        for name, descriptor in properties.items()
        if isinstance(descriptor, Mapping) and descriptor.get("type") == TEXT_FIELD_TYPE
    ]
