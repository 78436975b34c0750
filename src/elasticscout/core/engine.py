"""ElasticScout Engine — Search and index synchronization for searchable records.

The engine is the single entry point tying the pieces together:
  1. Writes: ``update`` / ``delete`` batches through the bulk writer,
     creating the index on demand
  2. Reads: ``search`` / ``paginate`` compose the query DSL, execute it and
     normalize the response
  3. Mapping: ``map_ids`` / ``map`` / ``get_total_count`` turn normalized
     results into identities, records and counts
  4. Lifecycle: ``flush`` and the explicit ``create_index`` / ``delete_index``

The engine holds no per-call state; the client is shared and long-lived.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from opensearchpy.exceptions import OpenSearchException

from elasticscout.core.bulk import BulkWriter
from elasticscout.core.connection import create_client
from elasticscout.core.exceptions import QueryError
from elasticscout.core.indices import IndexManager
from elasticscout.core.mapper import ResultMapper
from elasticscout.core.query import build_filters, build_search_params
from elasticscout.models.bulk import IndexSchema
from elasticscout.models.request import SearchRequest
from elasticscout.models.result import SearchResults
from elasticscout.models.searchable import Searchable

if TYPE_CHECKING:
    from elasticscout.config.settings import Settings

logger = logging.getLogger(__name__)


class ElasticScoutEngine:
    """Search engine backed by an OpenSearch/Elasticsearch cluster.

    Example:
        >>> engine = ElasticScoutEngine.from_settings(Settings())
        >>> await engine.update(products)
        >>> results = await engine.search(SearchRequest(model=Product, query="red shoes"))
        >>> records = await engine.map(request, results)

    Attributes:
        client: The shared ``AsyncOpenSearch`` client.
        indices: Index lifecycle manager.
    """

    def __init__(self, client: Any) -> None:
        self.client = client
        self.indices = IndexManager(client)
        self._writer = BulkWriter(client, self.indices)
        self._mapper = ResultMapper()

    @classmethod
    def from_settings(cls, settings: Settings) -> ElasticScoutEngine:
        """Create an engine with a client built from ``settings.connection``."""
        return cls(create_client(settings.connection))

    async def close(self) -> None:
        """Close the underlying client."""
        await self.client.close()

    # ── Writes ───────────────────────────────────────────────────────────

    async def update(self, records: Sequence[Searchable]) -> None:
        """Upsert ``records`` into their index, creating it if needed."""
        await self._writer.upsert(records)

    async def delete(self, records: Sequence[Searchable]) -> None:
        """Remove ``records`` from their index."""
        await self._writer.delete(records)

    # ── Reads ────────────────────────────────────────────────────────────

    async def search(self, request: SearchRequest) -> SearchResults | Any:
        """Run ``request`` returning at most ``request.limit`` hits.

        Returns:
            Normalized results, or the raw callback's return value when the
            request carries one.
        """
        return await self._perform_search(
            request,
            filters=build_filters(request.wheres),
            size=request.limit,
        )

    async def paginate(self, request: SearchRequest, per_page: int, page: int) -> SearchResults | Any:
        """Run ``request`` for one 1-based page of ``per_page`` hits.

        ``nb_pages`` on the result is ``total / per_page`` and is left
        unrounded.

        Raises:
            ValueError: If ``per_page`` is less than 1; no request is sent.
        """
        if per_page < 1:
            raise ValueError(f"per_page must be at least 1, got {per_page}")

        result = await self._perform_search(
            request,
            filters=build_filters(request.wheres),
            size=per_page,
            offset=page * per_page - per_page,
        )
        if isinstance(result, SearchResults):
            result.nb_pages = result.total / per_page
        return result

    async def _perform_search(
        self,
        request: SearchRequest,
        *,
        filters: list[dict[str, Any]],
        size: int | None = None,
        offset: int | None = None,
    ) -> SearchResults | Any:
        params = build_search_params(request, filters=filters, size=size, offset=offset)

        if request.callback is not None:
            result = request.callback(self.client, params)
            if inspect.isawaitable(result):
                result = await result
            return result

        logger.debug("Searching index %s", params["index"])
        try:
            response = await self.client.search(**params)
        except OpenSearchException as e:
            raise QueryError(f"Search on index '{params['index']}' failed: {e}") from e

        return SearchResults.from_response(response)

    # ── Mapping ──────────────────────────────────────────────────────────

    def map_ids(self, results: SearchResults) -> list[str]:
        """Identities of the hits, in hit order."""
        return results.ids

    async def map(self, request: SearchRequest, results: SearchResults) -> list[Searchable]:
        """Load the records behind ``results``, in hit order, dropping stale hits."""
        return await self._mapper.map(request, results)

    def get_total_count(self, results: SearchResults) -> int:
        return results.total

    # ── Index lifecycle ──────────────────────────────────────────────────

    async def flush(self, model: type[Searchable]) -> None:
        """Drop every document of ``model`` by deleting its index; never raises."""
        await self.indices.flush(model.searchable_as())

    async def create_index(self, name: str, properties: dict[str, Any] | None = None) -> bool:
        return await self.indices.create_index(IndexSchema(name=name, properties=properties))

    async def delete_index(self, name: str) -> None:
        await self.indices.delete_index(name)
