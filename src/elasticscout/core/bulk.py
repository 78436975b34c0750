"""Bulk writes — Batched upsert and delete of searchable records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from opensearchpy.exceptions import OpenSearchException

from elasticscout.core.exceptions import BulkError
from elasticscout.core.indices import IndexManager
from elasticscout.models.bulk import BulkOperation, DeleteOperation, UpsertOperation, bulk_body
from elasticscout.models.searchable import Searchable

logger = logging.getLogger(__name__)


class BulkWriter:
    """Submits one bulk request per batch of records.

    Upserts first make sure the target index exists, creating it with the
    record type's field schema when it is missing. Item failures reported
    by the backend are raised as a single ``BulkError``; nothing is retried.

    Args:
        client: Shared ``AsyncOpenSearch`` client.
        indices: Index manager used to ensure the index before upserts.
    """

    def __init__(self, client: Any, indices: IndexManager) -> None:
        self._client = client
        self._indices = indices

    async def upsert(self, records: Sequence[Searchable]) -> None:
        """Create or update the documents for ``records``."""
        if not records:
            return

        model = type(records[0])
        await self._indices.ensure_index(model.searchable_as(), model.searchable_properties())

        operations = [
            UpsertOperation(
                id=str(record.search_key()),
                index=record.searchable_as(),
                document=record.to_searchable_dict(),
            )
            for record in records
        ]
        await self._submit(operations)

    async def delete(self, records: Sequence[Searchable]) -> None:
        """Remove the documents for ``records``."""
        if not records:
            return

        operations = [
            DeleteOperation(id=str(record.search_key()), index=record.searchable_as())
            for record in records
        ]
        await self._submit(operations)

    async def _submit(self, operations: Sequence[BulkOperation]) -> None:
        logger.debug("Submitting bulk request with %d operations", len(operations))
        try:
            response = await self._client.bulk(body=bulk_body(operations))
        except OpenSearchException as e:
            raise BulkError(f"Bulk request failed: {e}") from e

        if response.get("errors"):
            failed = [
                item
                for item in response.get("items", [])
                if any("error" in result for result in item.values())
            ]
            logger.warning("Bulk request reported %d failed items", len(failed))
            raise BulkError(f"Bulk request reported {len(failed)} failed items", items=failed)
