"""Result mapping — Re-hydrates search hits into records from the record store."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from elasticscout.models.request import SearchRequest
from elasticscout.models.result import SearchResults
from elasticscout.models.searchable import Searchable

logger = logging.getLogger(__name__)


class ResultMapper:
    """Turns normalized hits into records, keeping hit order.

    Records are loaded with a single ``resolve_by_ids`` call on the
    request's model. Identities the store no longer knows about (stale
    index entries) are dropped from the output.
    """

    async def map(self, request: SearchRequest, results: SearchResults) -> list[Searchable]:
        if results.total == 0:
            return []

        ids = results.ids
        if not ids:
            return []

        resolved = await request.model.resolve_by_ids(request, ids)
        if isinstance(resolved, Mapping):
            by_id = {str(key): record for key, record in resolved.items()}
        else:
            by_id = {str(record.search_key()): record for record in resolved}

        records = [by_id[str(hit_id)] for hit_id in ids if by_id.get(str(hit_id)) is not None]
        if len(records) < len(ids):
            logger.debug("Dropped %d hits with no matching record", len(ids) - len(records))
        return records
