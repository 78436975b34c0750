"""Index lifecycle — Existence checks, create-on-demand and best-effort deletion."""

from __future__ import annotations

import logging
from typing import Any

from opensearchpy.exceptions import NotFoundError, OpenSearchException, RequestError

from elasticscout.core.exceptions import IndexOperationError
from elasticscout.models.bulk import IndexSchema

logger = logging.getLogger(__name__)

ALREADY_EXISTS_ERROR = "resource_already_exists_exception"


class IndexManager:
    """Creates and removes indices on an ``AsyncOpenSearch`` client.

    Existence is checked, not reserved: two callers racing to create the
    same index both succeed, the loser's ``resource_already_exists_exception``
    is treated as a successful create.

    Args:
        client: Shared ``AsyncOpenSearch`` client.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    async def ensure_index(self, name: str, properties: dict[str, Any] | None = None) -> bool:
        """Create ``name`` if it does not exist yet.

        Args:
            name: Index name.
            properties: Field mappings applied only if the index is created.

        Returns:
            True if this call created the index.

        Raises:
            IndexOperationError: If the existence check fails for any reason
                other than the index being missing, or the create fails.
        """
        try:
            await self._client.indices.get(index=name)
            return False
        except NotFoundError:
            logger.debug("Index %s not found, creating it", name)
        except OpenSearchException as e:
            raise IndexOperationError(f"Failed to check index '{name}': {e}") from e

        return await self.create_index(IndexSchema(name=name, properties=properties))

    async def create_index(self, schema: IndexSchema) -> bool:
        """Create an index from ``schema``.

        Returns:
            True if the index was created, False if it already existed.
        """
        params: dict[str, Any] = {"index": schema.name}
        body = schema.to_body()
        if body is not None:
            params["body"] = body

        try:
            await self._client.indices.create(**params)
        except RequestError as e:
            if e.error == ALREADY_EXISTS_ERROR:
                logger.debug("Index %s was created concurrently", schema.name)
                return False
            raise IndexOperationError(f"Failed to create index '{schema.name}': {e}") from e
        except OpenSearchException as e:
            raise IndexOperationError(f"Failed to create index '{schema.name}': {e}") from e

        logger.info("Created index %s (%d mapped fields)", schema.name, len(schema.properties or {}))
        return True

    async def delete_index(self, name: str) -> None:
        """Delete an index.

        Raises:
            IndexOperationError: If the delete fails, including when the
                index does not exist.
        """
        try:
            await self._client.indices.delete(index=name)
        except OpenSearchException as e:
            raise IndexOperationError(f"Failed to delete index '{name}': {e}") from e
        logger.info("Deleted index %s", name)

    async def flush(self, name: str) -> None:
        """Delete an index, ignoring every failure."""
        try:
            await self._client.indices.delete(index=name)
        except Exception:
            logger.debug("Flush of index %s failed, ignoring", name, exc_info=True)
