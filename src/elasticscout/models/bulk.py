"""Bulk operation and index schema models."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class IndexSchema(BaseModel):
    """Definition used to create an index."""

    name: str = Field(min_length=1, description="Index name")
    properties: dict[str, Any] | None = Field(default=None, description="Field name to mapping descriptor")

    def to_body(self) -> dict[str, Any] | None:
        """Create-index request body, or ``None`` to rely on dynamic mappings."""
        if not self.properties:
            return None
        return {"mappings": {"properties": self.properties}}


class UpsertOperation(BaseModel):
    """Partial update that creates the document when it does not exist."""

    action: Literal["update"] = "update"
    id: str
    index: str
    document: dict[str, Any] = Field(default_factory=dict)

    def to_lines(self) -> list[dict[str, Any]]:
        return [
            {self.action: {"_id": self.id, "_index": self.index}},
            {"doc": self.document, "doc_as_upsert": True},
        ]


class DeleteOperation(BaseModel):
    """Document removal; carries no payload line."""

    action: Literal["delete"] = "delete"
    id: str
    index: str

    def to_lines(self) -> list[dict[str, Any]]:
        return [{self.action: {"_id": self.id, "_index": self.index}}]


BulkOperation = Annotated[UpsertOperation | DeleteOperation, Field(discriminator="action")]


def bulk_body(operations: Sequence[BulkOperation]) -> list[dict[str, Any]]:
    """Flatten operations into the action/payload line sequence of a bulk request."""
    body: list[dict[str, Any]] = []
    for operation in operations:
        body.extend(operation.to_lines())
    return body
