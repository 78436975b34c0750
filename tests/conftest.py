"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel

from elasticscout.config.settings import Settings
from elasticscout.core.engine import ElasticScoutEngine
from elasticscout.models.request import SearchRequest
from elasticscout.models.searchable import Searchable

# Record store backing ``Product.resolve_by_ids``; cleared per test.
PRODUCT_STORE: dict[str, Product] = {}


class Product(BaseModel, Searchable):
    """Searchable record with a field schema and a record store."""

    id: int
    name: str
    description: str = ""
    price: float = 0.0
    in_stock: bool = True

    def search_key(self) -> int:
        return self.id

    @classmethod
    def searchable_as(cls) -> str:
        return "products"

    def to_searchable_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude={"id"})

    @classmethod
    def searchable_properties(cls) -> dict[str, dict[str, Any]] | None:
        return {
            "name": {"type": "text"},
            "description": {"type": "text"},
            "price": {"type": "float"},
            "in_stock": {"type": "boolean"},
        }

    @classmethod
    async def resolve_by_ids(cls, request: SearchRequest, ids: list[str]) -> list[Product]:
        return [PRODUCT_STORE[i] for i in ids if i in PRODUCT_STORE]


class Tag(BaseModel, Searchable):
    """Searchable record with neither a field schema nor a record store."""

    slug: str

    def search_key(self) -> str:
        return self.slug

    @classmethod
    def searchable_as(cls) -> str:
        return "tags"

    def to_searchable_dict(self) -> dict[str, Any]:
        return {"slug": self.slug}


@pytest.fixture(autouse=True)
def _clear_store() -> None:
    PRODUCT_STORE.clear()


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def client() -> AsyncMock:
    """Mock ``AsyncOpenSearch`` client with an existing index and a clean bulk response."""
    mock_client = AsyncMock()
    mock_client.indices.get.return_value = {"products": {}}
    mock_client.bulk.return_value = {"took": 3, "errors": False, "items": []}
    mock_client.search.return_value = {"took": 1, "hits": {"total": {"value": 0}, "hits": []}}
    return mock_client


@pytest.fixture
def engine(client: AsyncMock) -> ElasticScoutEngine:
    return ElasticScoutEngine(client)


@pytest.fixture
def products() -> list[Product]:
    items = [
        Product(id=1, name="Red running shoes", description="Lightweight trainers", price=59.0),
        Product(id=2, name="Blue sandals", description="Summer footwear", price=25.5, in_stock=False),
        Product(id=3, name="Red rain boots", description="Waterproof", price=40.0),
    ]
    PRODUCT_STORE.update({str(item.id): item for item in items})
    return items


@pytest.fixture
def product_model() -> type[Product]:
    return Product


@pytest.fixture
def tag_model() -> type[Tag]:
    return Tag


@pytest.fixture
def make_response() -> Callable[..., dict[str, Any]]:
    """Factory building a raw search response around a list of hits."""

    def _make(hits: list[dict[str, Any]], total: int | None = None) -> dict[str, Any]:
        return {
            "took": 4,
            "timed_out": False,
            "hits": {
                "total": {"value": len(hits) if total is None else total, "relation": "eq"},
                "max_score": 1.0,
                "hits": hits,
            },
        }

    return _make
