"""Query DSL construction — Translates a SearchRequest into search parameters.

The composed parameter set has the shape ``{"index": ..., "body": ...}``
and is passed as-is to ``AsyncOpenSearch.search`` (or to a request's raw
callback).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from elasticscout.models.request import SearchRequest
from elasticscout.models.searchable import searchable_text_fields

RANGE_OPERATORS: dict[str, str] = {
    ">": "gt",
    ">=": "gte",
    "<": "lt",
    "<=": "lte",
}


def build_filters(wheres: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Translate field constraints into ``bool.filter`` clauses.

    Plain values become ``term`` clauses. Range constraints become
    ``range`` clauses; those with an unknown operator, and any other
    sequence or mapping shape, produce no clause at all.

    Args:
        wheres: Ordered key to constraint mapping.

    Returns:
        Filter clauses in the iteration order of ``wheres``.
    """
    clauses: list[dict[str, Any]] = []
    for key, constraint in wheres.items():
        clause = _build_clause(key, constraint)
        if clause is not None:
            clauses.append(clause)
    return clauses


def _build_clause(key: str, constraint: Any) -> dict[str, Any] | None:
    if isinstance(constraint, Mapping):
        return None
    if isinstance(constraint, Sequence) and not isinstance(constraint, str | bytes):
        if len(constraint) == 3:
            field, operator, value = constraint
        elif len(constraint) == 2:
            field = key
            operator, value = constraint
        else:
            return None

        if not isinstance(field, str) or not isinstance(operator, str):
            return None
        range_operator = RANGE_OPERATORS.get(operator)
        if range_operator is None:
            return None
        return {"range": {field: {range_operator: value}}}

    return {"term": {key: constraint}}


def build_sort(orders: Sequence[tuple[str, str]]) -> list[dict[str, str]] | None:
    """Translate (field, direction) pairs into sort clauses.

    Returns ``None`` for no orders so the ``sort`` key can be left out and
    relevance ordering applies.
    """
    if not orders:
        return None
    return [{field: direction} for field, direction in orders]


def build_search_params(
    request: SearchRequest,
    *,
    filters: list[dict[str, Any]],
    size: int | None = None,
    offset: int | None = None,
) -> dict[str, Any]:
    """Compose the search parameters for ``request``.

    Args:
        request: The search request.
        filters: Output of ``build_filters`` for the request.
        size: Page size; omitted from the body when falsy.
        offset: Zero-based hit offset; omitted only when ``None``.

    Returns:
        ``{"index": ..., "body": ...}``. The body is empty when the request
        has no query text, filters, sort or pagination.
    """
    body: dict[str, Any] = {}

    if request.query:
        fields = searchable_text_fields(request.model)
        body["query"] = {
            "bool": {
                "should": [
                    {
                        "multi_match": {
                            "query": request.query,
                            "type": "cross_fields",
                            "fields": fields,
                        }
                    },
                    {
                        "multi_match": {
                            "query": request.query,
                            "type": "phrase_prefix",
                            "fields": fields,
                        }
                    },
                ],
                "minimum_should_match": 1,
            }
        }

    sort = build_sort(request.orders)
    if sort:
        body["sort"] = sort

    if offset is not None:
        body["from"] = offset

    if size:
        body["size"] = size

    if filters:
        body.setdefault("query", {}).setdefault("bool", {})["filter"] = filters

    return {"index": request.index_name, "body": body}
