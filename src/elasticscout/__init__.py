"""ElasticScout — Search and index synchronization for searchable records over OpenSearch.

Quick start::

    from elasticscout import ElasticScoutEngine, SearchRequest, Settings

    engine = ElasticScoutEngine.from_settings(Settings())
    await engine.update(products)

    request = SearchRequest(model=Product, query="red shoes", wheres={"price": (">", 10)})
    results = await engine.search(request)
    records = await engine.map(request, results)
"""

from elasticscout.config.settings import Settings
from elasticscout.core.engine import ElasticScoutEngine
from elasticscout.models.request import SearchRequest
from elasticscout.models.result import SearchResults
from elasticscout.models.searchable import Searchable

__version__ = "0.1.0"

__all__ = ["ElasticScoutEngine", "SearchRequest", "SearchResults", "Searchable", "Settings", "__version__"]
