"""Integration test fixtures — A live OpenSearch (or Elasticsearch) node.

Expects a node reachable at ``ELASTICSCOUT_TEST_URL`` (default
``http://localhost:9200``), e.g.::

    docker run -p 9200:9200 -e discovery.type=single-node \
        -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2
"""

from __future__ import annotations

import os
import time

import httpx
import pytest

from elasticscout.config.settings import ConnectionSettings, Settings
from elasticscout.core.engine import ElasticScoutEngine


def _wait_for_service(url: str, timeout: float = 30.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=5)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


@pytest.fixture(scope="session")
def opensearch_url() -> str:
    """URL of a running node; skips the suite when there is none."""
    url = os.environ.get("ELASTICSCOUT_TEST_URL", "http://localhost:9200")
    if not _wait_for_service(url):
        pytest.skip(f"OpenSearch not available at {url}")
    return url


@pytest.fixture
async def live_engine(opensearch_url: str):
    settings = Settings(  # type: ignore[call-arg]
        _env_file=None,
        connection=ConnectionSettings(hosts=[opensearch_url], verify_certs=False),
    )
    engine = ElasticScoutEngine.from_settings(settings)
    yield engine
    await engine.close()
