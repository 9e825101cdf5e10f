"""
tcgsearch — Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- Logging reset between tests
- Mock HTTP client (respx)
- Search parameters pointed at a test endpoint
- Mock API response data
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import httpx
import pytest
import respx
import structlog

from tcgsearch.pipeline.pokemontcg import SearchParams


TEST_BASE_URL = "https://tcg.test.local/v2/cards"

PIKACHU = {
    "id": "xy1-1",
    "name": "Pikachu",
    "types": ["Lightning"],
    "hp": "60",
    "rarity": "Common",
}


# ---------------------------------------------------------------------------
# Logging Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """
    Undo main()'s logging setup after each test.

    main() binds structlog and the root logger to the sys.stderr of the moment,
    which under capsys is closed once the test ends.
    """
    yield
    structlog.reset_defaults()
    logging.root.handlers = [
        h for h in logging.root.handlers if type(h) is not logging.StreamHandler
    ]


# ---------------------------------------------------------------------------
# Mock Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_http_client() -> Iterator[httpx.Client]:
    """
    Mock HTTP client with respx interceptor.

    All HTTP requests are intercepted and must be explicitly mocked.
    Prevents accidental calls to live APIs in tests.
    """
    with respx.mock:
        with httpx.Client() as client:
            yield client


@pytest.fixture
def search_params() -> SearchParams:
    """Default search parameters aimed at a non-routable test host."""
    return SearchParams(base_url=TEST_BASE_URL)


# ---------------------------------------------------------------------------
# Fixture Loaders
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def load_mock_pokemontcg_search() -> dict:
    """Load mock pokemontcg.io search response from fixtures/mock_pokemontcg_search.json."""
    fixture_path = Path(__file__).parent / "fixtures" / "mock_pokemontcg_search.json"
    with open(fixture_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def pikachu_payload() -> dict:
    """Single-card search response for xy1-1 Pikachu."""
    return {"data": [dict(PIKACHU)]}
