"""
tcgsearch — pokemontcg.io Card Search Client

Issues one search against the pokemontcg.io v2 cards endpoint and decodes
the response into a fixed five-field card schema. The API does the filtering
and sorting; this module only builds the URL, sends it, and decodes.

Stages:
- build_request → percent-encodes q / orderBy onto the base URL
- do_request    → single synchronous GET, no retries
- process_data  → status check + JSON decode into SearchResult
- render_result → 2-space indented JSON for display

Base URL: https://api.pokemontcg.io/v2/cards
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote_plus

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticSerializationError

from tcgsearch.config import settings
from tcgsearch.errors import (
    RequestConstructionError,
    RequestTransportError,
    ResponseDecodeError,
    ResponseReadError,
    ResponseStatusError,
    ResultSerializationError,
)
from tcgsearch.utils.timing import timed

logger = structlog.get_logger(__name__)

_ALLOWED_SCHEMES = {"http", "https"}

# ---------------------------------------------------------------------------
# Pydantic Models
# ---------------------------------------------------------------------------


class SearchParams(BaseModel):
    """The four values a search is built from."""
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=settings.POKEMONTCG_BASE_URL, description="Endpoint, no trailing slash")
    limit: int = Field(default=settings.DEFAULT_LIMIT, description="Sent as pageSize")
    query: str = Field(default=settings.DEFAULT_QUERY, description="pokemontcg.io query syntax")
    order_by: str = Field(default=settings.DEFAULT_ORDER_BY, description="Sort field name")


class Card(BaseModel):
    """
    The subset of a pokemontcg.io card we display.

    hp is text on the API side (e.g. "60") and stays text here.
    Field order is the output order.
    """
    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    types: list[str] = Field(default_factory=list)
    hp: str = ""
    rarity: str = ""

    @model_validator(mode="before")
    @classmethod
    def null_card_to_empty(cls, v: Any) -> Any:
        if v is None:
            return {}
        return v

    @field_validator("id", "name", "hp", "rarity", mode="before")
    @classmethod
    def null_to_empty_string(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v

    @field_validator("types", mode="before")
    @classmethod
    def null_to_empty_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return ["" if t is None else t for t in v]
        return v


class SearchResult(BaseModel):
    """Top-level cards response. Pagination fields are ignored."""
    model_config = ConfigDict(frozen=True)

    data: list[Card] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def null_body_to_empty(cls, v: Any) -> Any:
        if v is None:
            return {}
        return v

    @field_validator("data", mode="before")
    @classmethod
    def null_to_empty_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [{} if card is None else card for card in v]
        return v


# ---------------------------------------------------------------------------
# Pipeline Stages
# ---------------------------------------------------------------------------


def build_request(params: SearchParams) -> httpx.Request:
    """
    Assemble the GET request for a card search.

    q and orderBy are query-escaped (space → '+'); base_url and limit are
    inserted as given.

    Args:
        params: Search parameters.

    Returns:
        An unsent httpx.Request.

    Raises:
        RequestConstructionError: The assembled string is not an absolute
            http(s) URL.
    """
    with timed("build_request"):
        raw_url = (
            f"{params.base_url}?pageSize={params.limit:d}"
            f"&q={quote_plus(params.query)}"
            f"&orderBy={quote_plus(params.order_by)}"
        )

        try:
            url = httpx.URL(raw_url)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"invalid URL {raw_url!r}: {e}") from e

        if url.scheme not in _ALLOWED_SCHEMES or not url.host:
            raise RequestConstructionError(
                f"invalid URL {raw_url!r}: expected an absolute http(s) URL"
            )

        request = httpx.Request("GET", url)

    logger.info("pokemontcg_request_built", method=request.method, url=str(request.url))
    return request


def do_request(request: httpx.Request, client: httpx.Client | None = None) -> httpx.Response:
    """
    Send the request once. No retries, library-default timeout.

    Args:
        request: Prepared request from build_request().
        client: Optional client to send through; a throwaway one is used otherwise.

    Raises:
        RequestTransportError: DNS, connection, TLS or timeout failure, a body
            that fails Content-Encoding decoding, or too many redirects.
    """
    with timed("do_request"):
        try:
            if client is not None:
                response = client.send(request)
            else:
                with httpx.Client() as owned_client:
                    response = owned_client.send(request)
        except httpx.RequestError as e:
            logger.error(
                "pokemontcg_request_error",
                error=str(e),
                error_type=type(e).__name__,
                url=str(request.url),
            )
            raise RequestTransportError(f"{type(e).__name__}: {e}") from e

    logger.info(
        "pokemontcg_request_sent",
        url=str(request.url),
        status_code=response.status_code,
    )
    return response


def process_data(response: httpx.Response) -> SearchResult:
    """
    Decode a cards response.

    Order matters: the body is read first, then the status is checked (so a
    non-200 error can carry the raw body), then the JSON is parsed.

    Raises:
        ResponseReadError: The body stream failed mid-read or could not be decoded.
        ResponseStatusError: Status is anything but 200.
        ResponseDecodeError: Body is not valid JSON for SearchResult.
    """
    with timed("process_data"):
        try:
            body = response.read()
        except (httpx.StreamError, httpx.RequestError) as e:
            raise ResponseReadError(f"failed reading response body: {e}") from e

        if response.status_code != 200:
            logger.error(
                "pokemontcg_http_error",
                status_code=response.status_code,
                body_length=len(body),
            )
            raise ResponseStatusError(response.status_code, response.text)

        try:
            result = SearchResult.model_validate_json(body)
        except ValidationError as e:
            raise ResponseDecodeError(f"failed decoding response body: {e}") from e

    logger.info("pokemontcg_response_decoded", card_count=len(result.data))
    return result


def render_result(result: SearchResult) -> str:
    """Render a SearchResult as 2-space indented JSON in field declaration order."""
    try:
        return result.model_dump_json(indent=2)
    except PydanticSerializationError as e:
        raise ResultSerializationError(f"failed encoding result: {e}") from e


def search_cards(params: SearchParams, client: httpx.Client | None = None) -> SearchResult:
    """
    Run build → send → decode for one search.

    Args:
        params: Search parameters.
        client: Optional httpx client (see do_request).

    Returns:
        Decoded SearchResult.
    """
    logger.info(
        "pokemontcg_search_begin",
        base_url=params.base_url,
        limit=params.limit,
        query=params.query,
        order_by=params.order_by,
    )
    request = build_request(params)
    response = do_request(request, client=client)
    return process_data(response)
