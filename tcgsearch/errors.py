"""tcgsearch — Error Types

Every failure in the search pipeline is fatal. Stages raise one of these and
the CLI turns it into a logged error and a non-zero exit code.
"""

from __future__ import annotations


class CardSearchError(Exception):
    """Base exception for card search errors"""


class RequestConstructionError(CardSearchError):
    """Raised when the request URL cannot be assembled"""


class RequestTransportError(CardSearchError):
    """Raised on DNS, connection, TLS or timeout failures"""


class ResponseReadError(CardSearchError):
    """Raised when the response body cannot be read in full"""


class ResponseStatusError(CardSearchError):
    """Raised when the API answers with anything other than 200."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned {status_code} and response: {body}")


class ResponseDecodeError(CardSearchError):
    """Raised when a 200 body is not valid JSON for the result schema"""


class ResultSerializationError(CardSearchError):
    """Raised when a decoded result cannot be rendered back to JSON"""
