"""
Declarative request descriptors and the function that materializes them.
"""

import json
from enum import StrEnum
from typing import Annotated, Any, Final
from urllib.parse import quote, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from ..shared.errors import RequestError
from .settings import network_settings

JSON_CONTENT_TYPE: Final[str] = "application/json"
ALLOWED_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})


class HTTPMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class RequestDescriptor(BaseModel):
    """Immutable description of an HTTP call before it is materialized."""

    model_config = ConfigDict(frozen=True)

    base_path: Annotated[
        str,
        Field(
            default_factory=lambda: network_settings.base_url,
            description="Root URL shared by every request",
        ),
    ]
    path: Annotated[str, Field(description="Endpoint path appended to base_path")]
    method: HTTPMethod = HTTPMethod.GET
    headers: dict[str, str] | None = None
    query_params: dict[str, str] | None = None
    body_params: dict[str, Any] | None = None


class PreparedRequest(BaseModel):
    """Wire-ready request produced by build_request."""

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes | None = None


def encode_query(params: dict[str, str]) -> str:
    """Percent-encode each key and value independently and join them."""
    return "&".join(
        f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
        for key, value in params.items()
    )


def _validate_url(url: str) -> str:
    if any(ch.isspace() for ch in url):
        raise RequestError.invalid_url(f"{url!r} contains whitespace")
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise RequestError.invalid_url(f"{url!r}: {e}") from e
    if parts.scheme not in ALLOWED_SCHEMES or not parts.netloc:
        raise RequestError.invalid_url(f"{url!r} is not an absolute http(s) URL")
    return url


def build_request(descriptor: RequestDescriptor) -> PreparedRequest:
    """
    Turn a descriptor into a wire-ready request.

    Args:
        descriptor: The request to materialize. It is never modified.

    Returns:
        PreparedRequest: URL with encoded query, headers and optional JSON body

    Raises:
        RequestError: invalid_url when the URL cannot be constructed,
            invalid_body when body_params are not JSON serializable
    """
    url = descriptor.base_path + quote(descriptor.path, safe="/")
    if descriptor.query_params:
        url = f"{url}?{encode_query(descriptor.query_params)}"
    url = _validate_url(url)

    headers = dict(descriptor.headers or {})

    body: bytes | None = None
    if descriptor.body_params is not None:
        try:
            body = json.dumps(descriptor.body_params, allow_nan=False).encode()
        except (TypeError, ValueError) as e:
            raise RequestError.invalid_body(
                "Failed to serialize body parameters to JSON."
            ) from e
        headers["Content-Type"] = JSON_CONTENT_TYPE

    return PreparedRequest(
        method=descriptor.method, url=url, headers=headers, body=body
    )
