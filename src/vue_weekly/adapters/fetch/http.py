"""Time-bounded HTTP GET helpers shared by all source adapters."""

from typing import Any, Optional

import httpx

from vue_weekly.core.exceptions import HttpError, RequestTimeoutError

DEFAULT_TIMEOUT = 10.0


async def _get(url: str, headers: Optional[dict[str, str]], timeout: float) -> httpx.Response:
    """Issue one GET and fail on timeout or non-success status."""
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url, headers=headers)
    except httpx.TimeoutException as e:
        raise RequestTimeoutError(url, timeout) from e

    if not response.is_success:
        raise HttpError(response.status_code, response.reason_phrase, url)

    return response


async def get_text(
    url: str, headers: Optional[dict[str, str]] = None, timeout: float = DEFAULT_TIMEOUT
) -> str:
    """Fetch url and return the body as text."""
    response = await _get(url, headers, timeout)
    return response.text


async def get_json(
    url: str, headers: Optional[dict[str, str]] = None, timeout: float = DEFAULT_TIMEOUT
) -> Any:
    """Fetch url and return the decoded JSON body."""
    response = await _get(url, headers, timeout)
    return response.json()
