"""HTTP backend implementation."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from .base import NetworkError, ShapeError, extract_reply

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        error = data["error"]
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return str(error)
    return f"HTTP {response.status_code}"


class HttpBackend:
    def __init__(
        self,
        url: str,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not url:
            raise ValueError("Backend URL not configured")
        self._url = url
        self._timeout = httpx.Timeout(timeout_s)
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def send(self, messages: list[dict[str, str]]) -> str:
        payload = {"messages": messages}
        logger.debug("POST %s with %s messages", self._url, len(messages))
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._url, json=payload)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Backend call failed: {exc}") from exc

        if not response.is_success:
            raise NetworkError(_error_detail(response), status_code=response.status_code)

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise ShapeError() from exc
        return extract_reply(data)
