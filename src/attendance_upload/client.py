"""aiohttp transport for the processing endpoint."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

import aiohttp

from .errors import NetworkError
from .logger import get_logger

logger = get_logger("client")


@dataclass(frozen=True)
class HttpResponse:
    status: int
    body: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Issue one POST and return the status with the decoded JSON body."""

    async def post_json(self, payload: Mapping[str, Any]) -> HttpResponse:
        ...


class AiohttpTransport:
    """Send the payload as JSON with a fresh ``ClientSession`` per call.

    No retries. Without ``timeout`` aiohttp's own default applies.
    """

    def __init__(self, url: str, *, timeout: Optional[float] = None) -> None:
        self._url = url
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    def _session_kwargs(self) -> Dict[str, Any]:
        if self._timeout is None:
            return {}
        return {"timeout": aiohttp.ClientTimeout(total=self._timeout)}

    async def post_json(self, payload: Mapping[str, Any]) -> HttpResponse:
        logger.debug("POST %s", self._url)
        try:
            async with aiohttp.ClientSession(**self._session_kwargs()) as session:
                async with session.post(
                    self._url,
                    json=dict(payload),
                    headers={"Content-Type": "application/json"},
                ) as response:
                    raw = await response.text()
                    status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise NetworkError(f"Request to {self._url} failed: {exc}") from exc

        try:
            body = json.loads(raw)
        except ValueError as exc:
            raise NetworkError(f"HTTP {status} response from {self._url} is not JSON") from exc
        if not isinstance(body, dict):
            raise NetworkError(f"HTTP {status} response from {self._url} is not a JSON object")
        logger.debug("HTTP %s from %s", status, self._url)
        return HttpResponse(status=status, body=body)
