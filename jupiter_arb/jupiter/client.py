"""Async HTTP client for the Jupiter quote and swap APIs."""

import logging
from typing import Any, Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


class JupiterError(Exception):
    """HTTP, transport or decoding failure talking to Jupiter."""


class JupiterClient:
    """Thin aiohttp wrapper shared by the quote client and the swap builder."""

    def __init__(self, timeout: float = 10.0, session: Optional[aiohttp.ClientSession] = None):
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def connect(self):
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=HEADERS,
            )
            self._owns_session = True

    async def disconnect(self):
        if self._session and self._owns_session:
            await self._session.close()
        self._session = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    def _require_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise JupiterError("HTTP session is not open")
        return self._session

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        session = self._require_session()
        try:
            async with session.get(url, params=params) as response:
                response.raise_for_status()
                return await response.json(content_type=None)
        except (aiohttp.ClientError, ValueError) as e:
            raise JupiterError(f"GET {url} failed: {e}")

    async def post_json(self, url: str, payload: Dict[str, Any]) -> Any:
        session = self._require_session()
        try:
            async with session.post(url, json=payload, headers=HEADERS) as response:
                response.raise_for_status()
                return await response.json(content_type=None)
        except (aiohttp.ClientError, ValueError) as e:
            raise JupiterError(f"POST {url} failed: {e}")
