"""Route quotes for a token → same-token round trip."""

import logging
from decimal import Decimal
from typing import Any, List, Union

from jupiter_arb.errors import QuoteUnavailable
from jupiter_arb.types import Quote, Token
from .client import JupiterClient, JupiterError

logger = logging.getLogger(__name__)


class QuoteClient:
    """Fetches candidate routes, ranked best-first by the quote service."""

    def __init__(self, http: JupiterClient, url: str):
        self.http = http
        self.url = url

    async def _fetch_routes(self, token: Token, amount: int, slippage: Union[str, Decimal]) -> List[Any]:
        params = {
            "inputMint": token.address,
            "outputMint": token.address,
            "amount": str(amount),
            "slippage": str(slippage),
        }
        try:
            body = await self.http.get_json(self.url, params=params)
        except JupiterError as e:
            raise QuoteUnavailable(str(e))

        routes = body.get("data") if isinstance(body, dict) else None
        if not isinstance(routes, list):
            raise QuoteUnavailable("Quote response has no 'data' array")
        if not routes:
            raise QuoteUnavailable(f"No routes for {token.symbol}")
        logger.debug(f"Received {len(routes)} route(s) for {token.symbol}")
        return routes

    async def get_routes(self, token: Token, amount: int, slippage: Union[str, Decimal]) -> List[Quote]:
        """
        Quote `amount` base units of `token` back into itself.

        Slippage is passed through to the service as given. Malformed routes
        are skipped; service order is kept for the rest.
        """
        quotes = []
        for index, route in enumerate(await self._fetch_routes(token, amount, slippage)):
            try:
                quotes.append(Quote.from_route(route))
            except QuoteUnavailable as e:
                logger.debug(f"Skipping route {index}: {e}")
        if not quotes:
            raise QuoteUnavailable(f"No usable routes for {token.symbol}")
        return quotes

    async def best_route(self, token: Token, amount: int, slippage: Union[str, Decimal]) -> Quote:
        """The service's top-ranked route; lower-ranked routes are not parsed."""
        routes = await self._fetch_routes(token, amount, slippage)
        return Quote.from_route(routes[0])
