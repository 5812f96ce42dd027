"""Materialize a route into signable transactions."""

import logging

from jupiter_arb.errors import BuildFailed
from jupiter_arb.types import Quote, TransactionSet
from .client import JupiterClient, JupiterError

logger = logging.getLogger(__name__)

_FIELDS = {
    "setup": "setupTransaction",
    "swap": "swapTransaction",
    "cleanup": "cleanupTransaction",
}


class TransactionBuilder:
    """Asks the swap service for the setup/swap/cleanup transactions of a route."""

    def __init__(self, http: JupiterClient, url: str):
        self.http = http
        self.url = url

    async def build(self, quote: Quote, user_public_key: str) -> TransactionSet:
        payload = {
            "route": quote.route,
            "userPublicKey": user_public_key,
            "wrapUnwrapSOL": True,
        }
        try:
            body = await self.http.post_json(self.url, payload)
        except JupiterError as e:
            raise BuildFailed(str(e))

        if not isinstance(body, dict):
            raise BuildFailed("Swap response is not an object")

        txs = {}
        for name, key in _FIELDS.items():
            value = body.get(key)
            if value is not None and not isinstance(value, str):
                raise BuildFailed(f"{key} is not a serialized transaction")
            txs[name] = value or None

        tx_set = TransactionSet(**txs)
        logger.debug(f"Built {len(tx_set)} transaction(s): {[n for n, _ in tx_set.transactions()]}")
        return tx_set
