"""Token catalog built from an SPL token-list document."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import aiohttp

from jupiter_arb.errors import TokenCatalogError, TokenNotFound
from jupiter_arb.types import Token

logger = logging.getLogger(__name__)

# Token-list chainId per cluster slug
CLUSTER_CHAIN_IDS: Dict[str, int] = {
    "mainnet-beta": 101,
    "testnet": 102,
    "devnet": 103,
}


class TokenCatalog:
    """Ordered, read-only list of tokens for one cluster."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: List[Token] = list(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    @classmethod
    def from_token_list(cls, data: Dict[str, Any], cluster: str = "mainnet-beta") -> "TokenCatalog":
        """
        Build from a token-list document, keeping entries for `cluster` only.

        Entries without a symbol/address or with invalid decimals are skipped.
        """
        if cluster not in CLUSTER_CHAIN_IDS:
            raise ValueError(f"Unknown cluster: {cluster}")
        chain_id = CLUSTER_CHAIN_IDS[cluster]

        entries = data.get("tokens") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise TokenCatalogError("Token list has no 'tokens' array")

        tokens = []
        for entry in entries:
            if not isinstance(entry, dict) or entry.get("chainId") != chain_id:
                continue
            if token := _parse_entry(entry):
                tokens.append(token)
        logger.debug(f"Loaded {len(tokens)} tokens for {cluster}")
        return cls(tokens)

    def resolve(self, symbol: str) -> Token:
        """
        Exact, case-sensitive symbol lookup.

        When several entries share a symbol the first one in catalog order wins.
        """
        for token in self._tokens:
            if token.symbol == symbol:
                return token
        raise TokenNotFound(f"Could not find token {symbol}")


def _parse_entry(entry: Dict[str, Any]) -> Optional[Token]:
    symbol, address, decimals = entry.get("symbol"), entry.get("address"), entry.get("decimals")
    if not symbol or not address or not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0:
        logger.debug(f"Skipping malformed token entry: {entry!r:.120}")
        return None
    return Token(
        symbol=symbol,
        address=address,
        decimals=decimals,
        name=entry.get("name", ""),
        chain_id=entry.get("chainId"),
    )


def load_token_list_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a token-list JSON document from disk."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise TokenCatalogError(f"Failed to read token list {path}: {e}")


async def fetch_token_list(
    url: str,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = 30.0,
) -> Dict[str, Any]:
    """Download a token-list JSON document."""
    own_session = session is None
    if own_session:
        session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
    try:
        async with session.get(url) as response:
            response.raise_for_status()
            # Raw GitHub serves text/plain
            return await response.json(content_type=None)
    except (aiohttp.ClientError, ValueError) as e:
        raise TokenCatalogError(f"Failed to fetch token list from {url}: {e}")
    finally:
        if own_session:
            await session.close()
