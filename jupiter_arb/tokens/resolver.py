"""Symbol → Token resolution at startup."""

import logging
from typing import Optional

import aiohttp

from jupiter_arb.types import Token
from .catalog import TokenCatalog, fetch_token_list, load_token_list_file

logger = logging.getLogger(__name__)


def resolve_token(catalog: TokenCatalog, symbol: str) -> Token:
    """Raises TokenNotFound if the symbol is not in the catalog."""
    token = catalog.resolve(symbol)
    logger.info(f"Resolved {symbol} → mint {token.address} ({token.decimals} decimals)")
    return token


async def load_catalog(
    cluster: str,
    url: Optional[str] = None,
    path: Optional[str] = None,
    session: Optional[aiohttp.ClientSession] = None,
) -> TokenCatalog:
    """Load the catalog from a local file if given, otherwise from the URL."""
    if path:
        data = load_token_list_file(path)
    elif url:
        data = await fetch_token_list(url, session=session)
    else:
        raise ValueError("Either a token list path or URL is required")
    return TokenCatalog.from_token_list(data, cluster)
