"""Token registry lookup."""

from .catalog import CLUSTER_CHAIN_IDS, TokenCatalog, fetch_token_list, load_token_list_file
from .resolver import load_catalog, resolve_token

__all__ = [
    "CLUSTER_CHAIN_IDS", "TokenCatalog", "fetch_token_list", "load_token_list_file",
    "load_catalog", "resolve_token",
]
