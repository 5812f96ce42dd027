"""
Configuration settings - edit values directly here, or override via environment
"""

import os
from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class Settings:
    """Application settings - configure values below"""

    # ===================
    # Solana RPC
    # ===================
    rpc_url: str = "https://solana-api.projectserum.com"
    cluster: str = "mainnet-beta"
    commitment: str = "processed"           # general queries
    confirm_commitment: str = "confirmed"   # confirmation lookups

    # ===================
    # Jupiter
    # ===================
    quote_api_url: str = "https://quote-api.jup.ag/v1/quote"
    swap_api_url: str = "https://quote-api.jup.ag/v1/swap"
    http_timeout: float = 10.0

    # ===================
    # Token registry
    # ===================
    token_list_url: str = "https://raw.githubusercontent.com/solana-labs/token-list/main/src/tokens/solana.tokenlist.json"
    token_list_path: Optional[str] = None  # local JSON file, used instead of the URL when set

    # ===================
    # Execution
    # ===================
    explorer_tx_url: str = "https://solscan.io/tx/"
    confirm_max_attempts: int = 40
    confirm_min_timeout: float = 0.5
    confirm_max_timeout: float = 1.0
    confirm_backoff_factor: float = 2.0
    execution_policy: str = "best-effort"  # or "fail-fast"
    loop_interval: float = 0.0

    # ===================
    # Logging
    # ===================
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """
        Build settings with overrides from environment variables.

        Each field can be overridden by its upper-cased name (RPC_URL,
        CONFIRM_MAX_ATTEMPTS, ...). Raises ValueError on unparseable numbers.
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(f.name.upper())
            if raw is None or raw == "":
                continue
            if f.type in (int, "int"):
                value = int(raw)
            elif f.type in (float, "float"):
                value = float(raw)
            else:
                value = raw
            overrides[f.name] = value
        return cls(**overrides)


# Default settings instance
settings = Settings()
