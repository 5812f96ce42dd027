"""Wallet holding the signing keypair."""

from dataclasses import dataclass, field

import base58
from solders.keypair import Keypair

from jupiter_arb.errors import WalletError


@dataclass(frozen=True)
class Wallet:
    """Signing keypair. Loaded once at startup, never logged."""
    keypair: Keypair = field(repr=False)

    @property
    def public_key(self) -> str:
        return str(self.keypair.pubkey())

    @classmethod
    def from_base58(cls, secret: str) -> "Wallet":
        """Decode a base58 secret key (64-byte keypair)."""
        if not secret:
            raise WalletError("Wallet private key is not set")
        try:
            return cls(keypair=Keypair.from_bytes(base58.b58decode(secret.strip())))
        except Exception as e:
            # Do not echo the secret
            raise WalletError(f"Invalid wallet private key: {type(e).__name__}") from None

    def __repr__(self) -> str:
        return f"Wallet({self.public_key})"
