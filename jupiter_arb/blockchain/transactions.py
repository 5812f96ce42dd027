"""Decoding and signing of serialized transactions."""

import base64
import binascii

from solders.hash import Hash
from solders.transaction import Transaction

from jupiter_arb.errors import LedgerError
from .wallet import Wallet


def decode_transaction(payload: str) -> Transaction:
    """base64 wire format → legacy Transaction."""
    try:
        return Transaction.from_bytes(base64.b64decode(payload, validate=True))
    except (binascii.Error, ValueError) as e:
        raise LedgerError(f"Malformed transaction payload: {e}")
    except Exception as e:
        raise LedgerError(f"Could not deserialize transaction: {e}")


def sign_transaction(tx: Transaction, wallet: Wallet, recent_blockhash: Hash) -> Transaction:
    """Set a fresh blockhash and sign with the wallet keypair."""
    try:
        tx.sign([wallet.keypair], recent_blockhash)
    except Exception as e:
        raise LedgerError(f"Could not sign transaction: {e}")
    return tx
