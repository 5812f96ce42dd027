"""Shared fixtures."""

import pytest
from solders.keypair import Keypair

from jupiter_arb.blockchain import Wallet
from jupiter_arb.types import Token

from .fakes import RecordingSleep

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


@pytest.fixture
def usdc() -> Token:
    return Token(symbol="USDC", address=USDC_MINT, decimals=6, name="USD Coin", chain_id=101)


@pytest.fixture
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture
def wallet(keypair) -> Wallet:
    return Wallet(keypair=keypair)


@pytest.fixture
def no_sleep() -> RecordingSleep:
    return RecordingSleep()
