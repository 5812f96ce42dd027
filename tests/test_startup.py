"""Tests for startup: settings, wallet loading and the CLI entry point."""

import base58
import pytest
from solders.keypair import Keypair

import main
from config import Settings
from jupiter_arb.blockchain import Wallet
from jupiter_arb.errors import WalletError
from jupiter_arb.tokens import TokenCatalog


class TestSettings:

    def test_defaults(self):
        s = Settings.from_env({})
        assert s.confirm_max_attempts == 40
        assert s.commitment == "processed"
        assert s.confirm_commitment == "confirmed"
        assert s.execution_policy == "best-effort"

    def test_env_overrides(self):
        s = Settings.from_env({
            "RPC_URL": "http://localhost:8899",
            "CONFIRM_MAX_ATTEMPTS": "10",
            "LOOP_INTERVAL": "0.25",
            "TOKEN_LIST_PATH": "/tmp/tokens.json",
            "CLUSTER": "",
        })
        assert s.rpc_url == "http://localhost:8899"
        assert s.confirm_max_attempts == 10
        assert s.loop_interval == 0.25
        assert s.token_list_path == "/tmp/tokens.json"
        assert s.cluster == "mainnet-beta"

    def test_invalid_number(self):
        with pytest.raises(ValueError):
            Settings.from_env({"CONFIRM_MAX_ATTEMPTS": "forty"})


class TestWallet:

    def test_from_base58(self):
        keypair = Keypair()
        wallet = Wallet.from_base58(base58.b58encode(bytes(keypair)).decode())
        assert wallet.public_key == str(keypair.pubkey())

    @pytest.mark.parametrize("secret", ["", "0OIl", "3yZe7d"])
    def test_invalid_secret(self, secret):
        with pytest.raises(WalletError):
            Wallet.from_base58(secret)

    def test_repr_hides_secret(self):
        keypair = Keypair()
        secret = base58.b58encode(bytes(keypair)).decode()
        wallet = Wallet.from_base58(secret)
        assert secret not in repr(wallet)
        assert str(keypair.pubkey()) in repr(wallet)


class TestCli:

    @pytest.mark.parametrize("argv", [
        [],
        ["USDC"],
        ["USDC", "100", "0.5"],
        ["USDC", "100", "0.5", "0.1", "extra"],
        ["USDC", "lots", "0.5", "0.1"],
        ["USDC", "NaN", "0.5", "0.1"],
        ["USDC", "sNaN", "0.5", "0.1"],
        ["USDC", "Infinity", "0.5", "0.1"],
        ["USDC", "100", "0.5", "NaN"],
        ["USDC", "100", "-Infinity", "0.1"],
    ])
    def test_usage_errors(self, argv):
        with pytest.raises(SystemExit) as exc:
            main.parse_args(argv)
        assert exc.value.code == 2

    def test_parses_four_arguments(self):
        args = main.parse_args(["USDC", "100", "0.5", "0.1"])
        assert (args.token, args.amount, args.slippage, args.desired_profit) == ("USDC", "100", "0.5", "0.1")


@pytest.fixture
def offline(monkeypatch):
    """Entry point with .env loading disabled and all network collaborators trapped."""
    monkeypatch.setattr(main, "load_dotenv", lambda: None)
    calls = []

    async def load_catalog(*args, **kwargs):
        calls.append("load_catalog")
        return TokenCatalog.from_token_list({"tokens": [
            {"chainId": 101, "address": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", "symbol": "USDC", "decimals": 6},
        ]})

    def forbidden(*args, **kwargs):
        calls.append("network")
        raise AssertionError("network client created")

    monkeypatch.setattr(main, "load_catalog", load_catalog)
    monkeypatch.setattr(main, "SolanaLedgerClient", forbidden)
    monkeypatch.setattr(main, "JupiterClient", forbidden)
    return calls


class TestStartup:

    def test_missing_wallet_is_fatal(self, monkeypatch, offline):
        monkeypatch.delenv("WALLET_PRIVATE_KEY", raising=False)
        assert main.main(["USDC", "100", "0.5", "0.1"]) == 1
        assert offline == []

    def test_unknown_token_is_fatal(self, monkeypatch, offline):
        monkeypatch.setenv("WALLET_PRIVATE_KEY", base58.b58encode(bytes(Keypair())).decode())
        assert main.main(["DOGE", "100", "0.5", "0.1"]) == 1
        assert offline == ["load_catalog"]

    def test_invalid_policy_is_fatal(self, monkeypatch, offline):
        monkeypatch.setenv("WALLET_PRIVATE_KEY", base58.b58encode(bytes(Keypair())).decode())
        monkeypatch.setenv("EXECUTION_POLICY", "sometimes")
        assert main.main(["USDC", "100", "0.5", "0.1"]) == 1
        assert offline == []
