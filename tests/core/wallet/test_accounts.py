"""
Tests for wallet account kinds.
"""

import pytest

from usdt0_bridge.core.wallet import AccountKind, account_kind


@pytest.mark.parametrize(
    "name,kind",
    [
        ("standard", AccountKind.STANDARD),
        ("abstracted", AccountKind.ABSTRACTED),
        ("read_only_standard", AccountKind.READ_ONLY_STANDARD),
        ("read_only_abstracted", AccountKind.READ_ONLY_ABSTRACTED),
    ],
)
def test_account_kind(accounts, name, kind):
    account = accounts[name]()
    assert account_kind(account) == kind
    assert kind.is_read_only == name.startswith("read_only")
    assert kind.is_abstracted == name.endswith("abstracted")


def test_unknown_objects_have_no_kind():
    class Imposter:
        kind = "standard"

    assert account_kind(object()) is None
    assert account_kind(Imposter()) is None


def test_config_carries_provider(accounts):
    account = accounts["abstracted"]("http://localhost:8545")

    assert account.config.provider == "http://localhost:8545"
    assert account.config.paymaster_token is None
