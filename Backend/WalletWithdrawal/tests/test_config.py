from decimal import Decimal
import importlib
import pytest
import WalletWithdrawal.config as config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_default_initial_balance(monkeypatch, reload_config):
    monkeypatch.delenv("WALLET_INITIAL_BALANCE", raising=False)
    reload_config()
    assert config.INITIAL_BALANCE == Decimal("10000.00")


def test_initial_balance_from_env(monkeypatch, reload_config):
    monkeypatch.setenv("WALLET_INITIAL_BALANCE", " 250.50 ")
    reload_config()
    assert config.INITIAL_BALANCE == Decimal("250.50")


@pytest.mark.parametrize(
    "value", ["abc", "-1", "NaN", "Infinity", "1" + "0" * 30]
)
def test_bad_initial_balance_fails_startup(monkeypatch, reload_config, value):
    monkeypatch.setenv("WALLET_INITIAL_BALANCE", value)
    with pytest.raises(ValueError):
        reload_config()
