from decimal import Decimal
import pytest
from fastapi.testclient import TestClient
from main import app
from WalletWithdrawal.session import WalletSession, get_session


@pytest.fixture
def session():
    return WalletSession(Decimal("10000.00"))


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
