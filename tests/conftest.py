import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_charity.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from charity_api.database import Base
from charity_api.dependencies import get_notifier, get_providers, get_store
from charity_api.main import app as fastapi_app
from charity_api.provider_base import COMPLETED, Initiation
from charity_api.store import RecordStore

SQLALCHEMY_DATABASE_URL = "sqlite:///./test_temp.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={
                       "check_same_thread": False})
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db():
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def store():
    return RecordStore(TestingSessionLocal)


@pytest.fixture
def notifier(mocker):
    return mocker.Mock()


@pytest.fixture
def providers(mocker):
    gateway = mocker.Mock()
    gateway.currency = "ETB"
    gateway.initiate.return_value = Initiation(
        external_ref="KG-1700000000000",
        payload={"status": "success", "data": {"checkout_url": "https://checkout.example/KG"}},
    )
    gateway.confirm.return_value = COMPLETED

    paypal = mocker.Mock()
    paypal.currency = "USD"
    paypal.initiate.return_value = Initiation(
        external_ref="ORDER-5O190127TN364715T",
        payload={
            "id": "ORDER-5O190127TN364715T",
            "status": "CREATED",
            "links": [
                {"rel": "self", "href": "https://api.sandbox.paypal.com/v2/checkout/orders/5O19"},
                {"rel": "approve", "href": "https://www.sandbox.paypal.com/checkoutnow?token=5O19"},
            ],
        },
    )
    paypal.confirm.return_value = COMPLETED

    return {"gateway": gateway, "paypal": paypal}


@pytest.fixture
def client(store, notifier, providers):
    # Swap storage, email and payment providers for test doubles
    fastapi_app.dependency_overrides[get_store] = lambda: store
    fastapi_app.dependency_overrides[get_notifier] = lambda: notifier
    fastapi_app.dependency_overrides[get_providers] = lambda: providers
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()
