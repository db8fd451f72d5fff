"""API test fixtures: FastAPI app over ASGITransport with an in-memory pipeline.

Invariants:
    - get_pipeline dependency overridden; no Horizon or federation traffic
    - Lifespan is not run, so app.state.horizon is set per test when needed
"""

import pytest
from httpx import ASGITransport, AsyncClient
from stellar_sdk import Network

from gateway.api.routes.payment import get_pipeline
from gateway.infrastructure.transaction_builder import StellarTransactionBuilder
from gateway.main import app
from gateway.services.payment_pipeline import PaymentPipeline

from tests.services.fake_collaborators import FakeLedger, FakeResolver


@pytest.fixture
def ledger(source_keypair, destination_id):
    return FakeLedger(accounts={
        source_keypair.public_key: "10",
        destination_id: "3",
    })


@pytest.fixture
async def client(ledger):
    pipeline = PaymentPipeline(
        resolver=FakeResolver(),
        ledger=ledger,
        builder=StellarTransactionBuilder(),
        network_passphrase=Network.TESTNET_NETWORK_PASSPHRASE,
    )
    app.dependency_overrides[get_pipeline] = lambda: pipeline

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
