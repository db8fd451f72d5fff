"""Root conftest: shared keys and test configuration."""

import os

import pytest
from stellar_sdk import Keypair

# Never point tests at a real network
os.environ.setdefault("HORIZON_URL", "http://horizon.test")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def source_keypair():
    return Keypair.random()


@pytest.fixture
def destination_id():
    return Keypair.random().public_key


@pytest.fixture
def issuer_id():
    return Keypair.random().public_key
