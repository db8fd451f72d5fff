"""Destination Resolution: resolver failures and untrusted federation answers."""

import pytest

from gateway.core.boundary_protocols import FederationRecord
from gateway.core.domain_types import ResolvedDestination
from gateway.core.errors import CannotResolveDestinationError, InvalidDestinationError
from gateway.services.resolve_destination import resolve_destination

from tests.services.fake_collaborators import FakeResolver


async def test_plain_account_id(destination_id):
    result = await resolve_destination(FakeResolver(), destination_id)
    assert result == ResolvedDestination(account_id=destination_id)
    assert not result.has_memo


async def test_federation_record_with_memo(destination_id):
    resolver = FakeResolver({
        "bob*example.com": FederationRecord(
            account_id=destination_id, memo_type="id", memo="42",
        ),
    })
    result = await resolve_destination(resolver, "bob*example.com")
    assert result.account_id == destination_id
    assert (result.memo_type, result.memo) == ("id", "42")
    assert result.has_memo


@pytest.mark.parametrize("address", ["", "nobody*example.com"])
async def test_resolver_failure(address):
    with pytest.raises(CannotResolveDestinationError):
        await resolve_destination(FakeResolver(), address)


async def test_plain_garbage_is_invalid_destination():
    with pytest.raises(InvalidDestinationError):
        await resolve_destination(FakeResolver(), "GNOTAKEY")


async def test_federation_returns_secret_seed(source_keypair):
    resolver = FakeResolver({
        "bob*example.com": FederationRecord(account_id=source_keypair.secret),
    })
    with pytest.raises(InvalidDestinationError):
        await resolve_destination(resolver, "bob*example.com")
