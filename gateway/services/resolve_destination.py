"""Destination Resolution: wraps the AddressResolver and re-validates its answer.

Invariants:
    - Any resolver failure -> cannot_resolve_destination
    - The resolved account_id must be a valid public key -> else invalid_destination
      (federation servers are untrusted)
    - Output memo fields are both set or both None
"""

import logging

from gateway.core.boundary_protocols import AddressResolver, ResolutionError
from gateway.core.domain_types import ResolvedDestination
from gateway.core.errors import CannotResolveDestinationError, InvalidDestinationError
from gateway.core.validate_fields import validate_account_id

logger = logging.getLogger(__name__)


async def resolve_destination(
    resolver: AddressResolver, destination: str,
) -> ResolvedDestination:
    try:
        record = await resolver.resolve(destination)
    except ResolutionError as e:
        logger.info(
            f"Cannot resolve address: {e}", extra={"destination": destination},
        )
        raise CannotResolveDestinationError() from e

    try:
        account_id = validate_account_id(record.account_id, InvalidDestinationError)
    except InvalidDestinationError:
        logger.info(
            "Invalid account_id in destination",
            extra={"account_id": record.account_id},
        )
        raise

    return ResolvedDestination(
        account_id=account_id, memo_type=record.memo_type, memo=record.memo,
    )
