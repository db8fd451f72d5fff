"""Operation Composition: choose and build the single ledger operation of a payment.

Invariants:
    - All functions are PURE: destination existence is passed in, never queried here
    - type "" produces no operation (None); the builder rejects that as server_error
    - Native payment to an absent destination -> CreateAccountPlan, never PaymentPlan
    - Native payment to an existing destination -> PaymentPlan
    - Issued payment never needs an existence check
    - Path payments never check existence: the destination must already exist

Design Decisions:
    - Split into parse_payment_type / payment_asset / compose_* so the shell
      (services/payment_pipeline.py) can run the existence query between them
"""

from gateway.core.domain_types import (
    AccountId,
    AssetDescriptor,
    CreateAccountPlan,
    NativeAsset,
    PathPaymentPlan,
    PaymentPlan,
    PaymentType,
)
from gateway.core.errors import InvalidTypeError
from gateway.core.payment_request import PaymentRequest
from gateway.core.resolve_asset import resolve_asset, resolve_path


def parse_payment_type(raw: str) -> PaymentType:
    try:
        return PaymentType(raw)
    except ValueError:
        raise InvalidTypeError() from None


def payment_asset(request: PaymentRequest) -> AssetDescriptor:
    """Asset of a simple payment. The issuer must be a valid key here."""
    return resolve_asset(
        request.asset_code, request.asset_issuer, validate_issuer=True,
    )


def requires_existence_check(asset: AssetDescriptor) -> bool:
    """Only native payments may turn into account creation."""
    return isinstance(asset, NativeAsset)


def compose_payment(
    destination: AccountId,
    asset: AssetDescriptor,
    amount: str,
    destination_exists: bool = True,
) -> CreateAccountPlan | PaymentPlan:
    if isinstance(asset, NativeAsset) and not destination_exists:
        return CreateAccountPlan(destination=destination, starting_balance=amount)
    return PaymentPlan(destination=destination, asset=asset, amount=amount)


def compose_path_payment(
    request: PaymentRequest, destination: AccountId,
) -> PathPaymentPlan:
    """Send asset, then destination asset, then path legs: first error wins."""
    send_asset = resolve_asset(request.send_asset_code, request.send_asset_issuer)
    destination_asset = resolve_asset(
        request.destination_asset_code, request.destination_asset_issuer,
    )
    return PathPaymentPlan(
        destination=destination,
        send_asset=send_asset,
        send_max=request.send_max,
        destination_asset=destination_asset,
        destination_amount=request.destination_amount,
        path=resolve_path(request.path),
    )
