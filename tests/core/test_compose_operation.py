"""Operation Composition: tests for the payment / create-account / path-payment choice.

Tests cover:
    - type parsing: "", payment, path_payment, anything else -> invalid_type
    - native payment to existing vs absent destination
    - issued payment never becomes create-account
    - path payment carries all five fields and the ordered path
    - missing_parameter_asset for send, destination and path legs
"""

import pytest

from gateway.core.compose_operation import (
    compose_path_payment,
    compose_payment,
    parse_payment_type,
    payment_asset,
    requires_existence_check,
)
from gateway.core.domain_types import (
    AccountId,
    CreateAccountPlan,
    IssuedAsset,
    NativeAsset,
    PathPaymentPlan,
    PaymentPlan,
    PaymentType,
)
from gateway.core.errors import (
    InvalidIssuerError, InvalidTypeError, MissingParamAssetError,
)
from gateway.core.payment_request import PaymentRequest

DEST = AccountId("GDESTINATION")


# ─── type ────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw,expected", [
    ("", PaymentType.NONE),
    ("payment", PaymentType.PAYMENT),
    ("path_payment", PaymentType.PATH_PAYMENT),
])
def test_parse_payment_type(raw, expected):
    assert parse_payment_type(raw) == expected


@pytest.mark.parametrize("raw", ["create_account", "PAYMENT", "path"])
def test_parse_payment_type_rejects_unknown(raw):
    with pytest.raises(InvalidTypeError):
        parse_payment_type(raw)


# ─── payment ─────────────────────────────────────────────────────

def test_native_payment_to_existing_destination():
    plan = compose_payment(DEST, NativeAsset(), "10", destination_exists=True)
    assert plan == PaymentPlan(destination=DEST, asset=NativeAsset(), amount="10")


def test_native_payment_to_absent_destination_creates_account():
    plan = compose_payment(DEST, NativeAsset(), "10", destination_exists=False)
    assert plan == CreateAccountPlan(destination=DEST, starting_balance="10")


def test_issued_payment_ignores_existence(issuer_id):
    asset = IssuedAsset("USD", issuer_id)
    plan = compose_payment(DEST, asset, "5", destination_exists=False)
    assert plan == PaymentPlan(destination=DEST, asset=asset, amount="5")


def test_only_native_requires_existence_check(issuer_id):
    assert requires_existence_check(NativeAsset())
    assert not requires_existence_check(IssuedAsset("USD", issuer_id))


def test_payment_asset_native_when_empty():
    assert payment_asset(PaymentRequest()) == NativeAsset()


def test_payment_asset_validates_issuer():
    with pytest.raises(InvalidIssuerError):
        payment_asset(PaymentRequest(asset_code="USD", asset_issuer="bogus"))


@pytest.mark.parametrize("code,issuer", [("USD", ""), ("", "GISSUER")])
def test_payment_asset_half_pair(code, issuer):
    with pytest.raises(MissingParamAssetError):
        payment_asset(PaymentRequest(asset_code=code, asset_issuer=issuer))


# ─── path payment ────────────────────────────────────────────────

def test_path_payment_plan(issuer_id):
    request = PaymentRequest(
        payment_type="path_payment",
        send_max="20",
        destination_amount="10",
        destination_asset_code="USD",
        destination_asset_issuer=issuer_id,
        path=(("EUR", issuer_id),),
    )
    plan = compose_path_payment(request, DEST)
    assert plan == PathPaymentPlan(
        destination=DEST,
        send_asset=NativeAsset(),
        send_max="20",
        destination_asset=IssuedAsset("USD", issuer_id),
        destination_amount="10",
        path=(IssuedAsset("EUR", issuer_id),),
    )


@pytest.mark.parametrize("fields", [
    {"send_asset_code": "USD"},
    {"send_asset_issuer": "GISSUER"},
    {"destination_asset_code": "USD"},
    {"destination_asset_issuer": "GISSUER"},
    {"path": (("EUR", ""),)},
    {"path": (("", ""), ("", "GISSUER"))},
])
def test_path_payment_half_asset_pairs(fields):
    with pytest.raises(MissingParamAssetError):
        compose_path_payment(PaymentRequest(**fields), DEST)


def test_path_payment_issuers_not_validated_here():
    request = PaymentRequest(send_asset_code="USD", send_asset_issuer="bogus")
    plan = compose_path_payment(request, DEST)
    assert plan.send_asset == IssuedAsset("USD", "bogus")
