"""Payment Request: the raw, immutable view of one submitted payment form.

Invariants:
    - Built exactly once per HTTP request by parse_payment_form
    - Holds raw strings only: absent fields become "" (never None)
    - path preserves form order and stops at the first missing index
"""

from collections.abc import Mapping
from dataclasses import dataclass

from gateway.core.validate_fields import discover_path_legs


@dataclass(frozen=True)
class PaymentRequest:
    source: str = ""
    destination: str = ""
    payment_type: str = ""
    # payment
    amount: str = ""
    asset_code: str = ""
    asset_issuer: str = ""
    # path_payment
    send_max: str = ""
    send_asset_code: str = ""
    send_asset_issuer: str = ""
    destination_amount: str = ""
    destination_asset_code: str = ""
    destination_asset_issuer: str = ""
    path: tuple[tuple[str, str], ...] = ()
    # memo
    memo_type: str = ""
    memo: str = ""


# form field name -> PaymentRequest attribute
_FORM_FIELDS = {
    "source": "source",
    "destination": "destination",
    "type": "payment_type",
    "amount": "amount",
    "asset_code": "asset_code",
    "asset_issuer": "asset_issuer",
    "send_max": "send_max",
    "send_asset_code": "send_asset_code",
    "send_asset_issuer": "send_asset_issuer",
    "destination_amount": "destination_amount",
    "destination_asset_code": "destination_asset_code",
    "destination_asset_issuer": "destination_asset_issuer",
    "memo_type": "memo_type",
    "memo": "memo",
}


def parse_payment_form(form: Mapping[str, str]) -> PaymentRequest:
    """Build a PaymentRequest from a submitted form mapping."""
    values = {
        attr: form.get(field) or ""
        for field, attr in _FORM_FIELDS.items()
    }
    return PaymentRequest(**values, path=discover_path_legs(form))
