"""Stellar Transaction Builder: lowers an AssembledTransaction to a signed XDR envelope.

Invariants:
    - Input is fully typed (OperationPlan, Memo); no runtime type assertions
    - Exactly one operation per transaction, fee = base_fee * 1
    - Asset codes must match [A-Za-z0-9]{1,12} -> else INVALID_ASSET_CODE
    - Amounts must be positive decimals with at most 7 fractional digits,
      within int64 stroops -> else INVALID_AMOUNT
    - Every other stellar_sdk failure (bad issuer, memo too long, bad sequence)
      is reported as OTHER; the message is for logs only

Design Decisions:
    - Amount and asset code checks happen here, before stellar_sdk sees the
      values, so the two user-facing classifications never depend on the
      wording of stellar_sdk exceptions
    - stellar_sdk.Transaction is built directly (not TransactionBuilder): the
      sequence number arrives already incremented and no time bounds are set
"""

import logging
import re
from decimal import Decimal

import stellar_sdk
from stellar_sdk.exceptions import SdkError
from stellar_sdk.memo import Memo as SdkMemo
from stellar_sdk.operation import Operation

from gateway.core.boundary_protocols import BuilderError, BuilderErrorKind
from gateway.core.domain_types import (
    AssembledTransaction,
    AssetDescriptor,
    CreateAccountPlan,
    HashMemo,
    IdMemo,
    IssuedAsset,
    Memo,
    OperationPlan,
    PathPaymentPlan,
    PaymentPlan,
    TextMemo,
)

logger = logging.getLogger(__name__)

_ASSET_CODE = re.compile(r"[A-Za-z0-9]{1,12}")
_AMOUNT = re.compile(r"[0-9]+(\.[0-9]{1,7})?")

# One stroop is 10^-7 units; balances are signed 64-bit stroop counts.
_MAX_AMOUNT = Decimal(2**63 - 1) / Decimal(10**7)
_MAX_SEQUENCE = 2**63 - 1


def check_amount(raw: str) -> str:
    if not _AMOUNT.fullmatch(raw):
        raise BuilderError(
            BuilderErrorKind.INVALID_AMOUNT, f"cannot parse amount: {raw!r}",
        )
    value = Decimal(raw)
    if value <= 0 or value > _MAX_AMOUNT:
        raise BuilderError(
            BuilderErrorKind.INVALID_AMOUNT, f"amount out of range: {raw!r}",
        )
    return raw


def to_sdk_asset(asset: AssetDescriptor) -> stellar_sdk.Asset:
    if not isinstance(asset, IssuedAsset):
        return stellar_sdk.Asset.native()
    if not _ASSET_CODE.fullmatch(asset.code):
        raise BuilderError(
            BuilderErrorKind.INVALID_ASSET_CODE,
            f"Asset code length is invalid: {asset.code!r}",
        )
    return stellar_sdk.Asset(asset.code, asset.issuer)


def to_sdk_operation(plan: OperationPlan) -> Operation:
    if isinstance(plan, CreateAccountPlan):
        return stellar_sdk.CreateAccount(
            destination=plan.destination,
            starting_balance=check_amount(plan.starting_balance),
        )
    if isinstance(plan, PaymentPlan):
        return stellar_sdk.Payment(
            destination=plan.destination,
            asset=to_sdk_asset(plan.asset),
            amount=check_amount(plan.amount),
        )
    if isinstance(plan, PathPaymentPlan):
        return stellar_sdk.PathPaymentStrictReceive(
            destination=plan.destination,
            send_asset=to_sdk_asset(plan.send_asset),
            send_max=check_amount(plan.send_max),
            dest_asset=to_sdk_asset(plan.destination_asset),
            dest_amount=check_amount(plan.destination_amount),
            path=[to_sdk_asset(leg) for leg in plan.path],
        )
    raise BuilderError(BuilderErrorKind.OTHER, f"Unknown operation plan: {plan!r}")


def to_sdk_memo(memo: Memo) -> SdkMemo:
    if isinstance(memo, IdMemo):
        return stellar_sdk.IdMemo(memo.value)
    if isinstance(memo, TextMemo):
        return stellar_sdk.TextMemo(memo.value)
    if isinstance(memo, HashMemo):
        return stellar_sdk.HashMemo(memo.value)
    return stellar_sdk.NoneMemo()


class StellarTransactionBuilder:
    """TransactionBuilder implementation backed by stellar_sdk."""

    def build_envelope(
        self, transaction: AssembledTransaction, signer_seed: str,
    ) -> str:
        """Build, sign and base64-encode. Raises BuilderError on any failure."""
        if transaction.sequence_number > _MAX_SEQUENCE:
            raise BuilderError(
                BuilderErrorKind.OTHER,
                f"Sequence {transaction.sequence_number} exceeds int64",
            )
        try:
            operation = to_sdk_operation(transaction.operation)
            tx = stellar_sdk.Transaction(
                source=transaction.source_account,
                sequence=transaction.sequence_number,
                fee=transaction.base_fee,
                operations=[operation],
                memo=to_sdk_memo(transaction.memo),
            )
            envelope = stellar_sdk.TransactionEnvelope(
                transaction=tx,
                network_passphrase=transaction.network_passphrase,
            )
            envelope.sign(stellar_sdk.Keypair.from_secret(signer_seed))
            return envelope.to_xdr()
        except (SdkError, ValueError, TypeError) as e:
            logger.warning(f"stellar_sdk rejected transaction: {e}")
            raise BuilderError(BuilderErrorKind.OTHER, str(e)) from e
