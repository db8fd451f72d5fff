"""Transaction Assembly: sequence handling and builder error classification.

Invariants:
    - The assembled sequence is always the fetched account sequence + 1
    - An unparseable sequence is a server_error (Horizon is a trusted format)
    - A missing operation is a server_error: a transaction needs one operation
    - Builder errors map structurally: INVALID_ASSET_CODE -> asset_code_invalid,
      INVALID_AMOUNT -> invalid_amount, anything else -> server_error
"""

from gateway.core.boundary_protocols import BuilderError, BuilderErrorKind
from gateway.core.domain_types import (
    AccountId,
    AssembledTransaction,
    Memo,
    OperationPlan,
)
from gateway.core.errors import (
    InvalidAmountError,
    MalformedAssetCodeError,
    PaymentError,
    ServerError,
)
from gateway.core.validate_fields import parse_uint64


_BUILDER_ERRORS: dict[BuilderErrorKind, type[PaymentError]] = {
    BuilderErrorKind.INVALID_ASSET_CODE: MalformedAssetCodeError,
    BuilderErrorKind.INVALID_AMOUNT: InvalidAmountError,
}


def next_sequence(raw_sequence: str) -> int:
    current = parse_uint64(raw_sequence)
    if current is None:
        raise ServerError()
    return current + 1


def assemble_transaction(
    source_account: AccountId,
    raw_sequence: str,
    network_passphrase: str,
    base_fee: int,
    operation: OperationPlan | None,
    memo: Memo,
) -> AssembledTransaction:
    sequence_number = next_sequence(raw_sequence)
    if operation is None:
        raise ServerError()
    return AssembledTransaction(
        source_account=source_account,
        sequence_number=sequence_number,
        network_passphrase=network_passphrase,
        base_fee=base_fee,
        operation=operation,
        memo=memo,
    )


def classify_builder_error(error: BuilderError) -> PaymentError:
    return _BUILDER_ERRORS.get(error.kind, ServerError)()
