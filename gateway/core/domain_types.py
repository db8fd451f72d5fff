"""Domain Types: tagged unions for assets, memos and ledger operations.

Invariants:
    - AccountId is always a checksummed ed25519 public key (G...) once constructed
      by core/validate_fields.py; bare strings never flow past validation
    - IssuedAsset always carries a non-empty code and a non-empty issuer
    - HashMemo holds exactly 32 bytes, IdMemo a value in [0, 2**64)
    - OperationPlan variants are built once by compose_operation and consumed
      once by the transaction builder
    - All valid states encoded as Enums or frozen dataclasses, no raw string matching

Design Decisions:
    - Frozen dataclasses + Union aliases instead of class hierarchies with
      isinstance-heavy dispatch: variants stay plain values, pattern-matchable
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", str)


# ─── Enums ───────────────────────────────────────────────────────

class PaymentType(str, Enum):
    """Value of the ``type`` form field."""
    NONE = ""
    PAYMENT = "payment"
    PATH_PAYMENT = "path_payment"


class MemoKind(str, Enum):
    """Memo kinds accepted from the request or from federation."""
    ID = "id"
    TEXT = "text"
    HASH = "hash"


# ─── Assets ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class NativeAsset:
    """The ledger's native asset (lumens)."""


@dataclass(frozen=True)
class IssuedAsset:
    code: str
    issuer: str

    def __post_init__(self):
        if not self.code or not self.issuer:
            raise ValueError("IssuedAsset requires both code and issuer")


AssetDescriptor = Union[NativeAsset, IssuedAsset]


# ─── Memos ───────────────────────────────────────────────────────

UINT64_MAX = 2**64 - 1
HASH_MEMO_LENGTH = 32


@dataclass(frozen=True)
class NoMemo:
    pass


@dataclass(frozen=True)
class IdMemo:
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= UINT64_MAX:
            raise ValueError(f"IdMemo out of uint64 range: {self.value}")


@dataclass(frozen=True)
class TextMemo:
    value: str


@dataclass(frozen=True)
class HashMemo:
    value: bytes

    def __post_init__(self):
        if len(self.value) != HASH_MEMO_LENGTH:
            raise ValueError(
                f"HashMemo requires {HASH_MEMO_LENGTH} bytes, got {len(self.value)}"
            )


Memo = Union[NoMemo, IdMemo, TextMemo, HashMemo]


# ─── Operations ──────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateAccountPlan:
    destination: AccountId
    starting_balance: str


@dataclass(frozen=True)
class PaymentPlan:
    destination: AccountId
    asset: AssetDescriptor
    amount: str


@dataclass(frozen=True)
class PathPaymentPlan:
    """Strict-receive path payment: deliver exactly destination_amount."""
    destination: AccountId
    send_asset: AssetDescriptor
    send_max: str
    destination_asset: AssetDescriptor
    destination_amount: str
    path: tuple[AssetDescriptor, ...] = ()


OperationPlan = Union[CreateAccountPlan, PaymentPlan, PathPaymentPlan]


# ─── Destination / Transaction ───────────────────────────────────

@dataclass(frozen=True)
class ResolvedDestination:
    """Destination after federation. memo_type and memo are both set or both None.

    memo_type stays a raw string: an unsupported kind returned by a federation
    server is rejected later as invalid_memo, not as a resolution failure.
    """
    account_id: AccountId
    memo_type: str | None = None
    memo: str | None = None

    def __post_init__(self):
        if (self.memo_type is None) != (self.memo is None):
            raise ValueError("memo_type and memo must be set together")

    @property
    def has_memo(self) -> bool:
        return self.memo_type is not None


@dataclass(frozen=True)
class AssembledTransaction:
    """Everything the builder needs. sequence_number is already fetched + 1."""
    source_account: AccountId
    sequence_number: int
    network_passphrase: str
    base_fee: int
    operation: OperationPlan
    memo: Memo
