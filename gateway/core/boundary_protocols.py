"""Boundary Protocols: contracts between the payment core and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure: dependency arrows point inward only
    - Every IO collaborator is reached through one of the Protocols below
    - Collaborators report failures with the exceptions defined here; the
      services layer translates them into PaymentError subclasses
    - BuilderError carries a BuilderErrorKind, so classification never
      depends on message text

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - Async methods for IO collaborators, sync for the builder (pure CPU work)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from gateway.core.domain_types import AssembledTransaction


# ─── Collaborator results ────────────────────────────────────────

@dataclass(frozen=True)
class FederationRecord:
    """Raw federation answer. Values are untrusted until validated."""
    account_id: str
    memo_type: str | None = None
    memo: str | None = None


@dataclass(frozen=True)
class AccountRecord:
    account_id: str
    sequence: str


# ─── Collaborator failures ───────────────────────────────────────

class ResolutionError(Exception):
    """Address could not be resolved to an account."""


class LedgerClientError(Exception):
    """Ledger access failed: transport error, unexpected status or bad body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AccountNotFoundError(LedgerClientError):
    """The ledger confirmed the account does not exist."""

    def __init__(self, account_id: str):
        super().__init__(f"Account {account_id} not found", 404)
        self.account_id = account_id


class BuilderErrorKind(str, Enum):
    INVALID_ASSET_CODE = "invalid_asset_code"
    INVALID_AMOUNT = "invalid_amount"
    OTHER = "other"


class BuilderError(Exception):
    """Transaction could not be built, signed or encoded."""

    def __init__(self, kind: BuilderErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


# ─── Protocols ───────────────────────────────────────────────────

class AddressResolver(Protocol):
    """Contract for federation lookup, implemented by infrastructure/federation.py."""
    async def resolve(self, address: str) -> FederationRecord: ...


class LedgerClient(Protocol):
    """Contract for ledger access, implemented by infrastructure/horizon_client.py."""
    async def load_account(self, account_id: str) -> AccountRecord: ...
    async def submit_transaction(self, envelope_xdr: str) -> dict[str, Any]: ...


class TransactionBuilder(Protocol):
    """Contract for lowering, signing and encoding, implemented by
    infrastructure/transaction_builder.py."""
    def build_envelope(
        self, transaction: AssembledTransaction, signer_seed: str,
    ) -> str: ...
