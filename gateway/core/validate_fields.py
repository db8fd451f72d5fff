"""Field Validation: parse raw form strings into typed values or a specific PaymentError.

Invariants:
    - All functions are PURE: no IO, no async, no logging
    - Every failure raises the PaymentError subclass named by the field's role
    - uint64 parsing accepts ASCII digits only (no sign, whitespace or underscores)
    - Path legs are discovered positionally and stop at the first missing index

Design Decisions:
    - Key syntax checks delegate to stellar_sdk.StrKey (checksum + version byte)
    - Error class passed in by the caller so one key validator serves
      destination, issuer and federation results
"""

import binascii
import re
from collections.abc import Mapping

from stellar_sdk import Keypair, StrKey

from gateway.core.domain_types import (
    AccountId,
    HASH_MEMO_LENGTH,
    HashMemo,
    IdMemo,
    Memo,
    MemoKind,
    TextMemo,
    UINT64_MAX,
)
from gateway.core.errors import (
    InvalidMemoError,
    InvalidSourceError,
    MissingParamMemoError,
    PaymentError,
)

_DIGITS = re.compile(r"[0-9]+")

PATH_CODE_FIELD = "path[{index}][asset_code]"
PATH_ISSUER_FIELD = "path[{index}][asset_issuer]"


def parse_uint64(raw: str) -> int | None:
    """Parse an unsigned 64-bit decimal. None when not representable."""
    if not _DIGITS.fullmatch(raw):
        return None
    value = int(raw)
    if value > UINT64_MAX:
        return None
    return value


def validate_account_id(raw: str, error: type[PaymentError]) -> AccountId:
    """Return raw as AccountId if it is a valid public key, else raise error()."""
    if not raw or not StrKey.is_valid_ed25519_public_key(raw):
        raise error()
    return AccountId(raw)


def validate_source(raw: str) -> tuple[str, AccountId]:
    """Source must be a secret seed: it signs the transaction.

    Returns (seed, account_id).
    """
    if not raw or not StrKey.is_valid_ed25519_secret_seed(raw):
        raise InvalidSourceError()
    return raw, AccountId(Keypair.from_secret(raw).public_key)


def check_memo_params(memo_type: str, memo: str) -> None:
    """memo_type and memo must both be empty or both be set."""
    if bool(memo_type) != bool(memo):
        raise MissingParamMemoError()


def parse_memo(memo_type: str, value: str) -> Memo:
    """Dispatch on memo kind. Caller handles the empty (no memo) case."""
    if memo_type == MemoKind.ID:
        memo_id = parse_uint64(value)
        if memo_id is None:
            raise InvalidMemoError()
        return IdMemo(memo_id)

    if memo_type == MemoKind.TEXT:
        return TextMemo(value)

    if memo_type == MemoKind.HASH:
        try:
            digest = binascii.unhexlify(value)
        except ValueError:
            raise InvalidMemoError() from None
        if len(digest) != HASH_MEMO_LENGTH:
            raise InvalidMemoError()
        return HashMemo(digest)

    raise InvalidMemoError()


def discover_path_legs(form: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    """Collect (code, issuer) pairs for path[0], path[1], ... until the first gap.

    A leg exists iff its asset_code key is present, even with an empty value.
    Legs after a missing index are ignored.
    """
    legs: list[tuple[str, str]] = []
    index = 0
    while PATH_CODE_FIELD.format(index=index) in form:
        legs.append((
            form.get(PATH_CODE_FIELD.format(index=index)) or "",
            form.get(PATH_ISSUER_FIELD.format(index=index)) or "",
        ))
        index += 1
    return tuple(legs)
