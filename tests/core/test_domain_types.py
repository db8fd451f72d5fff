"""Domain Types: verifies enum values and tagged-union invariants.

Tests:
    - PaymentType and MemoKind values match the form vocabulary
    - IdMemo / HashMemo reject out-of-range values
"""

import pytest

from gateway.core.domain_types import (
    HashMemo, IdMemo, MemoKind, PaymentType, UINT64_MAX,
)


def test_payment_type_values():
    assert {t.value for t in PaymentType} == {"", "payment", "path_payment"}


def test_memo_kind_values():
    assert {k.value for k in MemoKind} == {"id", "text", "hash"}


def test_id_memo_bounds():
    assert IdMemo(UINT64_MAX).value == UINT64_MAX
    with pytest.raises(ValueError):
        IdMemo(UINT64_MAX + 1)
    with pytest.raises(ValueError):
        IdMemo(-1)


def test_hash_memo_length():
    with pytest.raises(ValueError):
        HashMemo(b"\x00" * 31)
