"""Memo Resolution: reconcile the request memo with the federation memo.

Invariants:
    - memo_type/memo must be jointly empty or jointly set (checked first)
    - If federation returned a memo, any request memo -> cannot_use_memo
    - Otherwise the federation memo wins; no memo anywhere -> NoMemo
    - At most one memo source ever reaches parse_memo
"""

from gateway.core.domain_types import Memo, NoMemo, ResolvedDestination
from gateway.core.errors import CannotUseMemoError
from gateway.core.validate_fields import check_memo_params, parse_memo


def resolve_memo(
    memo_type: str, memo: str, destination: ResolvedDestination,
) -> Memo:
    check_memo_params(memo_type, memo)

    if destination.has_memo:
        if memo_type:
            raise CannotUseMemoError()
        memo_type, memo = destination.memo_type, destination.memo

    if not memo_type:
        return NoMemo()
    return parse_memo(memo_type, memo)
