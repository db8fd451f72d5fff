"""Asset Resolution: (code, issuer) pairs into AssetDescriptor values.

Invariants:
    - Both empty -> NativeAsset; both set -> IssuedAsset; otherwise missing_parameter_asset
    - Same rule for the payment asset, send asset, destination asset and every path leg
    - Issuer key syntax is checked only when validate_issuer=True (simple payment);
      other issuers are checked by the transaction builder
"""

from gateway.core.domain_types import AssetDescriptor, IssuedAsset, NativeAsset
from gateway.core.errors import InvalidIssuerError, MissingParamAssetError
from gateway.core.validate_fields import validate_account_id


def resolve_asset(
    code: str, issuer: str, *, validate_issuer: bool = False,
) -> AssetDescriptor:
    if not code and not issuer:
        return NativeAsset()
    if not code or not issuer:
        raise MissingParamAssetError()
    if validate_issuer:
        issuer = validate_account_id(issuer, InvalidIssuerError)
    return IssuedAsset(code=code, issuer=issuer)


def resolve_path(legs: tuple[tuple[str, str], ...]) -> tuple[AssetDescriptor, ...]:
    """Resolve every discovered path leg, in order."""
    return tuple(resolve_asset(code, issuer) for code, issuer in legs)
