"""Federation Client: SEP-0002 address resolution over httpx.

Invariants:
    - An address without "*" is returned as-is (it is already an account id)
    - "name*domain" -> https://{domain}/.well-known/stellar.toml -> FEDERATION_SERVER
      -> GET ?q={address}&type=name
    - Every failure raises ResolutionError; callers never see httpx or toml errors
    - Results are untrusted: account_id syntax is NOT checked here
    - memo_type and memo are both returned or neither is
"""

import logging
import tomllib
from typing import Any

import httpx

from gateway.core.boundary_protocols import FederationRecord, ResolutionError

logger = logging.getLogger(__name__)

STELLAR_TOML_PATH = "/.well-known/stellar.toml"


def split_address(address: str) -> tuple[str, str] | None:
    """("name", "domain") for a federation address, None for a plain account id."""
    if "*" not in address:
        return None
    name, _, domain = address.rpartition("*")
    if not name or not domain:
        raise ResolutionError(f"Malformed federation address: {address!r}")
    return name, domain


def parse_federation_response(body: Any) -> FederationRecord:
    if not isinstance(body, dict):
        raise ResolutionError("Federation response is not a JSON object")
    account_id = body.get("account_id")
    if not isinstance(account_id, str) or not account_id:
        raise ResolutionError("Federation response has no account_id")

    memo_type = body.get("memo_type") or None
    memo = body.get("memo")
    # some servers send id memos as JSON numbers
    if isinstance(memo, int) and not isinstance(memo, bool):
        memo = str(memo)
    memo = memo or None
    if (memo_type is None) != (memo is None):
        raise ResolutionError("Federation response has only one of memo_type/memo")
    if memo_type is not None and not (
        isinstance(memo_type, str) and isinstance(memo, str)
    ):
        raise ResolutionError("Federation memo fields must be strings")
    return FederationRecord(account_id=account_id, memo_type=memo_type, memo=memo)


class FederationResolver:
    """AddressResolver implementation backed by httpx."""

    def __init__(
        self,
        timeout_seconds: float = 10,
        client: httpx.AsyncClient | None = None,
        scheme: str = "https",
    ):
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)
        self.scheme = scheme

    async def resolve(self, address: str) -> FederationRecord:
        if not address:
            raise ResolutionError("Empty destination")
        parts = split_address(address)
        if parts is None:
            return FederationRecord(account_id=address)

        _, domain = parts
        server = await self.federation_server(domain)
        try:
            response = await self.client.get(
                server, params={"q": address, "type": "name"},
            )
        except httpx.HTTPError as e:
            raise ResolutionError(f"Federation request to {server} failed: {e}") from e
        if not response.is_success:
            raise ResolutionError(
                f"Federation server {server} returned {response.status_code}",
            )
        try:
            body = response.json()
        except ValueError as e:
            raise ResolutionError(f"Federation server {server} returned non-JSON") from e
        return parse_federation_response(body)

    async def federation_server(self, domain: str) -> str:
        """Read FEDERATION_SERVER from the domain's stellar.toml."""
        url = f"{self.scheme}://{domain}{STELLAR_TOML_PATH}"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise ResolutionError(f"Cannot fetch {url}: {e}") from e
        if not response.is_success:
            raise ResolutionError(f"{url} returned {response.status_code}")
        try:
            data = tomllib.loads(response.text)
        except tomllib.TOMLDecodeError as e:
            raise ResolutionError(f"{url} is not valid TOML") from e

        server = data.get("FEDERATION_SERVER")
        if not isinstance(server, str) or not server:
            raise ResolutionError(f"{url} has no FEDERATION_SERVER")
        return server

    async def aclose(self) -> None:
        await self.client.aclose()
