"""Horizon Client: ledger access over the Horizon REST API.

Invariants:
    - 404 on GET /accounts/{id} -> AccountNotFoundError (absence is confirmed)
    - Any other transport error, non-2xx status or non-JSON body -> LedgerClientError
    - submit_transaction returns Horizon's JSON body untouched on 2xx
    - No retries: a failed submission is never re-sent with the same sequence

Design Decisions:
    - One shared httpx.AsyncClient per process, owned by the FastAPI lifespan
"""

import logging
from typing import Any

import httpx

from gateway.core.boundary_protocols import (
    AccountNotFoundError,
    AccountRecord,
    LedgerClientError,
)

logger = logging.getLogger(__name__)


class HorizonClient:
    """LedgerClient implementation backed by httpx."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def load_account(self, account_id: str) -> AccountRecord:
        response = await self._request("GET", f"/accounts/{account_id}")
        if response.status_code == 404:
            raise AccountNotFoundError(account_id)
        body = self._json_or_raise(response)
        sequence = body.get("sequence")
        if not isinstance(sequence, str):
            raise LedgerClientError(
                f"Account {account_id} response has no sequence",
                response.status_code,
            )
        return AccountRecord(account_id=body.get("id", account_id), sequence=sequence)

    async def submit_transaction(self, envelope_xdr: str) -> dict[str, Any]:
        response = await self._request(
            "POST", "/transactions", data={"tx": envelope_xdr},
        )
        return self._json_or_raise(response)

    async def health_check(self) -> bool:
        """True if the Horizon root answers 2xx."""
        try:
            response = await self._request("GET", "/")
        except LedgerClientError:
            return False
        return response.is_success

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            return await self.client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise LedgerClientError(f"Horizon request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise LedgerClientError(f"Horizon request failed: {url}: {e}") from e

    @staticmethod
    def _json_or_raise(response: httpx.Response) -> dict[str, Any]:
        if not response.is_success:
            logger.error(
                f"Horizon returned {response.status_code}: {response.text[:500]}",
            )
            raise LedgerClientError(
                f"Horizon returned {response.status_code}", response.status_code,
            )
        try:
            body = response.json()
        except ValueError as e:
            raise LedgerClientError(
                "Horizon returned non-JSON body", response.status_code,
            ) from e
        if not isinstance(body, dict):
            raise LedgerClientError(
                "Horizon returned non-object JSON", response.status_code,
            )
        return body
