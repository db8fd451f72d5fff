"""Payment Pipeline: orchestrates validation, resolution, composition, assembly and submission.

Invariants:
    - Stages run strictly in order: source -> destination -> operation -> memo
      -> source account -> assembly -> signing -> submission
    - The first PaymentError ends the request; no later stage runs
    - Exactly one source account load and at most one submission per request
    - Destination existence is tri-state: exists / absent (404) / lookup failed;
      lookup failure is a server_error, never an implicit account creation
    - All state is request-scoped; the collaborators are the only shared objects

Design Decisions:
    - Imperative shell around the pure core: every IO call is awaited here,
      every decision is made by a core/ function
    - Collaborator exceptions are translated at the call site that triggered them
"""

import logging
from typing import Any

from gateway.core.assemble_transaction import (
    assemble_transaction,
    classify_builder_error,
)
from gateway.core.boundary_protocols import (
    AccountNotFoundError,
    AddressResolver,
    BuilderError,
    LedgerClient,
    LedgerClientError,
    TransactionBuilder,
)
from gateway.core.compose_operation import (
    compose_path_payment,
    compose_payment,
    parse_payment_type,
    payment_asset,
    requires_existence_check,
)
from gateway.core.domain_types import (
    AccountId,
    AssembledTransaction,
    OperationPlan,
    PaymentType,
    ResolvedDestination,
)
from gateway.core.errors import ServerError, SourceNotExistError
from gateway.core.payment_request import PaymentRequest
from gateway.core.resolve_memo import resolve_memo
from gateway.core.validate_fields import validate_source
from gateway.services.resolve_destination import resolve_destination

logger = logging.getLogger(__name__)


class PaymentPipeline:
    """One instance per process; execute() is called once per request."""

    def __init__(
        self,
        resolver: AddressResolver,
        ledger: LedgerClient,
        builder: TransactionBuilder,
        network_passphrase: str,
        base_fee: int = 100,
    ):
        self.resolver = resolver
        self.ledger = ledger
        self.builder = builder
        self.network_passphrase = network_passphrase
        self.base_fee = base_fee

    async def execute(self, request: PaymentRequest) -> dict[str, Any]:
        """Run the whole pipeline. Returns Horizon's submission response."""
        seed, source_account = validate_source(request.source)
        destination = await resolve_destination(self.resolver, request.destination)
        operation = await self.compose_operation(request, destination)
        memo = resolve_memo(request.memo_type, request.memo, destination)

        sequence = await self._load_source_sequence(source_account)
        transaction = assemble_transaction(
            source_account=source_account,
            raw_sequence=sequence,
            network_passphrase=self.network_passphrase,
            base_fee=self.base_fee,
            operation=operation,
            memo=memo,
        )
        envelope = self._build(transaction, seed)
        return await self._submit(envelope)

    async def compose_operation(
        self, request: PaymentRequest, destination: ResolvedDestination,
    ) -> OperationPlan | None:
        payment_type = parse_payment_type(request.payment_type)
        logger.debug(
            "Composing operation", extra={"payment_type": payment_type.value},
        )

        if payment_type == PaymentType.PAYMENT:
            asset = payment_asset(request)
            exists = True
            if requires_existence_check(asset):
                exists = await self.destination_exists(destination.account_id)
            return compose_payment(
                destination.account_id, asset, request.amount, exists,
            )

        if payment_type == PaymentType.PATH_PAYMENT:
            return compose_path_payment(request, destination.account_id)

        return None

    async def destination_exists(self, account_id: AccountId) -> bool:
        try:
            await self.ledger.load_account(account_id)
        except AccountNotFoundError:
            logger.info(
                "Destination does not exist, creating account",
                extra={"account_id": account_id},
            )
            return False
        except LedgerClientError as e:
            logger.error(
                f"Cannot check destination account: {e}",
                extra={"account_id": account_id},
            )
            raise ServerError() from e
        return True

    async def _load_source_sequence(self, account_id: AccountId) -> str:
        try:
            account = await self.ledger.load_account(account_id)
        except LedgerClientError as e:
            logger.error(
                f"Cannot load source account: {e}", extra={"account_id": account_id},
            )
            raise SourceNotExistError() from e
        return account.sequence

    def _build(self, transaction: AssembledTransaction, seed: str) -> str:
        try:
            return self.builder.build_envelope(transaction, seed)
        except BuilderError as e:
            error = classify_builder_error(e)
            logger.warning(
                f"Transaction builder error: {e.message}",
                extra={"error_code": error.code, "sequence": transaction.sequence_number},
            )
            raise error from e

    async def _submit(self, envelope: str) -> dict[str, Any]:
        try:
            return await self.ledger.submit_transaction(envelope)
        except LedgerClientError as e:
            logger.error(f"Error submitting transaction: {e}")
            raise ServerError() from e
