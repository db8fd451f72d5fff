"""Payment Gateway API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PaymentError -> {"code", "message"} JSON
    - Collaborators (Horizon, federation, builder) created once on startup,
      HTTP clients closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gateway.api.error_handlers import register_error_handlers
from gateway.api.routes import health, payment
from gateway.config import get_settings
from gateway.infrastructure.federation import FederationResolver
from gateway.infrastructure.horizon_client import HorizonClient
from gateway.infrastructure.observability import setup_logging
from gateway.infrastructure.transaction_builder import StellarTransactionBuilder
from gateway.services.payment_pipeline import PaymentPipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    horizon = HorizonClient(
        settings.horizon_url, timeout_seconds=settings.horizon_timeout_seconds,
    )
    federation = FederationResolver(
        timeout_seconds=settings.federation_timeout_seconds,
    )
    app.state.horizon = horizon
    app.state.pipeline = PaymentPipeline(
        resolver=federation,
        ledger=horizon,
        builder=StellarTransactionBuilder(),
        network_passphrase=settings.network_passphrase,
        base_fee=settings.base_fee,
    )
    logger.info(f"Payment gateway started against {settings.horizon_url}")
    yield
    await federation.aclose()
    await horizon.aclose()
    logger.info("Payment gateway shutting down")


app = FastAPI(title="Payment Gateway", version="1.0.0", lifespan=lifespan)

register_error_handlers(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(payment.router)
