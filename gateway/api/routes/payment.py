"""Payment Route: POST /payment, form-encoded in, Horizon JSON or error object out.

Invariants:
    - The route only parses the form and delegates to PaymentPipeline
    - Success body is Horizon's submission response, unmodified
    - Failures propagate as PaymentError to api/error_handlers.py
"""

import logging

from fastapi import APIRouter, Depends, Request

from gateway.core.payment_request import parse_payment_form
from gateway.services.payment_pipeline import PaymentPipeline

logger = logging.getLogger(__name__)
router = APIRouter(tags=["payment"])


def get_pipeline(request: Request) -> PaymentPipeline:
    """Pipeline built in the lifespan. Overridden in tests."""
    return request.app.state.pipeline


@router.post("/payment")
async def payment(
    request: Request, pipeline: PaymentPipeline = Depends(get_pipeline),
):
    form = await request.form()
    payment_request = parse_payment_form(form)
    logger.info(
        "Payment request received",
        extra={
            "payment_type": payment_request.payment_type,
            "destination": payment_request.destination,
        },
    )
    return await pipeline.execute(payment_request)
