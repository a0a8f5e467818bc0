"""
Invoice endpoint for API v1.

Called by the payment page.  Every outcome, including errors, is
returned in the ``{message, isOk}`` envelope the page expects; gateway
failures echo the gateway's message to the caller.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from fitness_events_api.app.core import errors
from fitness_events_api.app.schemas.invoice import InvoiceCreate, InvoiceResult
from fitness_events_api.app.services.invoice_service import InvoiceService
from fitness_events_api.app.services.payment_gateway import PaymentGateway, get_payment_gateway

logger = logging.getLogger(__name__)

router = APIRouter()


def invoice_failure(status_code: int, message: str) -> JSONResponse:
    body = InvoiceResult(message=message, is_ok=False).model_dump(by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post("", response_model=InvoiceResult)
async def create_invoice(
    payload: InvoiceCreate,
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    """Create a gateway invoice for an event registration.

    - **amount**: amount in paise.
    - **eventId**: event being paid for.
    - **mobileNumber**: the paying user's number, any formatting.

    Returns the gateway invoice id and its short URL.  400 when a field
    is missing, 404 for an unknown user or event, 500 when the gateway
    fails.
    """
    try:
        return await InvoiceService.create_invoice(payload, gateway)
    except errors.GatewayError as e:
        logger.error("Error creating invoice: %s", e.message)
        return invoice_failure(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to create invoice: {e.message}")
    except errors.ApiError as e:
        return invoice_failure(e.status_code, e.message)
    except Exception as e:
        logger.exception("Error creating invoice: %s", e)
        return invoice_failure(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to create invoice: {e}")
