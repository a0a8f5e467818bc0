"""
Business logic for invoices.

An invoice is created at the payment gateway for a user's event
registration and mirrored in the local ``invoices`` table.  The local
row is written only after the gateway call succeeded.  There is no
compensation when the local write fails after the gateway accepted the
invoice, and no idempotency key: submitting twice creates two gateway
invoices.
"""

import logging
from typing import Any, Dict

from ..core import errors
from ..core.db import get_connection, new_id, utc_now
from ..schemas.invoice import InvoiceCreate, InvoiceResult
from ..utils.phone import extract_last_10_digits
from .payment_gateway import PaymentGateway

CURRENCY = "INR"
PAISE_PER_RUPEE = 100


def build_invoice_payload(user, event, amount: int) -> Dict[str, Any]:
    """Build the gateway request for ``user`` registering to ``event``.

    ``amount`` is in paise.  Missing address fields are sent as empty
    strings; a missing email is left out of the customer block.
    """
    customer = {"name": user["name"], "contact": user["mobile_number"]}
    if user["email"]:
        customer["email"] = user["email"]
    return {
        "amount": amount,
        "currency": CURRENCY,
        "description": f"Registration for {event['title']}",
        "customer": customer,
        "notes": {"eventId": event["id"], "userId": user["id"]},
        "terms": "Registration fee for event",
        "customer_details": {
            "billing_address": {
                "line1": user["address"] or "",
                "city": user["city"] or "",
                "state": user["state"] or "",
                "zipcode": user["pincode"] or "",
                "country": "in",
            },
        },
    }


class InvoiceService:
    """Service creating gateway invoices for event registrations."""

    @classmethod
    async def create_invoice(cls, data: InvoiceCreate, gateway: PaymentGateway) -> InvoiceResult:
        """Create a gateway invoice and record it locally.

        Raises ``ValidationError`` if any of amount, event id or mobile
        number is missing (zero and empty strings count as missing),
        ``NotFoundError`` if the user or event does not exist and
        ``GatewayError`` if the gateway call fails.
        """
        logger = logging.getLogger(__name__)
        if not data.amount or not data.event_id or not data.mobile_number:
            raise errors.ValidationError("Missing required parameters")

        mobile_number = extract_last_10_digits(data.mobile_number)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            user = cursor.execute(
                """
                SELECT id, name, email, mobile_number, address, city, state, pincode
                FROM users WHERE mobile_number = ?
                """,
                (mobile_number,),
            ).fetchone()
            if not user:
                raise errors.NotFoundError("User not found")
            event = cursor.execute(
                "SELECT id, title FROM events WHERE id = ?",
                (data.event_id,),
            ).fetchone()
            if not event:
                raise errors.NotFoundError("Event not found")

            payload = build_invoice_payload(user, event, data.amount)
            try:
                invoice = gateway.create_invoice(payload)
            except errors.GatewayError:
                raise
            except Exception as e:
                raise errors.GatewayError(str(e)) from e
            logger.info(
                "Gateway invoice %s created for user %s, event %s",
                invoice["id"], user["id"], event["id"],
            )

            cursor.execute(
                """
                INSERT INTO invoices (id, invoice_id, amount, status, user_id, event_id, razorpay_invoice_id, invoice_url, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    new_id(),
                    invoice["id"],
                    data.amount / PAISE_PER_RUPEE,
                    "created",
                    user["id"],
                    event["id"],
                    invoice["id"],
                    invoice.get("short_url"),
                    utc_now(),
                ),
            )
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

        return InvoiceResult(
            message="Invoice created successfully",
            is_ok=True,
            invoice_id=invoice["id"],
            invoice_url=invoice.get("short_url"),
        )
