"""
Pydantic models for invoice creation.

``amount`` is expressed in paise (the gateway's minor unit).  The
response uses the ``{message, isOk}`` envelope expected by the payment
page for every outcome, successful or not.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from .base import ApiModel


class InvoiceCreate(ApiModel):
    amount: Optional[int] = Field(None, examples=[49900], description="Amount in paise")
    event_id: Optional[str] = Field(None, examples=["c1a2b3"])
    mobile_number: Optional[str] = Field(None, examples=["+91 98765-43210"])

    @field_validator("event_id", "mobile_number", mode="before")
    @classmethod
    def coerce_to_str(cls, v: Any) -> Any:
        """Accept numeric identifiers and phone numbers sent as JSON numbers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class InvoiceResult(ApiModel):
    message: str
    is_ok: bool
    invoice_id: Optional[str] = None
    invoice_url: Optional[str] = None
