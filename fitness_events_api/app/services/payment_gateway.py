"""
Payment gateway integration.

Routes never talk to the payment provider directly; they receive a
``PaymentGateway`` through the ``get_payment_gateway`` dependency, which
tests replace via ``app.dependency_overrides``.  The production
implementation calls the Razorpay invoices REST API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..core.config import settings
from ..core.errors import GatewayError

logger = logging.getLogger(__name__)


class PaymentGateway:
    """Interface for creating invoices with a payment provider."""

    def create_invoice(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create an invoice and return the provider's invoice object.

        The returned mapping contains at least ``id`` and ``short_url``.
        Implementations raise ``GatewayError`` on any failure.
        """
        raise NotImplementedError


class RazorpayGateway(PaymentGateway):
    """Razorpay invoices API client.

    Authenticates with HTTP basic auth using the key id and key secret.
    Amounts in the payload are in paise.  No idempotency key is sent, so
    repeated calls create repeated invoices.
    """

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        base_url: str = "https://api.razorpay.com/v1",
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.key_id = key_id
        self.key_secret = key_secret
        self.base_url = base_url.rstrip("/")
        self._client = client

    def create_invoice(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self.key_id or not self.key_secret:
            raise GatewayError("Razorpay key id and key secret must be configured")
        url = f"{self.base_url}/invoices"
        client = self._client or httpx.Client(timeout=30)
        try:
            response = client.post(url, json=payload, auth=(self.key_id, self.key_secret))
        except httpx.HTTPError as e:
            logger.error("Razorpay request failed: %s", e)
            raise GatewayError(str(e)) from e
        finally:
            if self._client is None:
                client.close()
        if response.is_error:
            raise GatewayError(self._error_message(response))
        data = response.json()
        if not data.get("id"):
            raise GatewayError("Razorpay response did not contain an invoice id")
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract ``error.description`` from a Razorpay error body."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            description = (body.get("error") or {}).get("description")
            if description:
                return description
        return f"Razorpay API error: {response.status_code}"


def get_payment_gateway() -> PaymentGateway:
    """FastAPI dependency returning the configured gateway."""
    return RazorpayGateway(
        key_id=settings.razorpay_key_id,
        key_secret=settings.razorpay_key_secret,
        base_url=settings.razorpay_api_url,
    )
