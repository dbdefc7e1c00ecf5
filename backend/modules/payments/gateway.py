"""
Razorpay payment gateway client.

Creates remote orders over the Razorpay REST API and verifies the HMAC
signature Razorpay attaches to checkout completion callbacks.
"""

import hashlib
import hmac
import logging
from typing import Optional

import httpx

from .exceptions import GatewayError, GatewayTimeoutError
from .interfaces import IPaymentGateway
from .models import GatewayOrder

logger = logging.getLogger(__name__)


def compute_signature(secret: str, external_order_id: str, payment_id: str) -> str:
    """
    Signature Razorpay sends for a completed checkout.

    Hex HMAC-SHA256 of "<order_id>|<payment_id>" keyed by the key secret.
    """
    message = f"{external_order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_signature(
    secret: str,
    external_order_id: str,
    payment_id: str,
    signature: str,
) -> bool:
    """Constant-time check of a completion callback signature."""
    expected = compute_signature(secret, external_order_id, payment_id)
    return hmac.compare_digest(expected, signature)


def _error_description(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Payment gateway returned HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("description"):
        return error["description"]
    return "Failed to create payment order"


class RazorpayGateway(IPaymentGateway):
    """
    Razorpay orders API client.

    Each call opens a short-lived AsyncClient with an explicit timeout, so a
    hung gateway surfaces as GatewayTimeoutError instead of a stuck request.
    """

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        api_url: str = "https://api.razorpay.com/v1",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._key_id = key_id
        self._key_secret = key_secret
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    @property
    def key_id(self) -> str:
        return self._key_id

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[dict[str, str]] = None,
    ) -> GatewayOrder:
        if not self._key_id or not self._key_secret:
            raise GatewayError("Payment gateway is not configured")

        payload = {
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "notes": {k: v for k, v in (notes or {}).items() if v is not None},
        }

        try:
            async with httpx.AsyncClient(
                base_url=self._api_url,
                auth=(self._key_id, self._key_secret),
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post("/orders", json=payload)
        except httpx.TimeoutException:
            logger.warning("Razorpay order creation timed out for receipt %s", receipt)
            raise GatewayTimeoutError(self._timeout)
        except httpx.HTTPError as e:
            logger.error("Razorpay request failed for receipt %s: %s", receipt, e)
            raise GatewayError(f"Could not reach payment gateway: {e}")

        if response.is_error:
            description = _error_description(response)
            logger.error(
                "Razorpay rejected order for receipt %s (HTTP %s): %s",
                receipt,
                response.status_code,
                description,
            )
            raise GatewayError(description, status_code=response.status_code)

        return GatewayOrder(**response.json())
