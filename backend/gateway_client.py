"""
Razorpay REST client.

One instance is built at startup (see main.lifespan), kept on app.state and
injected into routes via deps.get_gateway. Nothing here is module-global.
"""
import hashlib
import hmac
import logging
from typing import Optional

import httpx

from config import Settings
from exceptions import PaymentGatewayError

logger = logging.getLogger(__name__)


class RazorpayClient:
    """Thin async wrapper over the Razorpay Orders API."""

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        api_base: str = "https://api.razorpay.com/v1",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.key_id = key_id
        self._key_secret = key_secret
        self.api_base = api_base.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.api_base,
            auth=(key_id, key_secret),
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "RazorpayClient":
        """Build a client from application settings."""
        return cls(
            key_id=settings.razorpay_key_id,
            key_secret=settings.razorpay_secret,
            api_base=settings.razorpay_api_base,
            timeout=settings.razorpay_timeout_seconds,
            **kwargs,
        )

    async def create_order(self, amount: int, currency: str, receipt: str) -> dict:
        """
        Create a Razorpay order.

        Args:
            amount: Amount in minor units (paise for INR)
            currency: ISO currency code
            receipt: Caller-side receipt token

        Returns:
            dict: The gateway's order object, unmodified

        Raises:
            PaymentGatewayError on transport failure or a non-2xx response
        """
        payload = {"amount": amount, "currency": currency, "receipt": receipt}
        try:
            response = await self._http.post("/orders", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Razorpay rejected order {receipt}: "
                f"{e.response.status_code} {e.response.text[:200]}"
            )
            raise PaymentGatewayError(
                f"Razorpay returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Razorpay request failed for {receipt}: {e}")
            raise PaymentGatewayError(f"Razorpay unreachable: {e}") from e

        return response.json()

    def verify_payment_signature(
        self,
        gateway_order_id: Optional[str],
        payment_id: Optional[str],
        signature: Optional[str],
    ) -> bool:
        """
        Check the checkout signature Razorpay hands the browser after payment.

        signature = HMAC-SHA256(key_secret, "<order_id>|<payment_id>"), hex.
        Fails closed when the secret or any input is missing.
        """
        if not self._key_secret:
            logger.error("RAZORPAY_SECRET not configured — rejecting payment signature")
            return False
        if not gateway_order_id or not payment_id or not signature:
            logger.warning("Payment signature check missing order id, payment id or signature")
            return False

        expected = hmac.new(
            self._key_secret.encode("utf-8"),
            f"{gateway_order_id}|{payment_id}".encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

        return hmac.compare_digest(expected, signature)

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()
