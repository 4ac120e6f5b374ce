"""
Cashfree order creation (legacy checkout flow).
"""
import logging
import time
from typing import Any, Dict, Optional

from resume_guru.core.config import Settings
from resume_guru.payments.gateway import PaymentGateway, PaymentGatewayError

logger = logging.getLogger(__name__)

ORDERS_ENDPOINT = "/pg/orders"
API_VERSION = "2022-09-01"


class CashfreeService:
    """Creates Cashfree orders for the legacy checkout flow."""

    def __init__(self, settings: Settings, gateway: PaymentGateway):
        self.settings = settings
        self.gateway = gateway

    def create_order(
        self,
        amount: float,
        customer_id: Optional[str] = None,
        customer_email: str = "test@example.com",
        customer_phone: str = "9999999999",
    ) -> Dict[str, Any]:
        """
        Create a Cashfree order and return its payment session id.

        Returns:
            Dictionary with 'payment_session_id'

        Raises:
            PaymentGatewayError: On configuration, transport or gateway failure
        """
        if not self.settings.cashfree_app_id or not self.settings.cashfree_secret_key:
            raise PaymentGatewayError("Cashfree not configured - CASHFREE_APP_ID and CASHFREE_SECRET_KEY required")

        stamp = int(time.time() * 1000)
        order_id = f"order_{stamp}"
        body = {
            "order_amount": amount,
            "order_currency": "INR",
            "order_id": order_id,
            "customer_details": {
                "customer_id": customer_id or f"cust_{stamp}",
                "customer_email": customer_email,
                "customer_phone": customer_phone,
            },
            "order_meta": {
                "return_url": f"{self.settings.app_public_url}/order_status?order_id={{order_id}}",
            },
        }

        response = self.gateway.post_json(
            f"{self.settings.cashfree_base_url}{ORDERS_ENDPOINT}",
            body,
            {
                "x-client-id": self.settings.cashfree_app_id,
                "x-client-secret": self.settings.cashfree_secret_key,
                "x-api-version": API_VERSION,
                "Content-Type": "application/json",
            },
        )

        session_id = response.get("payment_session_id")
        if not session_id:
            raise PaymentGatewayError("Cashfree response had no payment_session_id", detail=response)

        logger.info(f"Created Cashfree order: order_id={order_id}")
        return {"payment_session_id": session_id}
