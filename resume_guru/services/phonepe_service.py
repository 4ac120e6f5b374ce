"""
PhonePe order creation.

Builds the signed pay-page request and forwards it to the gateway.
"""
import base64
import hashlib
import json
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from resume_guru.core.config import Settings
from resume_guru.payments.gateway import PaymentGateway, PaymentGatewayError

logger = logging.getLogger(__name__)

PAY_ENDPOINT = "/pg/v1/pay"
MAX_TRANSACTION_ID_LENGTH = 34


@dataclass(frozen=True)
class SignedOrder:
    payload: Dict[str, Any]
    base64_payload: str
    x_verify: str


def generate_transaction_id() -> str:
    return ("MT" + uuid.uuid4().hex.upper())[:MAX_TRANSACTION_ID_LENGTH]


def to_minor_units(amount: float) -> int:
    """Rupees to paise."""
    return int(round(amount * 100))


def compute_x_verify(base64_payload: str, endpoint: str, salt_key: str, salt_index: int = 1) -> str:
    digest = hashlib.sha256((base64_payload + endpoint + salt_key).encode("utf-8")).hexdigest()
    return f"{digest}###{salt_index}"


class PhonePeService:
    """Creates PhonePe pay-page orders."""

    def __init__(self, settings: Settings, gateway: PaymentGateway):
        self.settings = settings
        self.gateway = gateway

    def build_signed_order(self, amount: float, order_id: Optional[str] = None) -> SignedOrder:
        """
        Build the order payload, its base64 form and the X-VERIFY digest.

        Raises:
            PaymentGatewayError: If merchant id or salt key is not configured
        """
        merchant_id = self.settings.phonepe_merchant_id
        salt_key = self.settings.phonepe_salt_key
        if not merchant_id or not salt_key:
            raise PaymentGatewayError("PhonePe not configured - PHONEPE_MERCHANT_ID and PHONEPE_SALT_KEY required")

        payload = {
            "merchantId": merchant_id,
            "merchantTransactionId": order_id or generate_transaction_id(),
            "amount": to_minor_units(amount),
            "redirectUrl": self.settings.phonepe_redirect_url,
            "redirectMode": "POST",
            "callbackUrl": self.settings.phonepe_callback_url,
            "paymentInstrument": {"type": "PAY_PAGE"},
        }
        payload_json = json.dumps(payload, separators=(",", ":"))
        base64_payload = base64.b64encode(payload_json.encode("utf-8")).decode("ascii")

        return SignedOrder(
            payload=payload,
            base64_payload=base64_payload,
            x_verify=compute_x_verify(
                base64_payload, PAY_ENDPOINT, salt_key, self.settings.phonepe_salt_index
            ),
        )

    def create_order(self, amount: float, order_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a PhonePe order.

        Args:
            amount: Amount in rupees
            order_id: Merchant transaction id; generated when omitted

        Returns:
            The gateway's JSON response, unchanged

        Raises:
            PaymentGatewayError: On configuration, transport or gateway failure
        """
        order = self.build_signed_order(amount, order_id)
        transaction_id = order.payload["merchantTransactionId"]
        logger.info(f"Creating PhonePe order: transaction_id={transaction_id}, amount={order.payload['amount']}")

        response = self.gateway.post_json(
            f"{self.settings.phonepe_base_url}{PAY_ENDPOINT}",
            {"request": order.base64_payload},
            {
                "Content-Type": "application/json",
                "X-VERIFY": order.x_verify,
                "X-MERCHANT-ID": self.settings.phonepe_merchant_id,
            },
        )
        logger.info(f"PhonePe order created: transaction_id={transaction_id}")
        return response
