"""
Payment gateway callback handling.

Callbacks are not signature-verified and carry no replay protection; the
gateway's verification scheme is not wired in yet.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from resume_guru.core.logging_config import sanitize_log_data

logger = logging.getLogger(__name__)

PAYMENT_SUCCESS_CODE = "PAYMENT_SUCCESS"


class EntitlementGranter(ABC):
    """Unlocks the paid tier for a successful transaction."""

    @abstractmethod
    def grant_entitlement(self, transaction_id: Optional[str]) -> None:
        pass


class LoggingEntitlementGranter(EntitlementGranter):
    """Default granter: records the unlock in the log only."""

    def grant_entitlement(self, transaction_id: Optional[str]) -> None:
        logger.info(f"Payment success - unlock Resume Guru Ultra: transaction_id={transaction_id}")


def is_payment_success(payload: Mapping[str, Any]) -> bool:
    return payload.get("code") == PAYMENT_SUCCESS_CODE or bool(payload.get("success"))


def get_transaction_id(payload: Mapping[str, Any]) -> Optional[str]:
    data = payload.get("data")
    if isinstance(data, Mapping):
        return data.get("merchantTransactionId")
    return None


def handle_phonepe_callback(payload: Any, granter: EntitlementGranter) -> bool:
    """
    Interpret a PhonePe callback.

    A body that is not a JSON object carries no success signal and counts
    as a decline.

    Returns:
        True if the payment succeeded and the entitlement was granted
    """
    if not isinstance(payload, Mapping):
        logger.info(f"Payment failed/cancelled: non-object payload ({type(payload).__name__})")
        return False

    logger.info(f"PhonePe webhook received: {sanitize_log_data(dict(payload))}")

    if is_payment_success(payload):
        granter.grant_entitlement(get_transaction_id(payload))
        return True

    logger.info(f"Payment failed/cancelled: code={payload.get('code')}")
    return False
