"""
Outbound HTTP transport for payment gateways.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class PaymentGatewayError(Exception):
    """Order creation failed (configuration, transport or gateway error)."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class PaymentGateway(ABC):
    """Posts a JSON body to a gateway endpoint and returns its JSON reply."""

    @abstractmethod
    def post_json(self, url: str, body: Dict[str, Any], headers: Dict[str, str]) -> Dict[str, Any]:
        """
        Raises:
            PaymentGatewayError: On transport failure, non-2xx status or non-JSON reply
        """
        pass


class HttpxPaymentGateway(PaymentGateway):
    """PaymentGateway backed by httpx. One attempt, no retries."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    def post_json(self, url: str, body: Dict[str, Any], headers: Dict[str, str]) -> Dict[str, Any]:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, json=body, headers=headers)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            detail = e.response.text[:500]
            logger.error(f"Payment gateway returned {e.response.status_code}: {detail}")
            raise PaymentGatewayError(
                f"Gateway returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                detail=detail,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Payment gateway request failed: {type(e).__name__}: {e}")
            raise PaymentGatewayError(f"Gateway request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Payment gateway returned a non-JSON body: {e}")
            raise PaymentGatewayError("Gateway returned a non-JSON body") from e
