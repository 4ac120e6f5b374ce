"""
Order creation endpoints.

Gateway errors are logged here and never returned to the caller.
"""
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from resume_guru.api.deps import get_phonepe_service, get_cashfree_service
from resume_guru.payments.gateway import PaymentGatewayError
from resume_guru.schemas.billing import (
    CreateOrderRequest,
    CashfreeOrderRequest,
    CashfreeOrderResponse,
    BillingErrorResponse,
)
from resume_guru.services.cashfree_service import CashfreeService
from resume_guru.services.phonepe_service import PhonePeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Billing"])


def _order_failed(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=BillingErrorResponse(error=message).model_dump(),
    )


# ✅ PHONEPE ORDER
@router.post("/api/create-order", responses={500: {"model": BillingErrorResponse}})
def create_order(
    body: CreateOrderRequest,
    phonepe: PhonePeService = Depends(get_phonepe_service),
):
    """Create a PhonePe order and return the gateway response as-is."""
    try:
        return phonepe.create_order(body.amount, body.orderId)
    except PaymentGatewayError as e:
        logger.error(f"PhonePe order error: {e} (status={e.status_code}, detail={e.detail})")
    except Exception as e:
        logger.error(f"Unexpected PhonePe order error: {type(e).__name__}: {e}", exc_info=True)
    return _order_failed("Order create failed")


# ✅ CASHFREE ORDER (legacy checkout)
@router.post(
    "/create-order",
    response_model=CashfreeOrderResponse,
    responses={500: {"model": BillingErrorResponse}},
)
def create_cashfree_order(
    body: CashfreeOrderRequest,
    cashfree: CashfreeService = Depends(get_cashfree_service),
):
    try:
        return cashfree.create_order(
            body.amount,
            customer_id=body.customer_id,
            customer_email=body.customer_email,
            customer_phone=body.customer_phone,
        )
    except PaymentGatewayError as e:
        logger.error(f"Cashfree API error: {e} (status={e.status_code}, detail={e.detail})")
    except Exception as e:
        logger.error(f"Unexpected Cashfree error: {type(e).__name__}: {e}", exc_info=True)
    return _order_failed("Failed to create order.")
