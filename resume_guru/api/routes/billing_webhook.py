import logging
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from resume_guru.api.deps import get_entitlement_granter
from resume_guru.core.logging_config import sanitize_log_data
from resume_guru.services.webhook_service import EntitlementGranter, handle_phonepe_callback

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Billing Webhook"])


@router.post("/webhook/phonepe", response_class=PlainTextResponse)
async def phonepe_webhook(
    request: Request,
    granter: EntitlementGranter = Depends(get_entitlement_granter),
):
    try:
        payload = await request.json()
        handle_phonepe_callback(payload, granter)
    except Exception as e:
        logger.error(f"Webhook error: {type(e).__name__}: {e}")
        return PlainTextResponse("FAIL", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return PlainTextResponse("OK", status_code=status.HTTP_200_OK)


@router.post("/cashfree-webhook")
async def cashfree_webhook(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        logger.info(f"Cashfree webhook payload: {sanitize_log_data(payload)}")
    else:
        logger.info("Cashfree webhook received a non-object payload")
    return Response(status_code=status.HTTP_200_OK)
