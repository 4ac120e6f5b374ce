import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_guru.api.routes import review, billing, billing_webhook
from resume_guru.core.config import Settings
from resume_guru.core.logging_config import setup_logging, sanitize_log_data
from resume_guru.llm.openai_provider import OpenAIProvider
from resume_guru.llm.provider import LLMProvider
from resume_guru.payments.gateway import PaymentGateway, HttpxPaymentGateway
from resume_guru.services.cashfree_service import CashfreeService
from resume_guru.services.phonepe_service import PhonePeService
from resume_guru.services.review_service import ReviewService
from resume_guru.services.webhook_service import EntitlementGranter, LoggingEntitlementGranter

logger = logging.getLogger(__name__)


async def _invalid_request_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": "Invalid request body."},
    )


def create_app(
    settings: Optional[Settings] = None,
    llm_provider: Optional[LLMProvider] = None,
    payment_gateway: Optional[PaymentGateway] = None,
    entitlement_granter: Optional[EntitlementGranter] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Collaborators default to the real implementations; tests pass fakes.
    """
    settings = settings or Settings.from_env()

    if not settings.llm_api_key:
        logger.warning("OPENROUTER_API_KEY is not set. AI reviews will return the fallback message.")

    llm_provider = llm_provider or OpenAIProvider(settings)
    payment_gateway = payment_gateway or HttpxPaymentGateway(timeout=settings.payment_timeout_seconds)

    app = FastAPI(title="Ultra Resume Guru API")

    app.state.settings = settings
    app.state.review_service = ReviewService(settings, llm_provider)
    app.state.phonepe_service = PhonePeService(settings, payment_gateway)
    app.state.cashfree_service = CashfreeService(settings, payment_gateway)
    app.state.entitlement_granter = entitlement_granter or LoggingEntitlementGranter()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_request_handler)

    app.include_router(review.router)
    app.include_router(billing.router)
    app.include_router(billing_webhook.router)

    @app.get("/")
    def root():
        return {"status": "Ultra Resume Guru API running"}

    return app


def main():
    import uvicorn

    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_dir)
    logger.info(f"Starting with config: {sanitize_log_data(settings.summary())}")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
