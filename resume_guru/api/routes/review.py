"""
Resume review and health endpoints.
"""
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from resume_guru.api.deps import get_review_service
from resume_guru.schemas.review import ReviewRequest, ReviewResponse, ErrorResponse, HealthResponse
from resume_guru.services.ats_engine import calculate_ats_score
from resume_guru.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Review"])

MIN_RESUME_LENGTH = 50


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/review",
    response_model=ReviewResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def review_resume(
    body: ReviewRequest,
    review_service: ReviewService = Depends(get_review_service),
):
    """
    Score a resume and get an AI review.

    The AI call never fails the request: when it does not succeed the
    review text is an apology and `ok` stays true.
    """
    resume = body.resume
    if not resume or len(resume.strip()) < MIN_RESUME_LENGTH:
        return _error(status.HTTP_400_BAD_REQUEST, "Resume is missing or too short.")

    jd = body.jd or ""
    try:
        ats_score = calculate_ats_score(resume, jd)
        result = review_service.review_resume(resume, jd)
    except Exception as e:
        logger.error(f"Review failed: {type(e).__name__}: {e}", exc_info=True)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(e) or "An internal server error occurred.",
        )

    if not result.ok:
        logger.warning(f"Returning fallback review: {result.reason}")

    return ReviewResponse(ok=True, atsScore=ats_score, aiReview=result.text)


@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(ok=True, message="Ultra Resume Guru API is healthy and running.")
