"""
Pydantic schemas for review endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field


class ReviewRequest(BaseModel):
    """Request schema for a resume review."""
    resume: Optional[str] = Field(None, description="Resume text (at least 50 characters)")
    jd: Optional[str] = Field(None, description="Optional job description text")

    class Config:
        json_schema_extra = {
            "example": {
                "resume": "Jane Doe - Software Engineer. Experience: developed and launched ...",
                "jd": "We are looking for a backend engineer with Python experience ..."
            }
        }


class ReviewResponse(BaseModel):
    """Response schema for a resume review."""
    ok: bool = True
    atsScore: int = Field(..., ge=0, le=100, description="Heuristic ATS score 0-100")
    aiReview: str = Field(..., description="Markdown review text, or an apology when the AI call failed")


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
    message: str
