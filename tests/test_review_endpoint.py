"""
Integration tests for /api/review and /api/health.
"""
import httpx
from openai import APIConnectionError

from resume_guru.services.ats_engine import calculate_ats_score
from resume_guru.services.review_service import FALLBACK_REVIEW_MESSAGE

RESUME = (
    "Jane Doe - Backend Engineer. Experience: developed and launched payment "
    "services in Python. Education: B.Tech. Skills: Python, Django, PostgreSQL."
)
JD = "Backend engineer with Python, Django and Kubernetes experience."


def test_health(client):
    """Test the health endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "message": "Ultra Resume Guru API is healthy and running."}


def test_review_success(client, llm):
    """Test a successful review response."""
    response = client.post("/api/review", json={"resume": RESUME, "jd": JD})

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["atsScore"] == calculate_ats_score(RESUME, JD)
    assert data["aiReview"].startswith("**SUMMARY**")
    assert "---" not in data["aiReview"]
    assert len(llm.calls) == 1


def test_review_without_jd(client):
    """Test a review without a job description."""
    response = client.post("/api/review", json={"resume": RESUME})

    assert response.status_code == 200
    assert response.json()["atsScore"] == calculate_ats_score(RESUME, "")


def test_short_resume_is_rejected_without_llm_call(client, llm):
    """Test that a short resume is rejected before the AI call."""
    response = client.post("/api/review", json={"resume": "x" * 40})

    assert response.status_code == 400
    data = response.json()
    assert data["ok"] is False
    assert data["error"]
    assert llm.calls == []


def test_whitespace_padding_does_not_count(client, llm):
    """Test that surrounding whitespace does not count toward length."""
    response = client.post("/api/review", json={"resume": "   " + "x" * 49 + "   "})

    assert response.status_code == 400
    assert llm.calls == []


def test_missing_resume_is_rejected(client, llm):
    """Test that a missing resume is rejected."""
    response = client.post("/api/review", json={"jd": JD})

    assert response.status_code == 400
    assert response.json()["ok"] is False
    assert llm.calls == []


def test_malformed_body_is_rejected(client, llm):
    """Test that a non-JSON body is rejected."""
    response = client.post(
        "/api/review", content=b"not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Invalid request body."}
    assert llm.calls == []


def test_llm_failure_still_returns_ok(client, llm):
    """Test that an AI failure still returns ok with the fallback."""
    llm.error = APIConnectionError(request=httpx.Request("POST", "https://llm.example.com"))

    response = client.post("/api/review", json={"resume": RESUME})

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["aiReview"] == FALLBACK_REVIEW_MESSAGE
    assert data["atsScore"] == calculate_ats_score(RESUME, "")


def test_unexpected_error_returns_500(client, monkeypatch):
    """Test that unexpected errors return 500 with the message."""
    from resume_guru.api.routes import review

    def explode(resume, jd):
        raise RuntimeError("scoring exploded")

    monkeypatch.setattr(review, "calculate_ats_score", explode)
    response = client.post("/api/review", json={"resume": RESUME})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "scoring exploded"}


def test_root(client):
    """Test the root endpoint."""
    assert client.get("/").json() == {"status": "Ultra Resume Guru API running"}
