"""
Shared fixtures: fake collaborators so no test touches the network.
"""
import pytest
from fastapi.testclient import TestClient

from resume_guru.core.config import Settings
from resume_guru.llm.provider import LLMProvider, LLMResponse
from resume_guru.main import create_app
from resume_guru.payments.gateway import PaymentGateway
from resume_guru.services.webhook_service import EntitlementGranter

GOOD_REVIEW = (
    "---\n\n**SUMMARY**\nA motivated engineer with solid backend experience.\n\n"
    "---\n\n**STRENGTHS**\n1. Strong Python skills\n2. Led a small team\n\n---"
)


class FakeLLMProvider(LLMProvider):
    def __init__(self, content=GOOD_REVIEW, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def chat(self, messages, model, temperature=0.7, max_tokens=None, **kwargs):
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
            **kwargs,
        })
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=model)


class FakePaymentGateway(PaymentGateway):
    def __init__(self, response=None, error=None):
        self.response = response if response is not None else {"success": True, "code": "PAYMENT_INITIATED"}
        self.error = error
        self.calls = []

    def post_json(self, url, body, headers):
        self.calls.append({"url": url, "body": body, "headers": headers})
        if self.error is not None:
            raise self.error
        return self.response


class RecordingGranter(EntitlementGranter):
    def __init__(self):
        self.granted = []

    def grant_entitlement(self, transaction_id):
        self.granted.append(transaction_id)


@pytest.fixture
def settings():
    return Settings(
        llm_api_key="test-llm-key",
        llm_model="test/model",
        app_public_url="https://guru.example.com",
        phonepe_merchant_id="MERCHANTUAT",
        phonepe_salt_key="test-salt-key",
        phonepe_salt_index=1,
        phonepe_base_url="https://phonepe.example.com/pg-sandbox",
        cashfree_app_id="cf-app-id",
        cashfree_secret_key="cf-secret",
        cashfree_base_url="https://cashfree.example.com",
    )


@pytest.fixture
def llm():
    return FakeLLMProvider()


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def granter():
    return RecordingGranter()


@pytest.fixture
def client(settings, llm, gateway, granter):
    app = create_app(
        settings=settings,
        llm_provider=llm,
        payment_gateway=gateway,
        entitlement_granter=granter,
    )
    return TestClient(app)
