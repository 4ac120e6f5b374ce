"""
Tests for the httpx payment transport, using httpx.MockTransport.
"""
import httpx
import pytest

from resume_guru.payments.gateway import HttpxPaymentGateway, PaymentGatewayError


@pytest.fixture
def mock_transport(monkeypatch):
    """Route every httpx.Client created by the gateway through a handler."""
    state = {}
    real_client = httpx.Client

    def install(handler):
        state["handler"] = handler
        monkeypatch.setattr(
            httpx, "Client",
            lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
        )

    return install


def test_post_json_returns_body(mock_transport):
    """Test that a 2xx JSON reply is returned."""
    seen = {}

    def handler(request):
        seen["headers"] = request.headers
        seen["body"] = request.content
        return httpx.Response(200, json={"success": True})

    mock_transport(handler)
    result = HttpxPaymentGateway().post_json(
        "https://gw.example.com/pg/v1/pay", {"request": "abc"}, {"X-VERIFY": "sig###1"}
    )

    assert result == {"success": True}
    assert seen["headers"]["X-VERIFY"] == "sig###1"
    assert b'"request"' in seen["body"]


def test_http_error_is_wrapped(mock_transport):
    """Test that a non-2xx reply raises PaymentGatewayError."""
    mock_transport(lambda request: httpx.Response(401, json={"code": "UNAUTHORIZED"}))

    with pytest.raises(PaymentGatewayError) as exc_info:
        HttpxPaymentGateway().post_json("https://gw.example.com/x", {}, {})

    assert exc_info.value.status_code == 401
    assert "UNAUTHORIZED" in exc_info.value.detail


def test_transport_error_is_wrapped(mock_transport):
    """Test that a connection error raises PaymentGatewayError."""
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    mock_transport(handler)
    with pytest.raises(PaymentGatewayError):
        HttpxPaymentGateway().post_json("https://gw.example.com/x", {}, {})


def test_non_json_body_is_wrapped(mock_transport):
    """Test that a non-JSON reply raises PaymentGatewayError."""
    mock_transport(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(PaymentGatewayError):
        HttpxPaymentGateway().post_json("https://gw.example.com/x", {}, {})
