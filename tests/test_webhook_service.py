import pytest

from resume_guru.services.webhook_service import (
    get_transaction_id,
    handle_phonepe_callback,
    is_payment_success,
)

from conftest import RecordingGranter


@pytest.mark.parametrize("payload, expected", [
    ({"code": "PAYMENT_SUCCESS"}, True),
    ({"success": True}, True),
    ({"success": False, "code": "PAYMENT_ERROR"}, False),
    ({"code": "PAYMENT_DECLINED"}, False),
    ({}, False),
])
def test_is_payment_success(payload, expected):
    """Test success detection."""
    assert is_payment_success(payload) is expected


def test_success_grants_entitlement():
    """Test that success grants the transaction's entitlement."""
    granter = RecordingGranter()
    payload = {"code": "PAYMENT_SUCCESS", "data": {"merchantTransactionId": "MT9"}}

    assert handle_phonepe_callback(payload, granter) is True
    assert granter.granted == ["MT9"]


def test_decline_grants_nothing():
    """Test that a decline grants nothing."""
    granter = RecordingGranter()

    assert handle_phonepe_callback({"code": "PAYMENT_ERROR"}, granter) is False
    assert granter.granted == []


def test_transaction_id_is_optional():
    """Test transaction id extraction fallbacks."""
    assert get_transaction_id({"success": True}) is None
    assert get_transaction_id({"data": "not-an-object"}) is None


@pytest.mark.parametrize("payload", [["PAYMENT_SUCCESS"], "PAYMENT_SUCCESS", 1, None])
def test_non_object_payload_is_a_decline(payload):
    """Test that a body without an object shape is declined, not granted."""
    granter = RecordingGranter()

    assert handle_phonepe_callback(payload, granter) is False
    assert granter.granted == []
