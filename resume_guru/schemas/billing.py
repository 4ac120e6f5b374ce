"""
Pydantic schemas for billing endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field


class CreateOrderRequest(BaseModel):
    """Request schema for creating a PhonePe order."""
    amount: float = Field(..., gt=0, description="Amount in rupees")
    orderId: Optional[str] = Field(None, max_length=35, description="Merchant transaction id; generated when omitted")

    class Config:
        json_schema_extra = {
            "example": {
                "amount": 99,
                "orderId": "MT7850590068188104"
            }
        }


class CashfreeOrderRequest(BaseModel):
    """Request schema for creating a Cashfree order."""
    amount: float = Field(..., gt=0, description="Amount in rupees")
    customer_id: Optional[str] = Field(None, description="Cashfree customer id; generated when omitted")
    customer_email: str = Field("test@example.com", description="Customer email")
    customer_phone: str = Field("9999999999", description="Customer phone")


class CashfreeOrderResponse(BaseModel):
    payment_session_id: str


class BillingErrorResponse(BaseModel):
    """Error response schema for billing operations."""
    error: str = Field(..., description="Error message")
