"""
Dependencies resolving the services built by create_app().
"""
from fastapi import Request

from resume_guru.services.cashfree_service import CashfreeService
from resume_guru.services.phonepe_service import PhonePeService
from resume_guru.services.review_service import ReviewService
from resume_guru.services.webhook_service import EntitlementGranter


def get_review_service(request: Request) -> ReviewService:
    return request.app.state.review_service


def get_phonepe_service(request: Request) -> PhonePeService:
    return request.app.state.phonepe_service


def get_cashfree_service(request: Request) -> CashfreeService:
    return request.app.state.cashfree_service


def get_entitlement_granter(request: Request) -> EntitlementGranter:
    return request.app.state.entitlement_granter
