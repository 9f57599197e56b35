"""Shared FastAPI dependencies."""

from fastapi import Request

from app.services.refunds import RefundService


def get_refund_service(request: Request) -> RefundService:
    """Dependency: the refund service built at startup."""
    return request.app.state.refund_service
