from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.exceptions import BadRequestError
from app.deps import get_refund_service
from app.services.refunds import RefundService

router = APIRouter()


class RefundRequest(BaseModel):
    user_key: str = ""


@router.post("/{order_key}/refund/")
async def order_refund(
    order_key: str,
    body: RefundRequest,
    service: RefundService = Depends(get_refund_service),
):
    """Refund an order (positional key) to the given user; echoes the request body."""
    if not body.user_key.strip():
        raise BadRequestError("user_key is required")
    service.refund(body.user_key, order_key)
    return body.model_dump()
