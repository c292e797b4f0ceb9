"""
Shop order endpoints — Razorpay order initiation, payment capture, order history.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from deps import get_db, get_gateway
from domain.constants import (
    CAPTURE_FAILURE_MESSAGE,
    CAPTURE_SUCCESS_MESSAGE,
    CREATE_ORDER_FAILURE_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
)
from domain.errors import DomainError, ServiceError
from domain.responses import success_response
from gateway_client import RazorpayClient
from models import CapturePaymentRequest, CreateGatewayOrderRequest, serialize_order
from services import order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/shop/order", tags=["orders"])

FAILURE_MESSAGES = {
    f"{router.prefix}/create": CREATE_ORDER_FAILURE_MESSAGE,
    f"{router.prefix}/capture": CAPTURE_FAILURE_MESSAGE,
}


def failure_message_for(path: str) -> str:
    """Generic message for a failed request on path; no per-field detail."""
    return FAILURE_MESSAGES.get(path.rstrip("/"), GENERIC_FAILURE_MESSAGE)


@router.post("/create")
async def create_order(
    request: CreateGatewayOrderRequest,
    gateway: RazorpayClient = Depends(get_gateway),
):
    """Create a Razorpay order the storefront opens checkout against."""
    try:
        gateway_order = await order_service.create_gateway_order(
            gateway,
            total_amount=request.total_amount,
            currency=request.currency,
        )
    except Exception as e:
        logger.error(f"Create Razorpay order error: {e}", exc_info=True)
        raise ServiceError(CREATE_ORDER_FAILURE_MESSAGE)

    return {"success": True, "order": gateway_order}


@router.post("/capture")
async def capture_payment(
    request: CapturePaymentRequest,
    db: AsyncSession = Depends(get_db),
    gateway: RazorpayClient = Depends(get_gateway),
):
    """Record a completed payment: adjust stock, delete the cart, save the order."""
    try:
        order = await order_service.capture_payment(db, payload=request, gateway=gateway)
        await db.commit()
        await db.refresh(order)
    except DomainError:
        await db.rollback()
        raise
    except Exception as e:
        await db.rollback()
        logger.error(f"Capture payment error: {e}", exc_info=True)
        raise ServiceError(CAPTURE_FAILURE_MESSAGE)

    return success_response(data=serialize_order(order), message=CAPTURE_SUCCESS_MESSAGE)


@router.get("/list/{user_id}")
async def list_orders_by_user(
    user_id: str,
    db: AsyncSession = Depends(get_db),
):
    """All orders of a user, newest first. 404 when the user has none."""
    try:
        orders = await order_service.list_user_orders(db, user_id=user_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Get orders error: {e}", exc_info=True)
        raise ServiceError()

    return success_response(data=[serialize_order(o) for o in orders])


@router.get("/details/{order_id}")
async def get_order_details(
    order_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        order = await order_service.get_order(db, order_id=order_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Get order details error: {e}", exc_info=True)
        raise ServiceError()

    return success_response(data=serialize_order(order))
