"""
Order service — Razorpay order initiation, payment capture, order history.

Capture flow:
    1. Build the Order row in memory from the checkout payload
    2. Decrement stock for every cart line (atomic UPDATE ... RETURNING)
    3. Delete the cart
    4. Insert the order

All four steps share the caller's session. Nothing is committed here; the
route commits after step 4 and rolls back on any error, so a missing product
or a failed insert leaves stock and cart untouched.
"""

import logging
import time
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from db_models import Cart, Order, Product
from domain.constants import MINOR_UNITS_PER_MAJOR, RECEIPT_PREFIX
from domain.errors import NotFoundError, PaymentVerificationError
from gateway_client import RazorpayClient
from models import CapturePaymentRequest
from services.currency import format_inr

logger = logging.getLogger(__name__)


# ════════════════════════════════════════════════════════════════════
# Gateway Order Initiation
# ════════════════════════════════════════════════════════════════════


def to_minor_units(amount: float) -> int:
    """Rupees → paise. Rounds half up so 99.995 becomes 10000, never a float."""
    minor = Decimal(str(amount)) * MINOR_UNITS_PER_MAJOR
    return int(minor.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def make_receipt() -> str:
    """Receipt token unique per millisecond."""
    return f"{RECEIPT_PREFIX}{int(time.time() * 1000)}"


async def create_gateway_order(
    gateway: RazorpayClient,
    *,
    total_amount: float,
    currency: str | None = None,
) -> dict:
    """
    Create a Razorpay order for the checkout total.

    Returns the gateway order verbatim. PaymentGatewayError propagates.
    """
    currency = currency or settings.default_currency
    amount = to_minor_units(total_amount)
    receipt = make_receipt()

    gateway_order = await gateway.create_order(amount=amount, currency=currency, receipt=receipt)

    logger.info(
        f"  💳 Razorpay order created: {gateway_order.get('id')} "
        f"({format_inr(total_amount)}, {amount} minor units {currency}, receipt {receipt})"
    )
    return gateway_order


# ════════════════════════════════════════════════════════════════════
# Capture
# ════════════════════════════════════════════════════════════════════


def _build_order(payload: CapturePaymentRequest) -> Order:
    return Order(
        user_id=payload.user_id,
        cart_id=payload.cart_id,
        cart_items=[item.model_dump(by_alias=True) for item in payload.cart_items],
        address_info=payload.address_info.model_dump(by_alias=True) if payload.address_info else None,
        total_amount=payload.total_amount,
        payment_id=payload.payment_id,
        payer_id=payload.payer_id,
        payment_status=payload.payment_status,
        order_status=payload.order_status,
        payment_method=payload.payment_method,
        order_date=payload.order_date,
        order_update_date=payload.order_update_date,
    )


def _check_total(payload: CapturePaymentRequest) -> None:
    """Log (do not reject) a total that disagrees with the line items."""
    lines = sum(Decimal(str(i.price)) * i.quantity for i in payload.cart_items)
    if lines != Decimal(str(payload.total_amount)):
        logger.warning(
            f"Capture total mismatch for user {payload.user_id}: "
            f"totalAmount={payload.total_amount} but items sum to {lines}"
        )


async def decrement_stock(db: AsyncSession, *, product_id: int, quantity: int) -> int | None:
    """
    Subtract quantity from a product's stock in one statement.

    Returns the new stock, or None if the product does not exist.
    There is no lower bound; stock may go negative.
    """
    res = await db.execute(
        update(Product)
        .where(Product.id == product_id)
        .values(total_stock=Product.total_stock - quantity)
        .returning(Product.total_stock)
    )
    return res.scalar_one_or_none()


async def capture_payment(
    db: AsyncSession,
    *,
    payload: CapturePaymentRequest,
    gateway: RazorpayClient | None = None,
) -> Order:
    """
    Record a paid checkout: adjust inventory, drop the cart, save the order.

    Raises:
        PaymentVerificationError: verification enabled and signature invalid
        NotFoundError: a cart line references a missing product
    """
    if settings.razorpay_verify_payments:
        if gateway is None or not gateway.verify_payment_signature(
            payload.razorpay_order_id, payload.payment_id, payload.razorpay_signature
        ):
            logger.warning(f"Rejected capture for user {payload.user_id}: bad payment signature")
            raise PaymentVerificationError()

    order = _build_order(payload)
    _check_total(payload)

    for item in payload.cart_items:
        remaining = await decrement_stock(db, product_id=item.product_id, quantity=item.quantity)
        if remaining is None:
            raise NotFoundError(f"Product not found: {item.title}")
        if remaining < 0:
            logger.warning(f"Product {item.product_id} oversold: stock now {remaining}")

    if payload.cart_id is not None:
        res = await db.execute(delete(Cart).where(Cart.id == payload.cart_id))
        if res.rowcount == 0:
            logger.info(f"Cart {payload.cart_id} already gone at capture time")

    db.add(order)
    await db.flush()

    logger.info(
        f"  ✅ Order {order.id} captured for user {payload.user_id}: "
        f"{format_inr(payload.total_amount)} ({len(payload.cart_items)} line(s), "
        f"payment {payload.payment_id})"
    )
    return order


# ════════════════════════════════════════════════════════════════════
# Queries
# ════════════════════════════════════════════════════════════════════


async def list_user_orders(db: AsyncSession, *, user_id: str) -> list[Order]:
    """All orders for a user, newest first. Raises NotFoundError when there are none."""
    res = await db.execute(
        select(Order)
        .where(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
    )
    orders = res.scalars().all()
    if not orders:
        raise NotFoundError("No orders found!")
    return orders


async def get_order(db: AsyncSession, *, order_id: int) -> Order:
    res = await db.execute(select(Order).where(Order.id == order_id))
    order = res.scalar_one_or_none()
    if not order:
        raise NotFoundError("Order not found!")
    return order
