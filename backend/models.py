"""
Pydantic models for request/response validation.

Field names are snake_case in Python and camelCase on the wire, matching the
storefront's payloads.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

from domain.enums import OrderStatus, PaymentMethod, PaymentStatus


class ShopBase(BaseModel):
    """Shared base — allows construction by Python name or alias, and from ORM rows."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


# ── Snapshots ───────────────────────────────────────────────────────

class CartItemSnapshot(ShopBase):
    """Cart line copied into the order at capture time."""
    product_id: int = Field(..., alias="productId")
    title: str = ""
    image: Optional[str] = None
    price: float = 0.0
    quantity: int = Field(..., description="Units purchased; subtracted from stock")


class AddressInfo(ShopBase):
    """Shipping address copied into the order at capture time."""
    address_id: Optional[str] = Field(None, alias="addressId")
    address: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


# ── Requests ────────────────────────────────────────────────────────

class CreateGatewayOrderRequest(ShopBase):
    """Request model for initiating a Razorpay order."""
    total_amount: float = Field(
        ...,
        alias="totalAmount",
        description="Order total in major currency units (rupees)",
    )
    currency: Optional[str] = Field(
        default=None,
        description="ISO currency code; defaults to DEFAULT_CURRENCY",
    )


class CapturePaymentRequest(ShopBase):
    """
    Request model for capturing a completed payment.

    Every field is supplied by the client. Only the Razorpay signature (when
    verification is enabled) is checked server-side.
    """
    user_id: str = Field(..., alias="userId")
    cart_id: Optional[int] = Field(None, alias="cartId")
    cart_items: List[CartItemSnapshot] = Field(default_factory=list, alias="cartItems")
    address_info: Optional[AddressInfo] = Field(None, alias="addressInfo")
    total_amount: float = Field(0.0, alias="totalAmount")
    payment_id: Optional[str] = Field(None, alias="paymentId")
    payer_id: Optional[str] = Field(None, alias="payerId")
    payment_status: str = Field(PaymentStatus.PENDING.value, alias="paymentStatus")
    order_status: str = Field(OrderStatus.PENDING.value, alias="orderStatus")
    payment_method: str = Field(PaymentMethod.RAZORPAY.value, alias="paymentMethod")
    order_date: Optional[datetime] = Field(None, alias="orderDate")
    order_update_date: Optional[datetime] = Field(None, alias="orderUpdateDate")
    razorpay_order_id: Optional[str] = Field(None, alias="razorpayOrderId")
    razorpay_signature: Optional[str] = Field(None, alias="razorpaySignature")


# ── Responses ───────────────────────────────────────────────────────

class OrderResponse(ShopBase):
    """Serialized order as returned by capture, list and details endpoints."""
    id: int
    user_id: str = Field(..., alias="userId")
    cart_id: Optional[int] = Field(None, alias="cartId")
    cart_items: list = Field(default_factory=list, alias="cartItems")
    address_info: Optional[dict] = Field(None, alias="addressInfo")
    order_status: str = Field(..., alias="orderStatus")
    payment_method: str = Field(..., alias="paymentMethod")
    payment_status: str = Field(..., alias="paymentStatus")
    total_amount: float = Field(..., alias="totalAmount")
    order_date: Optional[datetime] = Field(None, alias="orderDate")
    order_update_date: Optional[datetime] = Field(None, alias="orderUpdateDate")
    payment_id: Optional[str] = Field(None, alias="paymentId")
    payer_id: Optional[str] = Field(None, alias="payerId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


def serialize_order(order) -> dict:
    """Render an Order ORM row as a camelCase JSON-safe dict."""
    return OrderResponse.model_validate(order).model_dump(by_alias=True, mode="json")
