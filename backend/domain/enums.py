"""
Domain enums for order and payment state.

Values match what the storefront sends, so they round-trip unchanged.
"""

from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROCESS = "inProcess"
    IN_SHIPPING = "inShipping"
    DELIVERED = "delivered"
    REJECTED = "rejected"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class PaymentMethod(str, Enum):
    RAZORPAY = "razorpay"
