"""
SQLAlchemy ORM models for the Shop Order Service.

Tables:
    products  — catalogue entries with mutable stock
    carts     — per-user shopping carts (deleted once an order is captured)
    orders    — captured orders with cart item and address snapshots
"""
from datetime import datetime

from sqlalchemy import (
    Column, Integer, String, Float, DateTime, Text, JSON, Index,
)

from database import Base


class Product(Base):
    """Catalogue product. total_stock is decremented on each captured order line."""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    image = Column(Text, nullable=True)
    category = Column(String(100), nullable=True, index=True)
    brand = Column(String(100), nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    sale_price = Column(Float, nullable=True)
    total_stock = Column(Integer, nullable=False, default=0)  # not clamped at zero
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Cart(Base):
    """A user's cart. items is a JSON list of {productId, quantity}."""
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    items = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Order(Base):
    """
    Captured order.

    cart_items and address_info are snapshots taken at capture time, so later
    product or address edits never rewrite order history.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    cart_id = Column(Integer, nullable=True)
    cart_items = Column(JSON, nullable=False, default=list)  # [{productId, title, image, price, quantity}]
    address_info = Column(JSON, nullable=True)  # {addressId, address, city, pincode, phone, notes}
    order_status = Column(String(30), nullable=False, default="pending")
    payment_method = Column(String(30), nullable=False, default="razorpay")
    payment_status = Column(String(30), nullable=False, default="pending")
    total_amount = Column(Float, nullable=False, default=0.0)
    order_date = Column(DateTime, nullable=True)
    order_update_date = Column(DateTime, nullable=True)
    payment_id = Column(String(64), nullable=True, index=True)
    payer_id = Column(String(64), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        # Order history: filter by user_id, order by created_at DESC
        Index("ix_orders_user_created", "user_id", "created_at"),
    )
