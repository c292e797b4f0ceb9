"""
Pytest configuration and shared fixtures for the shop order tests.

Provides an in-memory SQLite session, an ASGI test client wired to it, a fake
Razorpay gateway, and seeded products/cart.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import hashlib
import hmac

import pytest
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from database import Base, get_db
from deps import get_gateway
from config import settings
from exceptions import PaymentGatewayError

TEST_KEY_SECRET = "test-razorpay-secret"


def sign_payment(gateway_order_id: str, payment_id: str, secret: str = TEST_KEY_SECRET) -> str:
    """Produce the checkout signature Razorpay would hand the browser."""
    return hmac.new(
        secret.encode("utf-8"),
        f"{gateway_order_id}|{payment_id}".encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


# ── Database Fixtures ────────────────────────────────────────────────


@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create an in-memory SQLite database session for each test.

    Uses StaticPool to allow in-memory SQLite with async SQLAlchemy.
    """
    import db_models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session

    await engine.dispose()


# ── Gateway Fixtures ─────────────────────────────────────────────────


class FakeGateway:
    """Stands in for RazorpayClient; records create_order calls."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[dict] = []

    async def create_order(self, amount: int, currency: str, receipt: str) -> dict:
        self.calls.append({"amount": amount, "currency": currency, "receipt": receipt})
        if self.fail:
            raise PaymentGatewayError("Razorpay returned 502", status_code=502)
        return {
            "id": "order_TEST123",
            "entity": "order",
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "status": "created",
        }

    def verify_payment_signature(self, gateway_order_id, payment_id, signature) -> bool:
        if not gateway_order_id or not payment_id or not signature:
            return False
        return hmac.compare_digest(sign_payment(gateway_order_id, payment_id), signature)


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
async def client(db_session: AsyncSession, fake_gateway: FakeGateway):
    """
    ASGI test client with the in-memory database and fake gateway.

    Overrides get_db and get_gateway; lifespan is not run.
    """
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_gateway] = lambda: fake_gateway

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def verify_payments():
    """Turn on payment signature verification for one test."""
    original = settings.razorpay_verify_payments
    settings.razorpay_verify_payments = True
    yield
    settings.razorpay_verify_payments = original


# ── Test Data Fixtures ────────────────────────────────────────────────


@pytest.fixture
def sample_user_id() -> str:
    return "user_64f1c2a9"


@pytest.fixture
async def sample_products(db_session: AsyncSession):
    """Two products: A (stock 10, ₹500) and B (stock 5, ₹250)."""
    from db_models import Product

    product_a = Product(title="Cotton Kurta", price=500.0, total_stock=10, category="men")
    product_b = Product(title="Silk Dupatta", price=250.0, total_stock=5, category="women")
    db_session.add_all([product_a, product_b])
    await db_session.commit()
    await db_session.refresh(product_a)
    await db_session.refresh(product_b)
    return product_a, product_b


@pytest.fixture
async def sample_cart(db_session: AsyncSession, sample_user_id: str, sample_products):
    """Cart holding 2 × A and 1 × B."""
    from db_models import Cart

    product_a, product_b = sample_products
    cart = Cart(
        user_id=sample_user_id,
        items=[
            {"productId": product_a.id, "quantity": 2},
            {"productId": product_b.id, "quantity": 1},
        ],
    )
    db_session.add(cart)
    await db_session.commit()
    await db_session.refresh(cart)
    return cart


@pytest.fixture
def capture_body(sample_user_id, sample_products, sample_cart) -> dict:
    """Checkout payload as the storefront sends it after a successful payment."""
    product_a, product_b = sample_products
    return {
        "userId": sample_user_id,
        "cartId": sample_cart.id,
        "cartItems": [
            {"productId": product_a.id, "title": product_a.title, "image": None,
             "price": 500.0, "quantity": 2},
            {"productId": product_b.id, "title": product_b.title, "image": None,
             "price": 250.0, "quantity": 1},
        ],
        "addressInfo": {
            "addressId": "addr_1",
            "address": "12 MG Road",
            "city": "Pune",
            "pincode": "411001",
            "phone": "9876543210",
            "notes": "Ring twice",
        },
        "totalAmount": 1250.0,
        "paymentId": "pay_TEST456",
        "payerId": sample_user_id,
        "paymentStatus": "paid",
        "orderStatus": "confirmed",
        "paymentMethod": "razorpay",
        "orderDate": "2026-10-01T10:00:00",
        "orderUpdateDate": "2026-10-01T10:00:00",
    }


@pytest.fixture
def payment_signer():
    """Callable (order_id, payment_id[, secret]) -> signature."""
    return sign_payment
