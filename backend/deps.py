"""
Shared FastAPI dependencies.

Routers import the DB session and the payment gateway from here so tests can
override both in one place.
"""

from __future__ import annotations

from fastapi import Request

from database import get_db  # noqa: F401  (re-exported for routers)
from domain.errors import ServiceError
from gateway_client import RazorpayClient


def get_gateway(request: Request) -> RazorpayClient:
    """
    Return the Razorpay client built during app startup.

    The client lives on app.state for the process lifetime; see main.lifespan.
    """
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise ServiceError("Payment gateway not configured")
    return gateway
