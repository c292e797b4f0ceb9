"""
Configuration management for the Shop Order Service.

Loads settings from .env via pydantic-settings.

Notes:
    - Razorpay credentials are required in production
    - RAZORPAY_VERIFY_PAYMENTS toggles signature checks on capture
"""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Razorpay ────────────────────────────────────────────────────
    razorpay_key_id: str = ""
    razorpay_secret: str = ""
    razorpay_api_base: str = "https://api.razorpay.com/v1"
    razorpay_timeout_seconds: float = 10.0
    # When True, capture requires a valid razorpay_signature for the payment.
    # Off by default: the storefront has always trusted client-supplied status.
    razorpay_verify_payments: bool = False

    # ── Currency ────────────────────────────────────────────────────
    default_currency: str = "INR"

    # ── Database ────────────────────────────────────────────────────
    database_url: str = "sqlite:///./data/shop.db"

    # ── Application ─────────────────────────────────────────────────
    environment: str = "development"

    # ── CORS ────────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # allow unknown .env keys without crashing
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    def validate_production_settings(self):
        """
        Validate settings for production safety.

        Called during app startup. Raises ValueError in production when
        gateway credentials are missing or CORS is left open; only warns
        everywhere else.
        """
        if self.environment == "production":
            if not self.razorpay_key_id or not self.razorpay_secret:
                raise ValueError(
                    "RAZORPAY_KEY_ID and RAZORPAY_SECRET must be set in production."
                )
            if "*" in self.cors_origins:
                raise ValueError(
                    "CORS_ORIGINS must not contain '*' in production. "
                    "Set explicit allowed origins."
                )
            if not self.razorpay_verify_payments:
                logger.warning(
                    "⚠️  RAZORPAY_VERIFY_PAYMENTS=false in production "
                    "(capture trusts client-supplied payment status)"
                )
            logger.info("✅ Production settings validated")
        else:
            warnings = []
            if not self.razorpay_key_id or not self.razorpay_secret:
                warnings.append("Razorpay credentials not set (order creation will fail)")
            if not self.razorpay_verify_payments:
                warnings.append("RAZORPAY_VERIFY_PAYMENTS=false (payment signatures not checked)")
            if "*" in self.cors_origins:
                warnings.append("CORS_ORIGINS contains '*' (open access)")
            for w in warnings:
                logger.warning(f"⚠️  {w}")


# Global settings instance
settings = Settings()
