"""
Custom exception classes for payment gateway operations.
"""


class PaymentGatewayError(Exception):
    """Raised when the Razorpay API is unreachable or rejects a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
