"""
Domain constants used across services/routers.
"""

# Razorpay amounts are integers in the currency's minor unit (paise for INR)
MINOR_UNITS_PER_MAJOR = 100

# Receipt prefix for gateway orders; suffixed with epoch milliseconds
RECEIPT_PREFIX = "order_rcptid_"

CAPTURE_SUCCESS_MESSAGE = "Order confirmed and saved."

# Generic failure messages, one per order operation
CREATE_ORDER_FAILURE_MESSAGE = "Failed to create Razorpay order"
CAPTURE_FAILURE_MESSAGE = "Error capturing payment and saving order."
GENERIC_FAILURE_MESSAGE = "Some error occurred!"
