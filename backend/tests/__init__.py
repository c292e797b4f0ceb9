"""
Pytest suite for the Shop Order Service backend.

Test categories:
- Unit tests: formatter, gateway client, settings, order service
- API tests: FastAPI app over ASGI with in-memory SQLite and a fake gateway
"""
