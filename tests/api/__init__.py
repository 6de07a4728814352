"""API tests package.

Tests for the HTTP endpoints using TestClient. The application lifespan
runs against an in-memory secrets backend, covering:
- Response formatting
- Masking of secret values
- HTTP status codes
"""
