"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin: it reads the published secrets state and translates it to
masked HTTP responses.

Structure:
- routers/: System, health and demo endpoints

The presentation layer contains NO business logic.
"""
