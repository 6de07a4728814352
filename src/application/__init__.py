"""Application layer - Use cases and orchestration.

Structure:
- services/: Application services (secrets bootstrap gate)

The application layer orchestrates domain logic but contains no business rules.
"""
