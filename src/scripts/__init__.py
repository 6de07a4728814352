"""Operator scripts for seeding local secrets backends.

Usage:
    python -m src.scripts.setup_vault
    python -m src.scripts.setup_localstack
"""
