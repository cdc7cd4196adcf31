"""
API layer for the Account Service.

Exposes HTTP endpoints under /api/v1 (auth and profile).
"""
