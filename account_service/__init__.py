"""
Account Service root package.

This package contains the FastAPI app entry point (main.py), API routes,
the authentication and profile use cases, domain rules, and the MongoDB
user store.
"""
