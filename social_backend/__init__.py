"""
Social Posts Backend: root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (accounts, tokens, ownership, posts) and infrastructure
(MongoDB, render service, mail relay).
"""
