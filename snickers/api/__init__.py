"""API Layer — FastAPI routes, request decoding and error formatting.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON with charset UTF-8

Design Decisions:
    - Thin routes delegate to services (decode → validate → store → respond)
"""
