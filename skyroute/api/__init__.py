"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured responses (JSON, or plain text for help)

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
