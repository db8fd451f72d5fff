"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every failure leaves as a {"code", "message"} JSON object

Design Decisions:
    - Thin routes delegate to services/payment_pipeline.py
"""
