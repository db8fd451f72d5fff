"""Core Layer: pure payment logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions are pure and deterministic; failures are raised as PaymentError
    - stellar_sdk is used only for key checksums, never for network access

Design Decisions:
    - Functional core separated from imperative shell: services/ awaits the
      collaborators declared in boundary_protocols.py
"""
