"""Services Layer: request orchestration around the pure core.

Invariants:
    - All awaiting of collaborators happens here
    - Collaborator exceptions are translated to PaymentError at the call site
"""
