"""Payment Gateway Package: HTTP front end for building and submitting Stellar payments.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
