"""Infrastructure Layer: Horizon, federation and stellar_sdk adapters plus logging.

Invariants:
    - Adapters implement the Protocols in core/boundary_protocols.py
    - Library errors (httpx, tomllib, stellar_sdk) never cross this layer;
      they are mapped to the boundary exception types
"""
