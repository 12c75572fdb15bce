"""Infrastructure Layer: process-level concerns around the pure core.

Invariants:
    - Logging setup, state ownership and body decoding live here, not in routes
"""
