"""Services Layer: request-level operations between routes and the pure core.

Invariants:
    - Services take validated-or-raw payloads, return response schemas
    - All state access goes through the injected TrackerState
"""
