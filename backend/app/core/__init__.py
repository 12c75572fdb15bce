"""Core Layer: pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Everything here is deterministic except TrackerState's clock default
"""
