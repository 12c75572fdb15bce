"""Pydantic Schemas: request/response contracts for the HTTP API.

Invariants:
    - Schemas validate at the system boundary; core/ never sees raw request bodies
    - Response ids serialize under the "_id" key
"""
