"""Request Body Reader: accepts JSON objects and HTML form submissions alike.

Invariants:
    - Always returns a dict (empty for an empty body)
    - Malformed JSON, or JSON that is not an object, raises TrackerValidationError
    - Form values are returned as strings; repeated keys keep the last value
"""

import json
import logging

from fastapi import Request

from app.core.errors import TrackerValidationError

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> dict:
    """FastAPI dependency: the request body as a flat dict."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Malformed JSON body on {request.url.path}: {e}")
        raise TrackerValidationError("Malformed JSON body", field="body")
    if not isinstance(payload, dict):
        raise TrackerValidationError("Request body must be an object", field="body")
    return payload
