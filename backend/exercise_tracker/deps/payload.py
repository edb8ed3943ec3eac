# exercise_tracker/deps/payload.py
import json
from typing import Any

from fastapi import Request

from exercise_tracker.errors import ValidationError

async def read_payload(request: Request) -> dict[str, Any]:
    """
    Request body as a flat dict, whether it was sent as JSON or as a form.

    Anything that is not a JSON object yields an empty dict so the service
    reports the missing fields itself.
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise ValidationError("invalid JSON body") from None
        return data if isinstance(data, dict) else {}
    if "form" in content_type:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}
