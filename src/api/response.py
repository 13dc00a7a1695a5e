"""
Response envelope.

Every endpoint answers ``{"success": bool, "data"?, "message"?, "error"?}``.
"""

from typing import Any, Optional

from pydantic import BaseModel


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def success(data: Any = None, message: Optional[str] = None, **extra: Any) -> dict:
    body = {"success": True}
    if data is not None:
        body["data"] = _dump(data)
    if message is not None:
        body["message"] = message
    for key, value in extra.items():
        body[key] = _dump(value)
    return body


def failure(message: str, error: Optional[str] = None) -> dict:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body
