from typing import Any

from pydantic import BaseModel

from utils.pagination import PageDTO


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def envelope(result: Any) -> dict:
    """
    Wrap a service result in the success envelope clients expect.

    Paginated results are split into top-level data/meta:
        {"success": true, "data": [...], "meta": {...}}
    anything else becomes {"success": true, "data": ...}.
    """
    if isinstance(result, PageDTO):
        return {"success": True, "data": _dump(result.data), "meta": _dump(result.meta)}
    return {"success": True, "data": _dump(result)}
