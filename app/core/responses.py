from typing import Any


def success_response(data: Any, cached: bool = False) -> dict:
    if cached:
        return {**data, "cached": True}
    return data


def error_response(message: str, status: int = 400) -> tuple[dict, int]:
    return {"error": message}, status
