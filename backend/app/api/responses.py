import json
from typing import Any

from fastapi.responses import JSONResponse

from app.models.schemas import ErrorResponse

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


class PrettyJSONResponse(JSONResponse):
    """JSON con indentación de 2 espacios, sin escapar caracteres no ASCII."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=CORS_HEADERS,
    )
