"""HTTP adapter schemas."""

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Failure body shared by every endpoint."""

    error: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": "Mobil tidak ditemukan"},
        }
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    """
    Build a JSON error response.

    Args:
        status_code: HTTP status code
        message: User-facing message

    Returns:
        JSONResponse with body {"error": message}
    """
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())
