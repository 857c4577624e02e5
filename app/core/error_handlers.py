from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import GENERIC_FAILURE_MESSAGE, JourneyError
from app.core.logger import logger


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"message": ...}``."""

    @app.exception_handler(JourneyError)
    async def journey_error_handler(request: Request, exc: JourneyError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": build_validation_message(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_FAILURE_MESSAGE},
        )


def build_validation_message(errors) -> str:
    # a body that is not JSON at all is reported apart from schema violations
    for error in errors:
        if error.get("type") == "json_invalid":
            return f"invalid json: {error.get('msg')}"

    details = "; ".join(f"{_field_name(error)}: {error.get('msg')}" for error in errors)
    return f"invalid input: {details}"


def _field_name(error) -> str:
    parts = [str(loc) for loc in error.get("loc", ()) if loc != "body"]
    return ".".join(parts) or "body"
