import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_api.errors import TodoApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Every error body is {"message": ...}."""

    @app.exception_handler(TodoApiError)
    async def todo_api_error_handler(request: Request, exc: TodoApiError):
        logger.info(
            "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message,
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid request body",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
