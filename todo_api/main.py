import logging

import uvicorn
from fastapi import FastAPI

from todo_api import config
from todo_api.error_handlers import register_error_handlers
from todo_api.logging_config import setup_logging
from todo_api.routers import todo_router

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    app = FastAPI(
        title="TODO API",
        description="API for managing TODOs",
        version="1.0.0",
        # Swagger UI at /api; redoc not served
        docs_url="/api",
        redoc_url=None,
    )
    register_error_handlers(app)
    app.include_router(todo_router.router, prefix="/api/todo", tags=["Todos"])
    return app

app = create_app()

def main() -> None:
    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)
    port = int(config.PORT)
    logger.info("Server is running on port %s", port)
    uvicorn.run(app, host=config.HOST, port=port, log_level=config.LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
