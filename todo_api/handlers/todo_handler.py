from mangum import Mangum
from todo_api import config
from todo_api.logging_config import setup_logging
from todo_api.main import app

setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)

# AWS Lambda entry point: API Gateway events routed into the FastAPI app
handler = Mangum(app, lifespan="off")
