import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
# parsed by main(); the Lambda handler never binds a port
PORT = os.getenv("PORT", "3000")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# "text" or "json"
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

SEED_TODOS = os.getenv("SEED_TODOS", "true").lower() in ("1", "true", "yes")
