import logging

from fastapi import FastAPI

from app.config import get_settings
from app.routes import health, rules

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Field Validation Rules",
    description="Named field-validation rules evaluated one field at a time",
    version="0.1.0",
)

# Register route modules.
# Each router handles a specific concern: health checks and rule evaluation.
app.include_router(health.router)
app.include_router(rules.router)
