import logging

from identicon.config.constants import LOG_CONFIG, SERVICE_NAME
from identicon.utils.logger_setup import setup_logging

logger = setup_logging(LOG_CONFIG["main_logger_name"])

from fastapi import FastAPI

from identicon.api.health.health_router import health_router
from identicon.api.identicon.identicon_router import identicon_router
from identicon.middleware.logger_middleware import IdenticonRequestLoggingMiddleware
from identicon.utils.lifespan_utils import lifespan
from identicon.utils.session_context import SessionIdFilter

session_filter = SessionIdFilter()

for uvicorn_logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
    uvicorn_logger = logging.getLogger(uvicorn_logger_name)
    uvicorn_logger.filters.clear()
    for handler in uvicorn_logger.handlers:
        handler.setFormatter(logger.handlers[0].formatter)
        handler.addFilter(session_filter)

app = FastAPI(
    title=f"{SERVICE_NAME.capitalize()} API",
    description="Сервис генерации identicon (симметричных аватаров 5x5) по произвольной строке",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(IdenticonRequestLoggingMiddleware)

app.include_router(health_router)
app.include_router(identicon_router)
