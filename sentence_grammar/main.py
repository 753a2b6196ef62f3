import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from sentence_grammar.api.v1.api import api_router
from sentence_grammar.config import settings
from sentence_grammar.logging_config import configure_logging

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
    logger.info('Application startup complete.')
    yield
    logger.info('Application shutdown complete.')


app = FastAPI(title=settings.app_title, lifespan=lifespan)

Instrumentator().instrument(app).expose(app)

app.include_router(api_router, prefix=settings.api_prefix)


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('sentence_grammar.main:app', reload=settings.debug)
