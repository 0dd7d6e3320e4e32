import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from squad_feedback.api import embed
from squad_feedback.api.errors import register_exception_handlers
from squad_feedback.api.v1.router import api_v1_router
from squad_feedback.core.config import settings
from squad_feedback.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("%s starting (api prefix %s)", settings.PROJECT_NAME, settings.API_PREFIX)
    yield
    logger.info("%s shutting down", settings.PROJECT_NAME)


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_v1_router, prefix=settings.API_PREFIX)
app.include_router(embed.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
