from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI

from artifactcards.api import cards_router, health_router
from artifactcards.config import settings
from artifactcards.services.card_set_api import CardSetApi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    with CardSetApi(settings) as card_set_api:
        app.state.card_set_api = card_set_api
        yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("artifactcards"),
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(health_router)
