"""
Application FastAPI d'IPTVOrg.

Initialise l'application web avec le Container DI existant
et monte les routes de l'API.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..container import Container
from .routes.api import router as api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et le ferme à l'arrêt."""
    container = Container()
    container.database.init()
    app.state.container = container
    yield
    container.library_store().close()
    container.shutdown_resources()


app = FastAPI(title="IPTVOrg", version=__version__, lifespan=lifespan)

# Routes
app.include_router(api_router)
