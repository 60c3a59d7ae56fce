"""App factory for the whitelist API.

- Keeps the immutable settings and one shared Pterodactyl client on `app.state`
- Registers the whitelist router (POST/DELETE /whitelist)
- Closes the client's connection pool on shutdown

Run with `python -m whitelist_api`.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .core.config import Settings
from .pterodactyl.client import PterodactylClient
from .routers import whitelist


def create_app(settings: Settings, client: Optional[PterodactylClient] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.pterodactyl.close()

    app = FastAPI(
        title="Whitelist API",
        version=__version__,
        description="Add or remove players on a Pterodactyl game server whitelist",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.pterodactyl = client or PterodactylClient.from_settings(settings)

    app.include_router(whitelist.router)

    return app
