"""FastAPI application.

Logfire must be configured before this module is imported: by
scripts/start_app.py in deployments and by tests/conftest.py in tests.
"""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agora.config import API_VERSION, Settings
from agora.interface.api.errors import register_exception_handlers
from agora.interface.api.routes import (
    auth,
    comments,
    follows,
    health,
    posts,
    users,
    votes,
)
from agora.util.di.container import create_container
from agora.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    auth.router,
    posts.router,
    votes.router,
    comments.router,
    users.router,
    follows.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Disposes APP-scoped resources such as the database engine
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Assemble the API.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    api = FastAPI(
        title="Agora API",
        description="Posts, comments, votes and follows",
        version=API_VERSION,
        lifespan=lifespan,
    )
    instrument_fastapi(api)

    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    setup_dishka(container or create_container(), api)
    register_exception_handlers(api)

    for router in ROUTERS:
        api.include_router(router)

    return api


# Entry point for uvicorn
app = create_app()
