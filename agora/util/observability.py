"""Logfire setup and instrumentation.

Application code calls Logfire directly::

    import logfire

    logfire.info("Vote applied", post_id=post_id, outcome="removed")

    with logfire.span("vote_service.apply_vote", post_id=post_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import API_VERSION, Settings


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send iff a token is set."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start, before the app is imported."""
    send = should_send_to_logfire(settings)

    logfire.configure(
        service_name="agora-api",
        service_version=API_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Route and client only; headers carry bearer tokens
    extra = {"method": request.method, "path": request.url.path}
    if request.client:
        extra["client_host"] = request.client.host
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
