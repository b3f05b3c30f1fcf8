"""Logfire setup for the board.

Services log with ``logfire.info`` and wrap their work in
``logfire.span("<service>.<operation>", ...)``. This module only wires the
exporter and the framework integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import ObservabilitySettings, Settings

SERVICE_NAME = "comment-board"
SERVICE_VERSION = "0.1.0"

# Author emails end up as span attributes; keep them out of exported data.
SCRUB_PATTERNS = ["email", "captcha_answer"]


def _should_send(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins, otherwise a configured token turns export on
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire exporter and console output.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship traces to Logfire cloud, or
    force it either way with ``OBSERVABILITY__SEND_TO_LOGFIRE``.
    """
    send = _should_send(settings.observability)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token or None,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
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


def _request_attributes(request, attributes):
    # Hub connections arrive as WebSocket scopes without a method
    mapped = dict(attributes)
    mapped["transport"] = "http" if hasattr(request, "method") else "websocket"
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace comment, upload and CAPTCHA requests plus hub connections."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace comment store queries."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
