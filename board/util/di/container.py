"""Production container assembly and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with the PostgreSQL, Redis, RabbitMQ, disk and WebSocket
    implementations of every component. Settings come from the environment.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    # FastapiProvider exposes Request and WebSocket to REQUEST-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so DishkaRoute handlers resolve from it."""
    setup_dishka(container, app)
