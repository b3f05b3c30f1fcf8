"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from board.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables, so unmocked components
    talk to whatever the environment points at.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are named

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Real hub broadcasting, everything else in memory
        container = build_test_container(unmock={"realtime"})

        # Integration tests - real PostgreSQL and Redis
        container = build_test_container(unmock={"persistence", "cache"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        if component_name is None:
            provider_class = get_provider(base, use_mock=False)
        else:
            provider_class = get_provider(base, use_mock=component_name not in unmock)
        provider_instances.append(provider_class())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares."""
    all_components = {
        p.__mock_component__ for p in PROVIDERS if p.__mock_component__ is not None
    }
    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
