"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from worldnews.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Settings come from the environment (see tests/conftest.py for the test
    defaults). Unmocking "persistence" needs a reachable PostgreSQL at
    DATABASE__URL with migrations applied.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container, usable directly or behind create_app()

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and API tests - in-memory everything
        container = build_test_container()

        # Integration tests - real database
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    known = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
