"""Test container builder."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from devconnect.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container that swaps mockable components for test doubles.

    Args:
        unmock: Components that keep their production provider. Everything
            else mockable gets its mock (in-memory database, recording
            delivery channel).

    Returns:
        Configured test container

    Raises:
        ValueError: If ``unmock`` names a component with no provider

    Examples:
        # Unit tests: in-memory storage, recorded digests
        container = build_test_container()

        # Integration tests: Postgres, digests still recorded
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    known = {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__
    }
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=bool(base.__mock_component__)
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
