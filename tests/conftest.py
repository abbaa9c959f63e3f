"""Shared fixtures: a fake aiohttp session and a repository wired to it."""

import pytest
from navitia_fakes import BASE_URL, FakeSession

from idfm_transit.adapters.config import AppConfig
from idfm_transit.adapters.navitia_api import NavitiaTransitRepository


@pytest.fixture
def config() -> AppConfig:
    """Configuration pointing at the fake service root."""
    return AppConfig(navitia_base_url=BASE_URL, prim_api_key="test-key")


@pytest.fixture
def fake_session() -> FakeSession:
    """A fake session with no routes; tests add the ones they need."""
    return FakeSession()


@pytest.fixture
def repository(fake_session: FakeSession, config: AppConfig) -> NavitiaTransitRepository:
    """Navitia repository talking to the fake session."""
    return NavitiaTransitRepository(session=fake_session, config=config)  # type: ignore[arg-type]
