"""Pytest configuration and fixtures for business group resolver tests."""

import json
from typing import Any, Callable

import httpx
import pytest

from business_groups.core.config import APIConfig
from business_groups.core.models import BusinessGroup

GROUPS_PATH = "/resources/groups"


class FakeDirectory:
    """In-memory snapshot source that counts fetches."""

    def __init__(self, groups: list[BusinessGroup]):
        self.groups = list(groups)
        self.fetch_count = 0

    def fetch(self) -> list[BusinessGroup]:
        self.fetch_count += 1
        return list(self.groups)


def _group(short_id: str, label: str) -> BusinessGroup:
    return BusinessGroup(id=f"{GROUPS_PATH}/{short_id}", label=label)


@pytest.fixture(autouse=True)
def clean_admiral_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's Admiral settings out of tests."""
    for var in ("ADMIRAL_URL", "ADMIRAL_TIMEOUT", "ADMIRAL_CONFIG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_groups() -> list[BusinessGroup]:
    """A small directory with one shared label and shared ID prefixes."""
    return [
        _group("dev-7a1b", "Development"),
        _group("dev-7a2c", "QA"),
        _group("ops-91ff", "Operations"),
        _group("fin-0001", "Shared"),
        _group("hr-0002", "Shared"),
    ]


@pytest.fixture
def make_group() -> Callable[[str, str], BusinessGroup]:
    """Build a group under /resources/groups from a short ID and label."""
    return _group


@pytest.fixture
def make_directory() -> Callable[..., FakeDirectory]:
    """Build a FakeDirectory from (full_id, label) pairs."""

    def factory(*groups: tuple[str, str]) -> FakeDirectory:
        return FakeDirectory([BusinessGroup(id=i, label=label) for i, label in groups])

    return factory


@pytest.fixture
def fake_directory(sample_groups: list[BusinessGroup]) -> FakeDirectory:
    return FakeDirectory(sample_groups)


@pytest.fixture
def api_config() -> APIConfig:
    return APIConfig(url="http://admiral.test:8282/", timeout=5.0)


@pytest.fixture
def groups_payload() -> list[dict[str, Any]]:
    """Raw JSON body as the groups endpoint returns it."""
    return [
        {"id": f"{GROUPS_PATH}/dev-7a1b", "label": "Development", "tenant": "t1"},
        {"id": f"{GROUPS_PATH}/ops-91ff", "label": "Operations"},
    ]


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport answering every request with ``body``.

    Requests seen are appended to ``transport.requests``.
    """

    def factory(body: Any = None, status_code: int = 200, raw: str | None = None):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            content = raw if raw is not None else json.dumps(body)
            return httpx.Response(
                status_code,
                content=content.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return factory
