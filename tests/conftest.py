"""
Root conftest.py for linguista-security tests.

Provides:
1. Marker registration and automatic `security` tagging
2. A fake clock for debounce tests
3. A recording range-API transport built on httpx.MockTransport
"""

from __future__ import annotations

import asyncio
from typing import Callable

import httpx
import pytest

from linguista_security.settings import get_security_settings

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Tag everything under tests/security/ so `-m security` selects it."""
    for item in items:
        norm = str(item.fspath).replace("\\", "/")
        if "/tests/security/" in norm:
            item.add_marker(pytest.mark.security)


def pytest_configure(config):
    config.addinivalue_line("markers", "security: Security and auth hardening tests")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_security_settings.cache_clear()
    yield
    get_security_settings.cache_clear()


# =============================================================================
# FAKE CLOCK
# =============================================================================


class FakeClock:
    """Drop-in for ``asyncio.sleep`` whose time only moves on :meth:`advance`."""

    def __init__(self):
        self.now = 0.0
        self._sleepers: list[tuple[float, asyncio.Future]] = []

    async def sleep(self, delay: float) -> None:
        fut = asyncio.get_running_loop().create_future()
        self._sleepers.append((self.now + delay, fut))
        await fut

    async def advance(self, seconds: float) -> None:
        await _drain()
        self.now += seconds
        due = [(t, f) for t, f in self._sleepers if t <= self.now]
        self._sleepers = [(t, f) for t, f in self._sleepers if t > self.now and not f.done()]
        for _, fut in due:
            if not fut.done():
                fut.set_result(None)
        await _drain()


async def _drain(rounds: int = 10) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# RANGE API TRANSPORT
# =============================================================================

class RangeApi:
    """Records every request and answers with a canned bucket."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.body = ""
        self.status = 200
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status, text=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def range_api() -> RangeApi:
    return RangeApi()


@pytest.fixture
def make_bucket() -> Callable[..., str]:
    def _make(*rows: tuple[str, int], sep: str = "\r\n") -> str:
        return sep.join(f"{suffix}:{count}" for suffix, count in rows)

    return _make
