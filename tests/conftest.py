from unittest.mock import AsyncMock

import pytest


class MockComponent:
    """Async component double that returns `value` and records its calls."""

    def __init__(self, value, calls):
        self.value = value
        self.is_active = False
        self.dependencies = None
        self.start = AsyncMock(side_effect=self._start)
        self.stop = AsyncMock(side_effect=self._stop)
        self._calls = calls

    async def _start(self, dependencies):
        self._calls.append(f"{self.value}.start")
        self.is_active = True
        self.dependencies = dependencies
        return self.value

    async def _stop(self):
        self._calls.append(f"{self.value}.stop")
        self.is_active = False


@pytest.fixture
def calls():
    return []


@pytest.fixture
def mock_component(calls):
    def factory(value):
        return MockComponent(value, calls)

    return factory
