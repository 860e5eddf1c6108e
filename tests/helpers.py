import asyncio
from typing import List

import httpx


class FakeNavigator:
    def __init__(self):
        self.urls: List[str] = []

    async def navigate(self, url: str) -> None:
        self.urls.append(url)


class RecordingSleep:
    """Records requested delays in seconds without waiting for them."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


class GatedSleep:
    """Blocks every sleeper until ``release()`` is called."""

    def __init__(self):
        self.calls: List[float] = []
        self._gate = asyncio.Event()

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await self._gate.wait()

    def release(self) -> None:
        self._gate.set()


class StubEndpoint:
    """httpx MockTransport handler serving a fixed body."""

    def __init__(self, body: str = "http://example.com/article/42", status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)


async def settle(rounds: int = 5) -> None:
    """Let scheduled task steps and done-callbacks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)
