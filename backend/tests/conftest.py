"""
Pytest fixtures for Diceware tests
"""

from pathlib import Path
from typing import AsyncGenerator, Callable, List

import pytest
from httpx import AsyncClient, ASGITransport

from diceware.config import Settings, get_settings
from diceware.main import create_app
from diceware.middleware.rate_limit import RateLimitConfig, RateLimiter
from diceware.services.generator import GeneratorPool, get_generator_pool
from diceware.services.telemetry import reset_counters


def make_words(count: int, template: str = "{}") -> List[str]:
    """Distinct alphabetic words: aaaa, aaab, ... formatted into template"""
    words = []
    for i in range(count):
        letters = ""
        n = i
        for _ in range(4):
            letters = chr(ord("a") + n % 26) + letters
            n //= 26
        words.append(template.format(letters))
    return words


class ScriptedRandom:
    """Random source returning scripted values and recording each bound"""

    def __init__(self, values=()):
        self.values = list(values)
        self.bounds = []

    def randbelow(self, bound: int) -> int:
        self.bounds.append(bound)
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < bound, f"scripted value {value} outside [0, {bound})"
        return value


@pytest.fixture
def wordlist_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a word list of `count` synthetic words"""
    def _write(count: int, template: str = "{}", name: str = "words.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(make_words(count, template)) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def service_settings(wordlist_file) -> Settings:
    return Settings(WORDLIST_PATH=str(wordlist_file(2048)))


@pytest.fixture
async def client(service_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client against an app using a synthetic word list."""
    reset_counters()
    app = create_app(limiter=RateLimiter(RateLimitConfig(requests_per_minute=6000, burst_size=1000)))
    pool = GeneratorPool()
    app.dependency_overrides[get_settings] = lambda: service_settings
    app.dependency_overrides[get_generator_pool] = lambda: pool

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
