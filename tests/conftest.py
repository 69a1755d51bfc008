# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides Settings, provider payload builders, and WeatherDeps with a mock HTTP client.

from unittest.mock import AsyncMock

import httpx
import pytest

from src.deps import WeatherDeps
from src.settings import Settings


def _response(item) -> httpx.Response | Exception:
    """Wrap a (json, status) pair or a bare JSON body in an httpx.Response; pass exceptions through."""
    if isinstance(item, Exception):
        return item
    json_data, status_code = item if isinstance(item, tuple) else (item, 200)
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, api_key="test-key", base_url="https://owm.test/data/2.5")


@pytest.fixture
def mock_client():
    """Factory for a mock httpx.AsyncClient whose get() yields each item in turn.

    Items are JSON bodies, (body, status) tuples, or exceptions to raise.
    """

    def _make(*items) -> AsyncMock:
        mock = AsyncMock(spec=httpx.AsyncClient)
        mock.get.side_effect = [_response(item) for item in items]
        return mock

    return _make


@pytest.fixture
def make_deps(settings, mock_client):
    def _make(*items) -> WeatherDeps:
        return WeatherDeps(http_client=mock_client(*items), settings=settings)

    return _make


@pytest.fixture
def current_payload():
    def _make(name: str = "São Paulo", main: str = "Clear", temp: float = 24.6) -> dict:
        return {
            "cod": 200,
            "name": name,
            "weather": [{"id": 800, "main": main, "description": "céu limpo", "icon": "01d"}],
            "main": {"temp": temp, "feels_like": 24.0, "humidity": 61},
            "wind": {"speed": 3.1, "deg": 120},
        }

    return _make


@pytest.fixture
def forecast_payload():
    def _make(entries: list[tuple[str, float, str]]) -> dict:
        return {
            "cod": "200",
            "cnt": len(entries),
            "list": [
                {
                    "dt_txt": dt_txt,
                    "main": {"temp": temp, "humidity": 70},
                    "weather": [{"main": condition, "description": condition.lower()}],
                }
                for dt_txt, temp, condition in entries
            ],
        }

    return _make


@pytest.fixture
def not_found_payload() -> dict:
    return {"cod": "404", "message": "city not found"}
