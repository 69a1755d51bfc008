# ABOUTME: Service layer for OpenWeatherMap API calls and response parsing.
# ABOUTME: Maps provider failures onto NotFoundError/TransientError and validates at the boundary.

import logging

import httpx
import pydantic

from src.errors import NotFoundError, TransientError
from src.models import CurrentWeather, ForecastSample, ProviderCurrent, ProviderForecastEntry
from src.settings import Settings

logger = logging.getLogger(__name__)

NOT_FOUND_CODE = "404"


async def get_current_weather(client: httpx.AsyncClient, settings: Settings, city: str) -> CurrentWeather:
    """Fetch current conditions for a city from the `/weather` endpoint."""
    data = await _get_json(client, f"{settings.base_url}/weather", _query_params(settings, city), city)
    return parse_current_weather(data)


async def get_forecast_samples(client: httpx.AsyncClient, settings: Settings, city: str) -> list[ForecastSample]:
    """Fetch the 5-day/3-hour forecast for a city from the `/forecast` endpoint."""
    data = await _get_json(client, f"{settings.base_url}/forecast", _query_params(settings, city), city)
    return parse_forecast_samples(data)


def parse_current_weather(data: dict) -> CurrentWeather:
    """Flatten a `/weather` payload into CurrentWeather.

    Raises:
        TransientError: If the payload lacks a required field.
    """
    try:
        raw = ProviderCurrent.model_validate(data)
    except pydantic.ValidationError as e:
        raise TransientError(f"Malformed current weather response: {e.error_count()} errors") from e

    condition = raw.weather[0]
    return CurrentWeather(
        city=raw.name,
        condition=condition.main,
        description=condition.description,
        temperature=raw.main.temp,
        humidity=raw.main.humidity,
        wind_speed=raw.wind.speed,
    )


def parse_forecast_samples(data: dict) -> list[ForecastSample]:
    """Turn a `/forecast` payload's `list` into ForecastSamples, in provider order.

    Entries missing a timestamp, temperature or condition are dropped and logged, so
    the aggregator only ever sees complete samples.
    """
    entries = data.get("list")
    if not isinstance(entries, list):
        raise TransientError("Malformed forecast response: missing 'list'")

    samples = []
    for i, entry in enumerate(entries):
        try:
            raw = ProviderForecastEntry.model_validate(entry)
        except pydantic.ValidationError:
            logger.warning("Dropping malformed forecast entry at index %d", i)
            continue
        samples.append(
            ForecastSample(timestamp=raw.dt_txt, temperature=raw.main.temp, condition=raw.weather[0].main)
        )
    return samples


def is_not_found(status_code: int, data: dict) -> bool:
    """True when the provider says the location does not exist."""
    return status_code == 404 or str(data.get("cod")) == NOT_FOUND_CODE


def _query_params(settings: Settings, city: str) -> dict:
    return {"q": city, "appid": settings.api_key, "units": settings.units, "lang": settings.lang}


async def _get_json(client: httpx.AsyncClient, url: str, params: dict, city: str) -> dict:
    """GET a provider endpoint and return its JSON object body."""
    try:
        resp = await client.get(url, params=params)
    except httpx.HTTPError as e:
        raise TransientError(f"Request to {url} failed: {e}") from e

    try:
        data = resp.json()
    except ValueError as e:
        raise TransientError(f"Invalid JSON from {url} (status {resp.status_code})") from e
    if not isinstance(data, dict):
        raise TransientError(f"Unexpected response body from {url}")

    if is_not_found(resp.status_code, data):
        raise NotFoundError(city)
    if resp.is_error:
        raise TransientError(f"{url} returned {resp.status_code}: {data.get('message', '')}")
    return data
