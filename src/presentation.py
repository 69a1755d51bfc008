# ABOUTME: View models for the weather page and the condition -> icon/animation/sound lookup.
# ABOUTME: The lookup is passed in by the caller; DEFAULT_ASSETS is a read-only fallback table.

import math
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel

from src.controller import Failed, Loading, QueryState, Success
from src.models import CurrentWeather, DaySummary

FALLBACK_CONDITION = "Default"
KMH_PER_MS = 3.6


class ConditionAssets(BaseModel):
    """Icon, animation and ambient sound rendered for one condition label."""

    icon: str
    color: str
    animation: str
    sound: str | None = None


AssetLookup = Mapping[str, ConditionAssets]

DEFAULT_ASSETS: AssetLookup = MappingProxyType(
    {
        "Clear": ConditionAssets(
            icon="sun", color="#facc15", animation="/static/animations/clear.json", sound="/static/sounds/breeze.wav"
        ),
        "Clouds": ConditionAssets(
            icon="cloud", color="#9ca3af", animation="/static/animations/clouds.json", sound="/static/sounds/wind.wav"
        ),
        "Rain": ConditionAssets(
            icon="cloud-rain", color="#3b82f6", animation="/static/animations/rain.json", sound="/static/sounds/rain.wav"
        ),
        "Drizzle": ConditionAssets(
            icon="cloud-drizzle",
            color="#60a5fa",
            animation="/static/animations/rain.json",
            sound="/static/sounds/rain.wav",
        ),
        "Thunderstorm": ConditionAssets(
            icon="cloud-lightning",
            color="#6366f1",
            animation="/static/animations/thunderstorm.json",
            sound="/static/sounds/thunder.wav",
        ),
        "Snow": ConditionAssets(
            icon="snowflake", color="#93c5fd", animation="/static/animations/snow.json", sound="/static/sounds/snow.wav"
        ),
        FALLBACK_CONDITION: ConditionAssets(
            icon="cloud-sun", color="#d1d5db", animation="/static/animations/default.json"
        ),
    }
)


def resolve_assets(lookup: AssetLookup, condition: str) -> ConditionAssets:
    """Assets for a condition, falling back to the lookup's "Default" entry."""
    assets = lookup.get(condition)
    if assets is None:
        assets = lookup[FALLBACK_CONDITION]
    return assets


def round_half_up(value: float) -> int:
    """Round .5 away from the floor, like the browser's Math.round."""
    return math.floor(value + 0.5)


class CurrentWeatherView(BaseModel):
    city: str
    description: str
    temperature: int
    humidity: int | None
    wind_kmh: int
    assets: ConditionAssets


class ForecastDayView(BaseModel):
    date: str
    label: str
    temperature: int
    condition: str
    assets: ConditionAssets


class PageView(BaseModel):
    """Everything the page template needs for one render."""

    city: str = ""
    loading: bool = False
    button_label: str = "Buscar"
    error_title: str | None = None
    error_message: str | None = None
    current: CurrentWeatherView | None = None
    forecast: list[ForecastDayView] = []


def current_view(current: CurrentWeather, lookup: AssetLookup) -> CurrentWeatherView:
    return CurrentWeatherView(
        city=current.city,
        description=" ".join(word[:1].upper() + word[1:] for word in current.description.split(" ")),
        temperature=round_half_up(current.temperature),
        humidity=None if current.humidity is None else round_half_up(current.humidity),
        wind_kmh=round_half_up(current.wind_speed * KMH_PER_MS),
        assets=resolve_assets(lookup, current.condition),
    )


def forecast_view(day: DaySummary, lookup: AssetLookup) -> ForecastDayView:
    _, month, dom = day.date.split("-")
    return ForecastDayView(
        date=day.date,
        label=f"{dom}/{month}",
        temperature=round_half_up(day.temperature),
        condition=day.condition,
        assets=resolve_assets(lookup, day.condition),
    )


def build_page_view(state: QueryState, lookup: AssetLookup = DEFAULT_ASSETS, city: str = "") -> PageView:
    """Translate a controller state into the page's view model."""
    if isinstance(state, Loading):
        return PageView(city=state.city, loading=True, button_label="Buscando...")
    if isinstance(state, Failed):
        return PageView(city=state.city, error_title=state.error.title, error_message=state.error.user_message)
    if isinstance(state, Success):
        return PageView(
            city=state.city,
            current=current_view(state.current, lookup),
            forecast=[forecast_view(day, lookup) for day in state.forecast],
        )
    return PageView(city=city)
