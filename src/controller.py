# ABOUTME: Query controller: owns the typed city and an explicit Idle/Loading/Success/Failed state.
# ABOUTME: Runs the current-weather and forecast calls for one submit and applies the result atomically.

import logging
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, ConfigDict

from src.aggregator import aggregate_forecast
from src.deps import WeatherDeps
from src.errors import ValidationError, WeatherError
from src.models import CurrentWeather, DaySummary
from src.weather_service import get_current_weather, get_forecast_samples

logger = logging.getLogger(__name__)


class Idle(BaseModel):
    """No lookup has run yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A lookup for `city` is in flight."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"
    city: str


class Success(BaseModel):
    """Both provider calls succeeded; current weather and daily summaries are ready."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    city: str
    current: CurrentWeather
    forecast: list[DaySummary] = []


class Failed(BaseModel):
    """The lookup failed; nothing but the error is displayed."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["failed"] = "failed"
    city: str
    error: WeatherError


QueryState = Idle | Loading | Success | Failed


class Notice(BaseModel):
    """A user-facing toast message."""

    title: str
    description: str
    variant: str = "destructive"

    @classmethod
    def from_error(cls, error: WeatherError) -> "Notice":
        return cls(title=error.title, description=error.user_message)


class QueryController:
    """Drives one city lookup at a time against the weather provider.

    A submit made while another is still in flight does not cancel it; each submit
    takes a new generation number and only the latest generation may write state.
    """

    def __init__(self, deps: WeatherDeps, notify: Callable[[Notice], None] | None = None):
        self.deps = deps
        self.notify = notify
        self.city = ""
        self.state: QueryState = Idle()
        self._generation = 0

    @property
    def in_flight(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def current(self) -> CurrentWeather | None:
        return self.state.current if isinstance(self.state, Success) else None

    @property
    def forecast(self) -> list[DaySummary]:
        return self.state.forecast if isinstance(self.state, Success) else []

    @property
    def error(self) -> WeatherError | None:
        return self.state.error if isinstance(self.state, Failed) else None

    def set_city(self, text: str) -> None:
        self.city = text

    async def handle_key(self, key: str) -> QueryState:
        """Submit on Enter; any other key leaves the state alone."""
        if key == "Enter":
            return await self.submit()
        return self.state

    async def submit(self) -> QueryState:
        """Look up the typed city and return the resulting state.

        An empty city publishes a validation notice without touching the network or
        the current state. Either call failing replaces any displayed data with the
        error.
        """
        city = self.city.strip()
        if not city:
            self._publish(ValidationError("City is empty"))
            return self.state

        self._generation += 1
        generation = self._generation
        self.state = Loading(city=city)

        http_client, settings = self.deps.http_client, self.deps.settings
        try:
            current = await get_current_weather(http_client, settings, city)
            samples = await get_forecast_samples(http_client, settings, city)
        except WeatherError as e:
            if generation != self._generation:
                logger.debug("Discarding stale failure for %r", city)
                return self.state
            logger.warning("Weather lookup for %r failed: %s", city, e)
            self.state = Failed(city=city, error=e)
            self._publish(e)
            return self.state

        if generation != self._generation:
            logger.debug("Discarding stale result for %r", city)
            return self.state

        forecast = aggregate_forecast(samples, settings.forecast_days)
        self.state = Success(city=city, current=current, forecast=forecast)
        return self.state

    def _publish(self, error: WeatherError) -> None:
        if self.notify is not None:
            self.notify(Notice.from_error(error))
