# ABOUTME: Pydantic BaseModels for OpenWeatherMap responses and the derived display data.
# ABOUTME: Wire models mirror the provider JSON; domain models are what the UI consumes.

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderCondition(BaseModel):
    """One entry of the provider's `weather` array."""

    main: str
    description: str = ""


class ProviderMain(BaseModel):
    """The provider's `main` measurements block."""

    temp: float
    humidity: float | None = None


class ProviderWind(BaseModel):
    speed: float = 0.0


class ProviderCurrent(BaseModel):
    """Current-weather payload from the `/weather` endpoint."""

    weather: list[ProviderCondition] = Field(min_length=1)
    main: ProviderMain
    name: str
    wind: ProviderWind = ProviderWind()


class ProviderForecastEntry(BaseModel):
    """One 3-hour entry of the `/forecast` endpoint's `list`."""

    dt_txt: str
    main: ProviderMain
    weather: list[ProviderCondition] = Field(min_length=1)

    @field_validator("dt_txt")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        """Reject timestamps that are not ISO date-times such as "2025-06-01 00:00:00"."""
        datetime.fromisoformat(value)
        return value


class ForecastSample(BaseModel):
    """A timestamped forecast observation, as received from the provider."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    temperature: float
    condition: str


class DaySummary(BaseModel):
    """Average temperature and representative condition for one calendar date."""

    model_config = ConfigDict(frozen=True)

    date: str
    temperature: float
    condition: str


class CurrentWeather(BaseModel):
    """Current conditions for a city, flattened from the provider payload."""

    model_config = ConfigDict(frozen=True)

    city: str
    condition: str
    description: str
    temperature: float
    humidity: float | None = None
    wind_speed: float = 0.0
