# ABOUTME: Runtime configuration read from the environment (and a local .env file).
# ABOUTME: Keeps the OpenWeatherMap credential server-side; it never reaches the page.

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseSettings):
    """Provider and server settings, one environment variable per field."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str = Field(alias="OPENWEATHER_API_KEY", min_length=1)
    base_url: str = Field(DEFAULT_BASE_URL, alias="OPENWEATHER_BASE_URL")
    units: str = Field("metric", alias="WEATHER_UNITS")
    lang: str = Field("pt_br", alias="WEATHER_LANG")
    timeout: float = Field(10.0, alias="WEATHER_TIMEOUT")
    forecast_days: int = Field(5, alias="WEATHER_FORECAST_DAYS")
    static_dir: Path = Field(STATIC_DIR, alias="WEATHER_STATIC_DIR")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(8000, alias="PORT")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def load_settings(env_file: str | None = ".env") -> Settings:
    """Build Settings from environment variables and `env_file`.

    Raises:
        RuntimeError: If OPENWEATHER_API_KEY is not set or a value does not parse.
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        missing = [str(err["loc"][0]) for err in e.errors()]
        raise RuntimeError(
            f"Invalid or missing environment variables: {', '.join(missing)}. "
            "Set them in your .env file or environment."
        ) from e
