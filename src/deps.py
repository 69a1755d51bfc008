# ABOUTME: Dependency container for the query controller using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and the Settings the weather service calls with.

import httpx
from pydantic import BaseModel, ConfigDict

from src.settings import Settings


class WeatherDeps(BaseModel):
    """Dependencies injected into the query controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared httpx client for provider calls.

    No retrying transport: a failed call is reported to the user as-is.
    """
    return httpx.AsyncClient(timeout=settings.timeout)
