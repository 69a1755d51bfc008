# ABOUTME: ASGI web entry point for the weather lookup UI.
# ABOUTME: Starlette app that proxies OpenWeatherMap server-side and renders the page or JSON.

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles
from starlette.templating import Jinja2Templates

from src.controller import Failed, Idle, Notice, QueryController, Success
from src.deps import WeatherDeps, create_http_client
from src.errors import NotFoundError
from src.presentation import DEFAULT_ASSETS, AssetLookup, PageView, build_page_view
from src.settings import Settings, load_settings

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=Path(__file__).resolve().parent / "templates")

_ERROR_STATUS = {NotFoundError.kind: 404}


async def run_query(deps: WeatherDeps, city: str) -> tuple[QueryController, list[Notice]]:
    """Run one lookup through a fresh controller, collecting the notices it publishes."""
    notices: list[Notice] = []
    controller = QueryController(deps, notify=notices.append)
    controller.set_city(city)
    await controller.submit()
    return controller, notices


async def index(request: Request) -> Response:
    """Render the page; with a `city` query parameter, look it up first."""
    assets: AssetLookup = request.app.state.assets
    city = request.query_params.get("city")
    if city is None:
        return render_page(request, build_page_view(Idle()))

    controller, notices = await run_query(request.app.state.deps, city)
    view = build_page_view(controller.state, assets, city=city)
    if view.error_message is None and notices:
        view = view.model_copy(update={"error_title": notices[0].title, "error_message": notices[0].description})
    return render_page(request, view)


def render_page(request: Request, view: PageView) -> Response:
    """Render index.html with the view model; Jinja autoescaping covers user input."""
    return templates.TemplateResponse(request, "index.html", {"view": view})


async def api_weather(request: Request) -> JSONResponse:
    """JSON lookup: current conditions plus up to five daily summaries."""
    controller, notices = await run_query(request.app.state.deps, request.query_params.get("city", ""))
    state = controller.state

    if isinstance(state, Success):
        return JSONResponse(
            {
                "city": state.city,
                "current": state.current.model_dump(),
                "forecast": [day.model_dump() for day in state.forecast],
            }
        )
    if isinstance(state, Failed):
        status = _ERROR_STATUS.get(state.error.kind, 502)
        return JSONResponse({"error": state.error.kind, "message": state.error.user_message}, status_code=status)

    message = notices[0].description if notices else ""
    return JSONResponse({"error": "validation", "message": message}, status_code=400)


def create_app(
    settings: Settings | None = None,
    assets: AssetLookup = DEFAULT_ASSETS,
    http_client: httpx.AsyncClient | None = None,
) -> Starlette:
    """Build the Starlette app.

    The httpx client is opened in the lifespan and closed on shutdown unless the
    caller passed its own.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: Starlette):
        client = http_client or create_http_client(settings)
        app.state.deps = WeatherDeps(http_client=client, settings=settings)
        app.state.assets = assets
        logger.info("Weather UI ready (units=%s, lang=%s)", settings.units, settings.lang)
        try:
            yield
        finally:
            if http_client is None:
                await client.aclose()

    return Starlette(
        routes=[
            Route("/", index),
            Route("/api/weather", api_weather),
            Mount("/static", app=StaticFiles(directory=settings.static_dir), name="static"),
        ],
        lifespan=lifespan,
    )


def main() -> None:
    """Console entry point: configure logging and serve the app with uvicorn."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
