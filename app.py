import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from config import Settings
from domains.forecast.controller import router as forecast_router
from domains.forecast.repository import ForecastRepository
from domains.system.controller import router as system_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="Forecast Proxy")
    app.state.settings = settings
    app.state.forecast_repository = ForecastRepository(
        settings.api_base_url,
        user_agent=settings.api_user_agent,
        timeout=settings.api_timeout,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(forecast_router)
    return app


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(message)s")
    logging.getLogger(__name__).info("Server is running on port %s...", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
