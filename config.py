import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api_base_url: str = "https://api.weather.gov"
    api_user_agent: str = "forecast-proxy (https://github.com/forecast-proxy)"
    api_timeout: float = Field(default=10.0, gt=0)
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        values: dict[str, object] = {}

        env_map = {
            "WEATHER_API_BASE_URL": "api_base_url",
            "WEATHER_API_USER_AGENT": "api_user_agent",
            "WEATHER_API_TIMEOUT": "api_timeout",
            "FORECAST_HOST": "host",
            "FORECAST_PORT": "port",
            "FORECAST_LOG_LEVEL": "log_level",
        }
        for env_name, field_name in env_map.items():
            raw = os.getenv(env_name)
            if raw:
                values[field_name] = raw.strip()

        origins = os.getenv("FORECAST_CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [origin.strip() for origin in origins.split(",") if origin.strip()]

        return cls(**values)
