from pydantic import BaseModel, ConfigDict, Field


class ForecastPeriod(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    temperature: int
    short_forecast: str = Field(alias="shortForecast")


class MetadataProperties(BaseModel):
    forecast: str = Field(min_length=1)


class MetadataResponse(BaseModel):
    properties: MetadataProperties


class ForecastProperties(BaseModel):
    periods: list[ForecastPeriod]


class ForecastResponse(BaseModel):
    properties: ForecastProperties


class ForecastSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    latitude: float
    longitude: float
    short_forecast: str = Field(alias="shortForecast")
    temperature: int
    temperature_description: str = Field(alias="temperatureDescription")
