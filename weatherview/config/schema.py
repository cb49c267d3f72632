"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherview.models.weather import Location


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "Ludhiana, Punjab"
    latitude: float = Field(default=30.9009, ge=-90.0, le=90.0)
    longitude: float = Field(default=75.8573, ge=-180.0, le=180.0)

    def to_location(self) -> Location:
        return Location(name=self.name, latitude=self.latitude, longitude=self.longitude)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.open-meteo.com"
    timeout: float = Field(default=30.0, gt=0.0)
    user_agent: str = "weatherview/0.1.0"
    max_retries: int = Field(default=0, ge=0, le=5)
    retry_base_delay: float = Field(default=2.0, ge=0.0)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig = LocationConfig()
    provider: ProviderConfig = ProviderConfig()
    dashboard: DashboardConfig = DashboardConfig()
