"""Weather and photo domain models - pure data structures independent of any API."""
from dataclasses import dataclass
from typing import Optional

SUNNY = "sunny"
FOGGY = "foggy"
CLOUDY = "cloudy"
RAINY = "rainy"
WINDY = "windy"

CONDITIONS = (SUNNY, FOGGY, CLOUDY, RAINY, WINDY)


@dataclass(frozen=True)
class WeatherData:
    """Current conditions for the configured city, already classified."""
    condition: str  # one of CONDITIONS
    temperature: int  # °F
    description: str  # provider text, e.g. "Partly cloudy"
    humidity: int  # percent
    wind_speed: int  # mph
    feels_like: int  # °F
    uv_index: float
    visibility: int  # miles

    def __post_init__(self):
        if self.condition not in CONDITIONS:
            raise ValueError(f"Unknown condition label: {self.condition!r}")


@dataclass(frozen=True)
class PhotoResult:
    """A single stock photo plus the attribution the provider asks us to show."""
    url: str
    photographer: str
    photographer_url: str
    description: Optional[str] = None
