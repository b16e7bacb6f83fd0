"""Provider abstractions - allows swapping the weather and photo APIs."""
from abc import ABC, abstractmethod
from typing import Optional

from weather_data import PhotoResult, WeatherData


class ConfigurationError(Exception):
    """Raised when a required credential or setting is missing."""
    pass


class RemoteServiceError(Exception):
    """Exception raised when a remote provider fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class PhotoServiceError(RemoteServiceError):
    """Photo lookup failed. Callers are expected to recover from this."""
    pass


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self) -> WeatherData:
        """
        Fetch and classify current weather.

        Returns:
            WeatherData: Current weather information

        Raises:
            RemoteServiceError: If the provider fails to fetch data
        """
        pass


class PhotoProviderBase(ABC):
    """Abstract base class for stock photo providers."""

    @abstractmethod
    def get_photo(self, condition: str) -> PhotoResult:
        """
        Fetch one photo matching a condition label.

        Raises:
            PhotoServiceError: If no photo could be fetched
        """
        pass
