"""WeatherAPI.com current conditions provider implementation."""
import logging
import math

import requests

from conditions import classify_condition
from weather_data import WeatherData
from weather_provider import ConfigurationError, RemoteServiceError, WeatherProviderBase

DEFAULT_LOCATION = "San Francisco,CA"


def round_half_up(value: float) -> int:
    """Round to the nearest int with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


class WeatherApiProvider(WeatherProviderBase):
    """
    Weather provider using the WeatherAPI.com "current" endpoint.

    Docs: https://www.weatherapi.com/docs/ (current.json). Imperial fields
    (temp_f, wind_mph, vis_miles) are read directly, no unit conversion.
    """

    BASE_URL = "https://api.weatherapi.com/v1/current.json"

    def __init__(
        self,
        api_key: str,
        location: str = DEFAULT_LOCATION,
        timeout: int = 10
    ):
        """
        Initialize WeatherAPI provider.

        Args:
            api_key: WeatherAPI.com API key
            location: Location query (city name, "lat,lon", zip, ...)
            timeout: HTTP request timeout in seconds

        Raises:
            ConfigurationError: If api_key is empty
        """
        if not api_key:
            raise ConfigurationError("Weather API key not found")
        self.api_key = api_key
        self.location = location
        self.timeout = timeout

    def get_current(self) -> WeatherData:
        """
        Fetch current weather and classify it.

        Returns:
            WeatherData: Current weather information

        Raises:
            RemoteServiceError: If the request fails or the payload is malformed
        """
        params = {
            "key": self.api_key,
            "q": self.location,
            "aqi": "yes",
        }

        try:
            logging.info(f"Making WeatherAPI request: {self.BASE_URL}")
            logging.debug(f"Request parameters: q={self.location}, timeout={self.timeout}")

            response = requests.get(self.BASE_URL, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during weather request: {e}")
            raise RemoteServiceError(f"Network error: {e}")

        logging.info(f"Weather API response status: {response.status_code}")

        if not response.ok:
            logging.error(f"Weather API request failed with status {response.status_code}")
            self._handle_error_response(response)

        try:
            data = response.json()
            logging.debug(f"Weather API response (truncated): {str(data)[:500]}...")

            current = data.get("current")
            if not current:
                raise RemoteServiceError("Response missing 'current' block", status=response.status_code)

            description = current["condition"]["text"]
            wind_mph = float(current["wind_mph"])
            condition = classify_condition(description, wind_mph)
            logging.debug(f"Classified '{description}' (wind {wind_mph} mph) as {condition}")

            weather_data = WeatherData(
                condition=condition,
                temperature=round_half_up(float(current["temp_f"])),
                description=description,
                humidity=int(current["humidity"]),
                wind_speed=round_half_up(wind_mph),
                feels_like=round_half_up(float(current["feelslike_f"])),
                uv_index=float(current["uv"]),
                visibility=round_half_up(float(current["vis_miles"])),
            )
        except RemoteServiceError:
            logging.error("Weather API response missing 'current' block")
            raise
        except (KeyError, ValueError, TypeError, AttributeError, OverflowError) as e:
            logging.error(f"Failed to parse weather response: {e}", exc_info=True)
            raise RemoteServiceError(f"Failed to parse response: {e}", status=response.status_code)

        logging.info(f"Successfully parsed weather data: {weather_data.temperature}°F, {weather_data.condition}")
        return weather_data

    def _handle_error_response(self, response: requests.Response) -> None:
        """Parse and raise error from a WeatherAPI error response."""
        try:
            error_data = response.json()
            error = error_data.get("error", {}) if isinstance(error_data, dict) else {}
            message = error.get("message", "Unknown error")
            logging.error(f"WeatherAPI error response: {error_data}")
            error_msg = f"Weather API error: {response.status_code} ({message})"
        except ValueError:
            # Not JSON, use HTTP status
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")
            error_msg = f"Weather API error: {response.status_code}"

        raise RemoteServiceError(error_msg, status=response.status_code)
