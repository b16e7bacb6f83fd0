"""Unsplash random photo provider implementation."""
import logging
from typing import Optional

import requests

from weather_data import CLOUDY, FOGGY, RAINY, SUNNY, WINDY, PhotoResult
from weather_provider import PhotoProviderBase, PhotoServiceError

DEFAULT_CITY = "San Francisco"

# Search terms appended to the city name for each condition label.
PHOTO_SEARCH_TERMS = {
    SUNNY: "golden gate bridge sunny",
    FOGGY: "golden gate bridge fog",
    CLOUDY: "skyline cloudy",
    RAINY: "rain street",
    WINDY: "ocean beach waves",
}


class UnsplashPhotoProvider(PhotoProviderBase):
    """
    Photo provider using the Unsplash API: https://unsplash.com/documentation

    Uses GET /photos/random with a search query, so repeated calls for the
    same condition usually return different photos.
    """

    BASE_URL = "https://api.unsplash.com/photos/random"

    def __init__(
        self,
        access_key: Optional[str],
        city: str = DEFAULT_CITY,
        timeout: int = 10
    ):
        """
        Initialize Unsplash provider.

        Args:
            access_key: Unsplash access key; when missing every fetch fails
                with PhotoServiceError without touching the network
            city: City name prefixed to each search query
            timeout: HTTP request timeout in seconds
        """
        self.access_key = access_key
        self.city = city
        self.timeout = timeout

    def build_query(self, condition: str) -> str:
        """Search query for a condition label."""
        try:
            term = PHOTO_SEARCH_TERMS[condition]
        except KeyError:
            raise PhotoServiceError(f"No photo search term for condition {condition!r}")
        return f"{self.city} {term}"

    def get_photo(self, condition: str) -> PhotoResult:
        """
        Fetch one random photo for a condition label.

        Raises:
            PhotoServiceError: On missing key, network error, HTTP error,
                no results, or an unparseable response
        """
        if not self.access_key:
            raise PhotoServiceError("Unsplash access key not configured")

        params = {
            "query": self.build_query(condition),
            "orientation": "landscape",
            "content_filter": "high",
        }
        headers = {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
        }

        try:
            logging.info(f"Making Unsplash request: {self.BASE_URL}")
            logging.debug(f"Request parameters: {params}")
            response = requests.get(self.BASE_URL, params=params, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during photo request: {e}")
            raise PhotoServiceError(f"Network error: {e}")

        logging.info(f"Unsplash response status: {response.status_code}")

        if response.status_code == 404:
            raise PhotoServiceError(f"No photos found for {params['query']!r}", status=404)
        if not response.ok:
            logging.error(f"Unsplash request failed: HTTP {response.status_code}, body: {response.text[:200]}")
            raise PhotoServiceError(f"Photo API error: {response.status_code}", status=response.status_code)

        try:
            data = response.json()
            # /photos/random returns a list when a count is requested
            if isinstance(data, list):
                if not data:
                    raise PhotoServiceError(f"No photos found for {params['query']!r}", status=response.status_code)
                data = data[0]

            photo = PhotoResult(
                url=data["urls"]["regular"],
                photographer=data["user"]["name"],
                photographer_url=data["user"]["links"]["html"],
                description=data.get("description") or data.get("alt_description"),
            )
        except PhotoServiceError:
            raise
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse photo response: {e}")
            raise PhotoServiceError(f"Failed to parse response: {e}", status=response.status_code)

        logging.info(f"Photo selected: {photo.url} by {photo.photographer}")
        return photo
