"""Integration tests - can optionally hit the real APIs (disabled by default)."""
import os
import pytest
from unsplash_provider import UnsplashPhotoProvider
from view_controller import ViewController
from weatherapi_provider import WeatherApiProvider
from weather_data import CONDITIONS


@pytest.mark.skipif(
    not os.environ.get("WEATHER_API_KEY"),
    reason="WEATHER_API_KEY not set - skipping integration test"
)
def test_weatherapi_integration():
    """
    Integration test that hits the real WeatherAPI.com API.

    Set WEATHER_API_KEY environment variable to run this test.
    """
    provider = WeatherApiProvider(api_key=os.environ["WEATHER_API_KEY"])

    weather = provider.get_current()

    assert weather.condition in CONDITIONS
    assert weather.description


@pytest.mark.skipif(
    not (os.environ.get("WEATHER_API_KEY") and os.environ.get("UNSPLASH_ACCESS_KEY")),
    reason="WEATHER_API_KEY/UNSPLASH_ACCESS_KEY not set - skipping integration test"
)
def test_refresh_cycle_integration():
    """Full refresh cycle against both real APIs."""
    controller = ViewController(
        WeatherApiProvider(api_key=os.environ["WEATHER_API_KEY"]),
        UnsplashPhotoProvider(access_key=os.environ["UNSPLASH_ACCESS_KEY"]),
    )

    state = controller.refresh()

    assert state.error is None
    assert state.weather is not None
    # photo may legitimately be missing (rate limit, no results)
    if state.photo is not None:
        assert state.photo.url.startswith("https://")
