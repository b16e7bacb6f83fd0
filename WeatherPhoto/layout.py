"""Layout logic for the weather view - pure functions for testability."""
from typing import List, Optional

from view_controller import ViewState
from weather_data import PhotoResult, WeatherData

LOADING_VIEW = "loading"
ERROR_VIEW = "error"
WEATHER_VIEW = "weather"

PHOTO_PLACEHOLDER = "No photo available"
RETRY_HINT = "Press [r] to try again."
COMMAND_HINT = "[r] refresh  [p] new photo  [q] quit"


def condition_title(condition: str) -> str:
    """Display name for a condition label ("foggy" -> "Foggy")."""
    return condition[:1].upper() + condition[1:]


def select_view(state: ViewState) -> str:
    """
    Decide which view to show for a state.

    The first load shows the loading view. Any error, or a state with no
    weather, shows the error view. Everything else shows the weather view.
    """
    if state.error is None and state.weather is None and state.loading_weather:
        return LOADING_VIEW
    if state.error is not None or state.weather is None:
        return ERROR_VIEW
    return WEATHER_VIEW


def format_weather_lines(weather: WeatherData, location: str) -> List[str]:
    headline = f"{location} - {condition_title(weather.condition)} {weather.temperature}°F"
    details = (
        f"Feels like {weather.feels_like}°F  Humidity {weather.humidity}%  "
        f"Wind {weather.wind_speed} mph  Visibility {weather.visibility} mi  UV {weather.uv_index:g}"
    )
    return [headline, weather.description, details]


def format_photo_lines(photo: Optional[PhotoResult], loading: bool = False) -> List[str]:
    """
    Lines for the photo panel.

    Args:
        photo: Current photo, or None
        loading: Whether a photo request is in flight

    Returns:
        Photo URL plus credit, a loading notice, or the placeholder
    """
    if photo is None:
        return ["Loading photo..."] if loading else [PHOTO_PLACEHOLDER]

    lines = [f"Photo: {photo.url}"]
    if photo.description:
        lines.append(f"  {photo.description}")
    lines.append(f"  Photo by {photo.photographer} ({photo.photographer_url})")
    return lines


def render_view(state: ViewState, location: str) -> List[str]:
    """
    Render a state as text lines.

    The error view only carries the message and the retry hint; weather and
    photo data are never shown alongside an error.
    """
    view = select_view(state)

    if view == LOADING_VIEW:
        return [f"Loading live {location} weather..."]

    if view == ERROR_VIEW:
        return [state.error or "Failed to load weather", RETRY_HINT]

    lines = format_weather_lines(state.weather, location)
    lines.append("")
    lines.extend(format_photo_lines(state.photo, state.loading_photo))
    lines.append("")
    if state.loading_weather:
        lines.append("Updating...")
    elif state.last_updated is not None:
        lines.append(f"Last updated: {state.last_updated.strftime('%H:%M:%S')}")
    lines.append(COMMAND_HINT)
    return lines


def render_config_error(message: str) -> List[str]:
    """Dedicated screen for a missing credential."""
    return [
        "Configuration error",
        message,
        "Set WEATHER_API_KEY in the environment or a .env file and restart.",
    ]
