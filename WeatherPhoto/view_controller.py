"""View controller - coordinates weather and photo fetches and owns the view state."""
import dataclasses
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from weather_data import PhotoResult, WeatherData
from weather_provider import (
    ConfigurationError,
    PhotoProviderBase,
    PhotoServiceError,
    RemoteServiceError,
    WeatherProviderBase,
)

DEFAULT_REFRESH_INTERVAL = 30 * 60  # seconds
GENERIC_WEATHER_ERROR = "Failed to load weather data"


@dataclass
class ViewState:
    """Everything the view needs to render. Process-local, never persisted."""
    weather: Optional[WeatherData] = None
    photo: Optional[PhotoResult] = None
    loading_weather: bool = False
    loading_photo: bool = False
    error: Optional[str] = None
    last_updated: Optional[datetime] = None


def user_message(err: Exception) -> str:
    """Short human-readable text for a weather failure."""
    if isinstance(err, ConfigurationError):
        return str(err)
    if isinstance(err, RemoteServiceError) and err.status is not None:
        return f"Weather API error: {err.status}"
    return "Unable to reach the weather service"


class ViewController:
    """
    Runs refresh cycles against a weather and a photo provider.

    A refresh cycle fetches weather first and only then a photo. Photo
    failures degrade to "no photo"; weather failures put the view into the
    error state. Overlapping cycles are not serialized: whichever response
    arrives last overwrites the state.
    """

    def __init__(
        self,
        weather_provider: WeatherProviderBase,
        photo_provider: PhotoProviderBase,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        on_change: Optional[Callable[[ViewState], None]] = None
    ):
        """
        Initialize the controller.

        Args:
            weather_provider: Provider for current conditions
            photo_provider: Provider for condition photos
            refresh_interval: Seconds between background refresh cycles
            on_change: Called with a state snapshot after each refresh or photo refresh
        """
        self.weather_provider = weather_provider
        self.photo_provider = photo_provider
        self.refresh_interval = refresh_interval
        self.on_change = on_change

        self._state = ViewState()
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # State transitions

    def _update(self, **changes) -> None:
        with self._lock:
            self._state = dataclasses.replace(self._state, **changes)

    def snapshot(self) -> ViewState:
        """Copy of the current view state."""
        with self._lock:
            return dataclasses.replace(self._state)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())

    # Actions

    def refresh(self) -> ViewState:
        """
        Run one full refresh cycle: weather, then photo.

        Fetch errors never propagate; they end up in the state. Loading flags
        are always cleared, even when on_change raises.

        Returns:
            ViewState: Snapshot after the cycle
        """
        logging.info("Refresh cycle started")
        self._update(loading_weather=True, loading_photo=True, error=None)
        try:
            self._run_cycle()
        finally:
            self._update(loading_weather=False, loading_photo=False)
        self._notify()
        return self.snapshot()

    def _run_cycle(self) -> None:
        try:
            weather = self.weather_provider.get_current()
        except (RemoteServiceError, ConfigurationError) as e:
            logging.error(f"Weather fetch failed: {e}")
            self._update(error=user_message(e))
            return
        except Exception as exc:
            logging.exception("Unexpected error during weather fetch: %s", exc)
            self._update(error=GENERIC_WEATHER_ERROR)
            return

        logging.info(f"Weather: {weather.temperature}°F {weather.condition} ({weather.description})")
        self._update(weather=weather)

        photo = self._fetch_photo(weather.condition)
        self._update(photo=photo, last_updated=datetime.now())

    def retry(self) -> ViewState:
        """Retry action offered by the error view."""
        return self.refresh()

    def refresh_photo(self) -> ViewState:
        """
        Fetch a new photo for the current condition.

        Does nothing until weather data is present. On failure the photo
        already on screen is kept.
        """
        weather = self.snapshot().weather
        if weather is None:
            logging.debug("Photo refresh ignored: no weather data yet")
            return self.snapshot()

        self._update(loading_photo=True)
        try:
            photo = self._fetch_photo(weather.condition)
            if photo is not None:
                self._update(photo=photo)
        finally:
            self._update(loading_photo=False)
        self._notify()
        return self.snapshot()

    def _fetch_photo(self, condition: str) -> Optional[PhotoResult]:
        try:
            return self.photo_provider.get_photo(condition)
        except PhotoServiceError as e:
            logging.warning(f"Photo fetch failed, showing placeholder: {e}")
        except Exception as exc:
            logging.exception("Unexpected error during photo fetch: %s", exc)
        return None

    # Background refresh

    def start(self) -> None:
        """Start the background timer. The first cycle runs immediately."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._timer_loop, name="refresh-timer", daemon=True)
        self._thread.start()
        logging.info(f"Refresh timer started (interval={self.refresh_interval}s)")

    def stop(self) -> None:
        """Cancel the background timer and wait for it to exit."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None
        logging.info("Refresh timer stopped")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _timer_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.refresh()
            except Exception as exc:
                logging.exception("Unexpected error during background refresh: %s", exc)
            if self._stop_event.wait(self.refresh_interval):
                break

    def __enter__(self) -> "ViewController":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
