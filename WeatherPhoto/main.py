"""Terminal weather view with a matching stock photo."""
import argparse
import logging
import os
import signal
import sys
from typing import Callable, List, Optional, Tuple

from dotenv import load_dotenv

from layout import ERROR_VIEW, render_config_error, render_view, select_view
from unsplash_provider import UnsplashPhotoProvider
from view_controller import DEFAULT_REFRESH_INTERVAL, ViewController, ViewState
from weather_provider import ConfigurationError
from weatherapi_provider import DEFAULT_LOCATION, WeatherApiProvider

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_LOG_FILE = os.path.join(BASE_DIR, "weather-photo.log")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Live weather with a matching photo")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE)
    parser.add_argument("--interval", type=float, default=DEFAULT_REFRESH_INTERVAL,
                        help="Seconds between background refreshes")
    parser.add_argument("--timeout", type=int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--once", action="store_true", help="Run one refresh cycle, print it and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: str, verbose: bool) -> None:
    # stdout carries the view, so log lines go to stderr and the log file
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file)
        ]
    )


def load_config() -> Tuple[str, Optional[str], str]:
    """
    Read credentials and location from .env / the environment.

    Returns:
        (weather_api_key, unsplash_access_key, location)

    Raises:
        ConfigurationError: If WEATHER_API_KEY is missing
    """
    load_dotenv()
    api_key = (os.getenv("WEATHER_API_KEY") or "").strip()
    unsplash_key = (os.getenv("UNSPLASH_ACCESS_KEY") or "").strip() or None
    location = os.getenv("WEATHER_LOCATION", DEFAULT_LOCATION)

    if not api_key:
        raise ConfigurationError("Weather API key not found")
    if unsplash_key is None:
        logging.warning("UNSPLASH_ACCESS_KEY not set, photos will be unavailable")

    logging.info("Configuration loaded: location=%s photos=%s", location, unsplash_key is not None)
    return api_key, unsplash_key, location


def city_name(location: str) -> str:
    """City part of a location query ("San Francisco,CA" -> "San Francisco")."""
    return location.split(",")[0].strip() or location


def build_controller(
    api_key: str,
    unsplash_key: Optional[str],
    location: str,
    args: argparse.Namespace,
    on_change: Optional[Callable[[ViewState], None]] = None
) -> ViewController:
    weather_provider = WeatherApiProvider(api_key=api_key, location=location, timeout=args.timeout)
    photo_provider = UnsplashPhotoProvider(
        access_key=unsplash_key,
        city=city_name(location),
        timeout=args.timeout,
    )
    controller = ViewController(
        weather_provider=weather_provider,
        photo_provider=photo_provider,
        refresh_interval=args.interval,
        on_change=on_change,
    )
    logging.info("View controller ready (refresh interval=%ss)", args.interval)
    return controller


def print_lines(lines: List[str], out=None) -> None:
    out = out or sys.stdout
    out.write("\n".join(lines) + "\n")
    out.flush()


def command_loop(controller: ViewController, input_fn: Callable[[str], str] = input) -> None:
    """Read single-letter commands until quit or end of input."""
    while True:
        try:
            command = input_fn("> ").strip().lower()
        except EOFError:
            return

        try:
            if command in ("", "r"):
                controller.refresh()
            elif command == "p":
                controller.refresh_photo()
            elif command == "q":
                return
            else:
                logging.debug("Unknown command: %r", command)
        except Exception as exc:
            logging.exception("Unexpected error handling command %r: %s", command, exc)


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        api_key, unsplash_key, location = load_config()
    except ConfigurationError as err:
        logging.error("Configuration error: %s", err)
        print_lines(render_config_error(str(err)))
        return 2

    def show(state: ViewState) -> None:
        print_lines(render_view(state, location))

    if args.once:
        controller = build_controller(api_key, unsplash_key, location, args)
        state = controller.refresh()
        show(state)
        return 1 if select_view(state) == ERROR_VIEW else 0

    controller = build_controller(api_key, unsplash_key, location, args, on_change=show)
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    print_lines([f"Loading live {location} weather..."])
    try:
        with controller:
            command_loop(controller)
    except KeyboardInterrupt:
        logging.info("Stopping")
    return 0


if __name__ == "__main__":
    sys.exit(main())
