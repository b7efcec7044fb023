"""Command-line interface for the weather proxy."""

import argparse
import asyncio
import json
import logging
import sys

from weather_proxy.config import Settings, get_settings
from weather_proxy.providers.base import quiet_http_client_logging


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    quiet_http_client_logging()


def serve(settings: Settings, host: str | None, port: int | None) -> int:
    """Run the API under uvicorn."""
    import uvicorn

    from weather_proxy.api import create_app

    uvicorn.run(
        create_app(),
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )
    return 0


async def fetch_current(settings: Settings, location: str | None, aqi: bool | None) -> int:
    """Fetch current conditions once and print them as JSON."""
    from weather_proxy.api.dependencies import build_weather_provider
    from weather_proxy.models.weather import UpstreamQuery, WeatherFailure

    query = UpstreamQuery.from_settings(settings)
    if location:
        query = query.model_copy(update={"location": location})
    if aqi is not None:
        query = query.model_copy(update={"aqi": aqi})

    async with build_weather_provider(settings) as provider:
        result = await provider.get_current(query)

    print(json.dumps(result.to_content(), indent=2))
    return 1 if isinstance(result, WeatherFailure) else 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Weather Proxy - Serve weatherapi.com data without exposing the API key"
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (default: HOST setting)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: PORT setting)")

    # Current command
    current_parser = subparsers.add_parser(
        "current", help="Fetch current conditions once and print JSON"
    )
    current_parser.add_argument(
        "--location",
        help="Location query (default: WEATHER_LOCATION setting)",
    )
    current_parser.add_argument(
        "--aqi",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include air-quality data",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(settings)

    if args.command == "serve":
        return serve(settings, args.host, args.port)

    return asyncio.run(fetch_current(settings, args.location, args.aqi))


if __name__ == "__main__":
    sys.exit(main())
