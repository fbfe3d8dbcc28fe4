import asyncio

import click

from weatherdash.config import DashboardConfig, DashboardEnv, load_config
from weatherdash.dashboard import WeatherDashboard
from weatherdash.events import DashboardEvent
from weatherdash.exceptions import ConfigError
from weatherdash.location import IpGeolocationProvider, LocationResolver
from weatherdash.render import render
from weatherdash.shared.logging_mixin import configure_logging
from weatherdash.state import DashboardView
from weatherdash.weather import Coordinates, OpenMeteoClient


def _load_dashboard_config(config_path: str | None) -> DashboardConfig:
    path = config_path or DashboardEnv().weatherdash_config
    if not path:
        return DashboardConfig()
    try:
        return load_config(path)
    except (FileNotFoundError, ConfigError) as e:
        raise click.ClickException(str(e)) from e


def _build_location_resolver(config: DashboardConfig) -> LocationResolver:
    provider = None
    if config.location.use_device_location:
        provider = IpGeolocationProvider(config.location)
    return LocationResolver(provider, config.location)


async def _start(
    dashboard: WeatherDashboard,
    city: str | None,
    coordinates: Coordinates | None,
) -> None:
    if city:
        await dashboard.submit_city(city)
    elif coordinates is not None:
        await dashboard.load_coordinates(coordinates)
    else:
        await dashboard.mount()


def _prompt_loop(runner: asyncio.Runner, dashboard: WeatherDashboard) -> None:
    """Read submissions on the main thread so Ctrl-C aborts the prompt"""
    while True:
        try:
            city = click.prompt("Enter city name", default="", show_default=False)
        except click.Abort:
            click.echo()
            return
        runner.run(dashboard.submit_city(city))


def _run(
    config: DashboardConfig,
    city: str | None,
    coordinates: Coordinates | None,
    once: bool,
) -> None:
    with asyncio.Runner() as runner:
        client = OpenMeteoClient(config.api)
        try:
            dashboard = WeatherDashboard(client, _build_location_resolver(config))

            def show(view: DashboardView) -> None:
                if not once:
                    click.clear()
                click.echo(render(view, config.display.forecast_days))

            if once:
                runner.run(_start(dashboard, city, coordinates))
                show(dashboard.view)
                return

            dashboard.event_bus.subscribe(DashboardEvent.STATE_CHANGED, show)
            runner.run(_start(dashboard, city, coordinates))
            _prompt_loop(runner, dashboard)
        finally:
            runner.run(client.close())


@click.command()
@click.option("--city", "-c", help="Look up a city instead of using geolocation")
@click.option("--lat", type=click.FloatRange(-90.0, 90.0), help="Latitude")
@click.option("--lon", type=click.FloatRange(-180.0, 180.0), help="Longitude")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="YAML configuration file",
)
@click.option("--log-level", help="Log level, e.g. INFO or DEBUG")
@click.option("--once", is_flag=True, help="Render once and exit")
def main(city, lat, lon, config_path, log_level, once):
    """Current weather and a short forecast in your terminal"""
    if (lat is None) != (lon is None):
        raise click.UsageError("--lat and --lon must be given together")
    if city and lat is not None:
        raise click.UsageError("--city cannot be combined with --lat/--lon")

    configure_logging(log_level or DashboardEnv().weatherdash_log_level)

    config = _load_dashboard_config(config_path)
    coordinates = None
    if lat is not None:
        coordinates = Coordinates(latitude=lat, longitude=lon)

    try:
        _run(config, city, coordinates, once)
    except KeyboardInterrupt:
        click.echo()


if __name__ == "__main__":
    main()
