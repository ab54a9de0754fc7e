"""Command-line interface for Deck Clock."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from deckclock.clock import RENDERERS, PillowSurface, create_renderer
from deckclock.clock.renderer import ClockRenderer
from deckclock.config import get_settings
from deckclock.logging import configure_logging

app = typer.Typer(
    name="deckclock",
    help="Deck Clock - seven-segment and analog clock faces for key-sized displays",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Deck Clock CLI."""
    settings = get_settings()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    """Parse HH:MM or HH:MM:SS into today's date at that time."""
    if value is None:
        return None
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return datetime.now().replace(
            hour=parsed.hour, minute=parsed.minute, second=parsed.second, microsecond=0
        )
    raise typer.BadParameter(f"Expected HH:MM or HH:MM:SS, got {value!r}")


def _check_variant(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in RENDERERS:
        raise typer.BadParameter(f"Choose one of: {', '.join(RENDERERS)}")
    return value


def _build_renderer(variant: Optional[str]) -> ClockRenderer:
    settings = get_settings()
    variant = variant or settings.variant
    renderer = create_renderer(variant, PillowSurface(settings.width, settings.height))
    renderer.set_colors(settings.colors_for(variant))
    return renderer


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()

    if json_output:
        config_dict = settings.model_dump(mode="json")
        typer.echo(json.dumps(config_dict, indent=2))
    else:
        table = Table(title="Deck Clock Configuration", show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        for field_name in type(settings).model_fields:
            table.add_row(field_name, str(getattr(settings, field_name)))

        console.print(table)


# Clock commands
clock_app = typer.Typer(help="Clock display")
app.add_typer(clock_app, name="clock")


@clock_app.command("run")
def clock_run(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="PNG file to keep updated"),
) -> None:
    """Run clock display service."""
    from deckclock.clock.service import ClockService

    settings = get_settings()
    settings.ensure_directories()
    service = ClockService(output_path=output)
    rprint(f"[green]Clock service writing to {service.output_path}[/green]")
    service.run_daemon()


@clock_app.command("render")
def clock_render(
    variant: Optional[str] = typer.Option(
        None, "--variant", "-v", help="digital or analog (defaults to settings)", callback=_check_variant
    ),
    at: Optional[str] = typer.Option(None, "--at", help="Render this time (HH:MM or HH:MM:SS)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="PNG output path"),
    data_url: bool = typer.Option(False, "--data-url", help="Print the data URL instead of writing a file"),
) -> None:
    """Render a single clock frame."""
    from deckclock.clock.surface import decode_data_url

    current_time = _parse_time(at)
    renderer = _build_renderer(variant)
    renderer.draw_clock(current_time)
    image_data = renderer.get_image_data()

    if data_url:
        typer.echo(image_data)
        return

    output_path = output or get_settings().clock_output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(decode_data_url(image_data))
    rprint(f"[green]Wrote {output_path}[/green]")


@clock_app.command("colors")
def clock_colors(
    variant: Optional[str] = typer.Option(
        None, "--variant", "-v", help="digital or analog (defaults to settings)", callback=_check_variant
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the effective color palette."""
    colors = _build_renderer(variant).get_colors()

    if json_output:
        typer.echo(json.dumps(colors, indent=2))
        return

    table = Table(title="Clock Palette", show_header=True)
    table.add_column("Role", style="cyan")
    table.add_column("Color", style="green")
    for role, color in colors.items():
        table.add_row(role, str(color))
    console.print(table)


if __name__ == "__main__":
    app()
