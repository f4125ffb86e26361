"""
CLI for Flickr photo embeds.

Commands:
- render: Render one tag body as HTML
- expand: Expand every <flickr> tag in a file
- info: Show configuration and cache status
- clear-cache: Delete file cache records
- serve: Start the MCP server
"""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import settings
from .logging import setup_logging

app = typer.Typer(
    name="flickr-embed",
    help="Render <flickr> photo embeds as HTML",
)
console = Console()


def _host(direction: str):
    from .host import HostContext

    return HostContext(
        direction=direction,
        link_rel=settings.link_rel,
        link_target=settings.link_target,
    )


def _check_direction(direction: str) -> str:
    if direction not in ("ltr", "rtl"):
        raise typer.BadParameter("direction must be 'ltr' or 'rtl'")
    return direction


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Flickr Embed - render Flickr photos as wiki-style image links."""
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, json_output=settings.log_json, log_file=settings.log_file)
    logger.debug("CLI initialized with log level: {}", log_level)


@app.command()
def render(
    options: str = typer.Argument(..., help="Tag body, e.g. '123|thumb|left|Caption'"),
    direction: str = typer.Option(
        settings.content_direction,
        "--direction",
        "-d",
        help="Writing direction (ltr or rtl)",
        callback=_check_direction,
    ),
):
    """Render a single tag body and print the HTML."""
    from .embed import create_pipeline

    if not settings.flickr_api_key:
        logger.warning("FLICKR_API_KEY not set - rendering will fail")

    pipeline = create_pipeline(settings)
    typer.echo(pipeline.render(options, _host(direction)))


@app.command()
def expand(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to expand"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the result here instead of stdout"
    ),
    direction: str = typer.Option(
        settings.content_direction,
        "--direction",
        "-d",
        help="Writing direction (ltr or rtl)",
        callback=_check_direction,
    ),
):
    """Expand every <flickr> tag in a file."""
    from .embed import create_pipeline
    from .host import TagRegistry

    logger.info("Expanding tags in {}", source)
    registry = TagRegistry()
    create_pipeline(settings).register(registry)

    result = registry.expand(source.read_text(encoding="utf-8"), _host(direction))

    if output:
        output.write_text(result, encoding="utf-8")
        console.print(f"[green]Wrote {output}[/]")
    else:
        typer.echo(result)


@app.command()
def info():
    """Show configuration and cache status."""
    logger.debug("Displaying configuration and status")
    console.print("[bold blue]Flickr Embed Configuration[/]")

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Flickr API Key", "***" if settings.flickr_api_key else "[red]NOT SET[/]")
    table.add_row("Flickr API Secret", "***" if settings.flickr_api_secret else "not set")
    table.add_row("Flickr API URL", settings.flickr_api_url)
    table.add_row("Default Type", settings.default_type)
    table.add_row("Default Location", settings.default_location or "(writing direction)")
    table.add_row("Default Size", settings.default_size)
    table.add_row("Cache Backend", settings.cache_backend)
    table.add_row("Cache TTL", f"{settings.cache_ttl}s")
    table.add_row("Content Direction", settings.content_direction)

    console.print(table)

    if settings.cache_backend == "file":
        console.print("\n[bold]File Cache Status[/]")
        try:
            from .cache import FileCache

            cache = FileCache(cache_dir=settings.cache_dir)
            console.print(f"Directory: {cache.cache_dir}")
            console.print(f"Records: {cache.count()}")
        except OSError as e:
            logger.error("Error accessing file cache: {}", e)
            console.print(f"[red]Error accessing file cache: {e}[/]")


@app.command()
def clear_cache():
    """Delete all records from the file cache."""
    if settings.cache_backend != "file":
        console.print(f"[yellow]Nothing to clear for cache backend '{settings.cache_backend}'[/]")
        return

    from .cache import FileCache

    removed = FileCache(cache_dir=settings.cache_dir).clear()
    console.print(f"[green]Removed {removed} cache records[/]")


@app.command()
def serve(
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
):
    """Start the MCP server with Streamable HTTP transport."""
    from .server import mcp

    logger.info("Starting MCP server on {}:{}", host, port)
    console.print("[bold blue]Starting Flickr Embed MCP Server[/]")
    console.print(f"MCP endpoint: http://{host}:{port}/mcp")

    if not settings.flickr_api_key:
        logger.warning("FLICKR_API_KEY not set - tools will return errors")
        console.print("[red]Warning: FLICKR_API_KEY not set. Tools will return errors.[/]")

    mcp.run(transport="http", host=host, port=port, path="/mcp")


if __name__ == "__main__":
    app()
