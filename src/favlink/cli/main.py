"""Main CLI entry point."""
import asyncio
import logging
import sys
from pathlib import Path

import click

from favlink.config import load_config
from favlink.core.models import StyleContext


@click.group()
@click.version_option(package_name="favlink")
def cli():
    """Favlink CLI.

    Run 'favlink link URL' to print a single favicon link.
    Run 'favlink render FILE' to render a content file as a page.
    Run 'favlink run' to serve a content directory.
    """
    pass


@cli.command()
@click.argument("url")
@click.option("--text", default="", help="Link text (defaults to the domain)")
@click.option("--size", default="", help="Icon size in px (omit to scale with the text)")
def link(url, text, size):
    """Print the markup for one favicon link."""
    from favlink.runtime.plugin import Favlink

    result = Favlink.render({"url": url, "text": text, "size": size})
    if not result.markup:
        click.echo(f"Error: '{url}' has no host to take a favicon from", err=True)
        sys.exit(1)
    click.echo(result.markup)


@cli.command()
@click.option("--editor", is_flag=True, help="Scope rules to the block editor canvas")
def css(editor):
    """Print the favicon link stylesheet."""
    from favlink.runtime.plugin import Favlink

    click.echo(Favlink.styles(StyleContext.EDITOR if editor else StyleContext.FRONTEND))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--editor", is_flag=True, help="Render as the block editor canvas")
def render(file, editor):
    """Render a content file to a full HTML page."""
    from favlink.runtime.page import ContentPage

    page = ContentPage(file.read_text(encoding="utf-8"), editor=editor, title=file.stem)
    click.echo(asyncio.run(page.render()))


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--content-dir", default=None, help="Directory of content pages")
@click.option("--config", "config_path", default=None, help="Path to favlink.config.py")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["critical", "error", "warning", "info", "debug"]),
    help="Log level",
)
@click.option("--debug", is_flag=True, default=None, help="Starlette debug mode")
def run(host, port, content_dir, config_path, log_level, debug):
    """Serve content pages using Uvicorn."""
    import uvicorn

    from favlink.runtime.app import FavlinkApp

    config = load_config(config_path)
    options = {
        "host": "127.0.0.1",
        "port": 8000,
        "content_dir": None,
        "log_level": "info",
        "debug": False,
    }
    options.update(config)
    cli_values = {
        "host": host,
        "port": port,
        "content_dir": content_dir,
        "log_level": log_level,
        "debug": debug,
    }
    options.update({key: value for key, value in cli_values.items() if value is not None})

    logging.basicConfig(level=options["log_level"].upper())
    app = FavlinkApp(content_dir=options["content_dir"], debug=bool(options["debug"]))

    click.echo(f"🚀 Serving {app.content_dir} on http://{options['host']}:{options['port']}")
    uvicorn.run(app, host=options["host"], port=int(options["port"]), log_level=options["log_level"])


if __name__ == "__main__":
    cli()
