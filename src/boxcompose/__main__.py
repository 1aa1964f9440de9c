"""CLI entry point for boxcompose."""

import logging
import sys

import click

from boxcompose.config import DrawConfig, parse_style, style_names
from boxcompose.errors import BoxDrawingError
from boxcompose.script import render_script


@click.command(context_settings={"help_option_names": ["--help"]})
@click.argument("script", required=False, type=click.Path(exists=True))
@click.option(
    "--style",
    "-s",
    "style_name",
    type=str,
    default="light",
    help=f"Drawing style ({', '.join(style_names())})",
)
@click.option("--width", "-w", "width", type=int, default=80, help="Canvas width in columns")
@click.option("--height", "-h", "height", type=int, default=24, help="Canvas height in rows")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log every drawing step to stderr")
def main(script: str | None, style_name: str, width: int, height: int, output: str | None, verbose: bool) -> None:
    """Box-drawing script to merged Unicode/ASCII line art."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        style = parse_style(style_name)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if width < 1 or height < 1:
        click.echo(f"error: canvas must be at least 1x1, got {width}x{height}", err=True)
        sys.exit(1)

    if script:
        try:
            with open(script, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{script}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    config = DrawConfig(style=style, width=width, height=height)
    try:
        rendered = render_script(text, config)
    except BoxDrawingError as e:
        click.echo(f"draw error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
