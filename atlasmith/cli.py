"""
Atlasmith CLI - Command-line interface for building texture atlases
"""

import logging
import sys

import click

from atlasmith import __version__
from atlasmith.builder import AtlasBuilder
from atlasmith.exceptions import (
    AtlasError,
    ConfigError,
    EncodeError,
    OversizeRecordError,
    SourceUnavailableError,
)


class _ClickHandler(logging.Handler):
    """Echo log records through click: debug and info to stdout, warnings and up to stderr."""

    def emit(self, record):
        try:
            click.echo(self.format(record), err=record.levelno >= logging.WARNING)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger('atlasmith')
    for handler in list(logger.handlers):
        if isinstance(handler, _ClickHandler):
            logger.removeHandler(handler)
    handler = _ClickHandler()
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('input_dir', required=False)
@click.argument('output_name', required=False)
@click.argument('dimensions', nargs=-1, type=int, metavar='[MAX_WIDTH MAX_HEIGHT [MIN_WIDTH MIN_HEIGHT]]')
@click.option('--verbose', '-v', is_flag=True, help='Show every canvas size attempted')
@click.version_option(version=__version__, prog_name='atlasmith')
@click.pass_context
def cli(ctx, input_dir, output_name, dimensions, verbose):
    """
    Atlasmith - Pack a directory of images into power-of-two texture atlases.

    Each page N is written as OUTPUT_NAME with N before the extension, plus a
    .txt manifest listing "<file>" x y for every image on the page.
    Canvas sizes default to 1024x1024 maximum and 256x256 minimum.

    Examples:
        atlasmith textures/ atlas.png
        atlasmith textures/ out/atlas.png 2048 2048 64 64
    """
    if output_name is None:
        click.echo(ctx.get_usage())
        ctx.exit(0)

    _configure_logging(verbose)

    overrides = {}
    if len(dimensions) >= 2:
        overrides['max_width'], overrides['max_height'] = dimensions[0], dimensions[1]
    if len(dimensions) >= 4:
        overrides['min_width'], overrides['min_height'] = dimensions[2], dimensions[3]
    unused = dimensions[min(4, len(dimensions) - len(dimensions) % 2):]
    if unused:
        click.echo(f"Ignoring unpaired dimension value(s): {' '.join(map(str, unused))}", err=True)

    try:
        builder = AtlasBuilder(**overrides)
        config = builder.config

        click.echo(f"Generating texture atlases from directory: {input_dir}")
        click.echo(f"Output filename: {output_name}")
        click.echo(f"Min dimensions: {config.min_width}, {config.min_height}")
        click.echo(f"Max dimensions: {config.max_width}, {config.max_height}\n")

        records, skipped = builder.scan(input_dir)
        click.echo(f"Generating atlases from {len(records)} textures")
        if skipped:
            click.echo(f"Skipped {len(skipped)} unreadable file(s)")

        count = 0
        for output in builder.write_pages(records, output_name):
            page = output.page
            count += 1
            click.echo(
                f"Atlas {page.number}: {page.width}x{page.height}, "
                f"{len(page.placements)} textures -> {output.image_path}"
            )

        click.secho(f"✓ Success! Wrote {count} atlas page(s)", fg='green')

    except ConfigError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except SourceUnavailableError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except OversizeRecordError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        click.echo("Generation cannot continue")
        sys.exit(1)
    except EncodeError as e:
        click.secho(f"Write Error: {e}", fg='red', err=True)
        sys.exit(1)
    except AtlasError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except Exception as e:
        click.secho(f"Unexpected error: {e}", fg='red', err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
