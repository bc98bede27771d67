#!/usr/bin/env python3
"""
Site Config CLI

Validate a site configuration document before a build, or print it back in
normalised form. Exit codes: 0 ok, 1 schema violation, 2 malformed input.
"""
import sys
from pathlib import Path

import click

from siteconfig.core.config import settings
from siteconfig.core.exceptions import MalformedInput, SchemaViolation
from siteconfig.core.logger import setup_logging
from siteconfig.services.loader import FORMATS, dump_site_config, load_site_config

EXIT_SCHEMA_VIOLATION = 1
EXIT_MALFORMED_INPUT = 2

format_choice = click.Choice(FORMATS + ("yml",), case_sensitive=False)


def _load_or_exit(path: Path, fmt):
    try:
        return load_site_config(path, fmt)
    except SchemaViolation as e:
        click.echo(f"❌ Schema violation in {path}: {e}", err=True)
        for error in e.errors[1:]:
            click.echo(f"   {error['field']}: {error['message']}", err=True)
        sys.exit(EXIT_SCHEMA_VIOLATION)
    except MalformedInput as e:
        click.echo(f"❌ Malformed input: {e}", err=True)
        sys.exit(EXIT_MALFORMED_INPUT)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose):
    """Site configuration tools"""
    setup_logging(settings.model_copy(update={"LOG_LEVEL": "DEBUG" if verbose else "ERROR"}))


@cli.command()
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--format', '-f', 'fmt', type=format_choice, help='Input format (default: from file suffix)')
def validate(path, fmt):
    """Validate a site config document"""
    config = _load_or_exit(path, fmt)
    click.echo(f"✅ OK: {config.title} ({len(config.menu)} menu item(s), {config.postsPerPage} posts per page)")


@cli.command()
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--format', '-f', 'fmt', type=format_choice, help='Input format (default: from file suffix)')
@click.option('--output-format', '-o', 'output_format', type=format_choice, default='json', show_default=True,
              help='Output format')
def show(path, fmt, output_format):
    """Print a validated site config in normalised form"""
    config = _load_or_exit(path, fmt)
    click.echo(dump_site_config(config, output_format), nl=False)


def main():
    cli()


if __name__ == '__main__':
    main()
