"""CLI entry point for translating text with DeepL."""

import logging
from typing import Optional

import click
import requests

from . import __version__
from .config import DEFAULT_API_URL, DEFAULT_FALLBACK_LOCALE, DeeplConfig
from .errors import MalformedResponseError
from .translation import DeeplClient


@click.group()
@click.version_option(version=__version__)
def cli():
    """DeepL machine translation for translatable models."""
    pass


@cli.command()
@click.argument('text')
@click.option('--target', '-t', required=True, help='Target language code')
@click.option('--source', '-s', default=None, help='Source language code (defaults to the fallback locale)')
@click.option('--api-url', envvar='DEEPL_API_URL', default=DEFAULT_API_URL, help='DeepL translation endpoint')
@click.option('--api-token', envvar='DEEPL_API_TOKEN', default='', help='DeepL authentication key')
@click.option('--fallback-locale', default=DEFAULT_FALLBACK_LOCALE, help='Source language used when --source is not given')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def translate(
    text: str,
    target: str,
    source: Optional[str],
    api_url: str,
    api_token: str,
    fallback_locale: str,
    verbose: bool
):
    """Translate TEXT to the target language."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = DeeplConfig(
        api_url=api_url,
        api_token=api_token,
        fallback_locale=fallback_locale
    )
    client = DeeplClient(config)

    try:
        translation = client.translate(text, target, source)
    except (requests.RequestException, MalformedResponseError) as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(1)

    click.echo(translation)


if __name__ == '__main__':
    cli()
