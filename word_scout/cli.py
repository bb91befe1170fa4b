#!/usr/bin/env python3
"""
Command-line entry point of WordScout.

Commands:
  search    Search for a word breadth-first from a seed URL
  config    Show the effective configuration

Common options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Logging format string

search options:
  --max-pages INT     Page-visit budget (overrides max_pages from the config)
  --json PATH         Save a JSON report of the search
  --trace             Print every visited page

Example:
  word-scout search https://example.com gamma --max-pages 20 --trace
"""
import sys
import asyncio
from pathlib import Path

import click

from word_scout import __version__
from word_scout.config import load_config
from word_scout.crawler.crawler import InvalidInput
from word_scout.engine import start_search
from word_scout.logger import DEFAULT_FORMAT, init_logging
from word_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='WordScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """WordScout command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('search', context_settings=CONTEXT_SETTINGS)
@click.argument('seed_url')
@click.argument('word')
@click.option(
    '--max-pages', '-n', 'max_pages',
    type=int,
    default=None,
    help='Page-visit budget (overrides max_pages from the config)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option(
    '--trace', is_flag=True,
    help='Print every visited page with its fetch status'
)
@click.pass_context
def search(ctx, seed_url, word, max_pages, json_output, trace):
    """Search for WORD starting at SEED_URL."""
    cfg = ctx.obj['config']
    try:
        outcome = asyncio.run(start_search(cfg, seed_url, word, max_pages))
    except InvalidInput as e:
        print_error(f'Invalid input: {e}')
    except Exception as e:
        print_error(f'Search failed: {e}')

    if trace:
        for n, record in enumerate(outcome.trace, start=1):
            detail = f' {record.detail}' if record.detail else ''
            click.echo(f'{n:>3}. {record.url} [{record.status.value}{detail}] {record.link_count} links')

    click.echo(outcome.describe())

    if json_output:
        try:
            saved_json = render_json(outcome, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Failed to save JSON: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Print the current configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
