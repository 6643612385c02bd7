# === FILE: wiki_watch/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of WikiWatch.

Commands:
  refresh     Fetch resources, store the new snapshots and report added records
  show        Print the stored snapshot of a resource
  resources   List the resources WikiWatch can track
  config      Print the effective configuration

Common options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only if omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

refresh options:
  --json PATH         Save the added records as a JSON report
  --html PATH         Save the added records as an HTML report
  --template DIR      Directory with the Jinja2 templates
  --pretty            Indent JSON printed to stdout

Also:
  --version, -v       Show the WikiWatch version

Example:
  wiki_watch --config configs/default.yaml refresh Promotional_Codes --pretty
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from wiki_watch import __version__
from wiki_watch.config import load_config
from wiki_watch.engine import refresh_resources
from wiki_watch.errors import WikiError
from wiki_watch.logger import init_logging
from wiki_watch.report.html_report import render_html
from wiki_watch.report.json_report import render_json, report_data
from wiki_watch.resources import get_resource, resource_titles
from wiki_watch.store import SnapshotStore

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='WikiWatch, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to the YAML/JSON configuration file.'
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
    help='Log file (stdout only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """WikiWatch command group."""
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


@cli.command('refresh', context_settings=CONTEXT_SETTINGS)
@click.argument('titles', nargs=-1)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the added records as a JSON report'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the added records as an HTML report'
)
@click.option(
    '--template', '-t', 'template_dir',
    default='templates',
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory with the Jinja2 templates'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent JSON output (2 spaces)'
)
@click.pass_context
def refresh(ctx, titles, json_output, html_output, template_dir, pretty):
    """Refresh resources (default: the configured ones) and report added records."""
    cfg = ctx.obj['config']
    for title in titles:
        try:
            get_resource(title)
        except ValueError as e:
            print_error(str(e))
    try:
        results = asyncio.run(refresh_resources(cfg, titles or None))
    except WikiError as e:
        print_error(f'Refresh failed: {e}')

    added = {title: result.added for title, result in results.items()}

    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(report_data(added), ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(added, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Failed to save JSON report: {e}')

    if html_output:
        try:
            saved_html = render_html(added, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Failed to save HTML report: {e}')


@cli.command('show', context_settings=CONTEXT_SETTINGS)
@click.argument('title')
@click.option('--pretty', is_flag=True, help='Indent JSON output (2 spaces)')
@click.pass_context
def show(ctx, title, pretty):
    """Print the stored snapshot of TITLE."""
    cfg = ctx.obj['config']
    try:
        resource_type = get_resource(title)
    except ValueError as e:
        print_error(str(e))
    snapshot = SnapshotStore(cfg.store_dir).get(resource_type)
    if snapshot is None:
        print_error(f'No stored snapshot for {title}')
    click.echo(snapshot.model_dump_json(indent=2 if pretty else None))


@cli.command('resources', context_settings=CONTEXT_SETTINGS)
def list_resources():
    """List the registered resource titles."""
    for title in resource_titles():
        click.echo(title)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Print the current configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
