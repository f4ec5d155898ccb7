# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of the LinkScout crawler.

Usage:
  link-scout [OPTIONS] BASE_URL

Exactly one positional argument, the URL to start from, is required.

Options:
  --config PATH        YAML/JSON file with crawl settings
  --timeout SEC        Per-request timeout (overrides the config)
  --user-agent TEXT    User-Agent header (overrides the config)
  --crawl-timeout SEC  Wall clock limit for the whole crawl
  --json PATH          Save the JSON report to a file
  --html PATH          Save the HTML report to a file
  --template DIR       Directory with a custom report.html.j2
  --log-level LEVEL    Logging level (DEBUG, INFO, ...)
  --log-file PATH      Log file (stderr only if omitted)
  --log-format FORMAT  Logging format string
  --version, -v        Show the LinkScout version

Example:
  link-scout https://wagslane.dev --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.aggregator import build_report
from link_scout.config import CrawlerConfig, load_config
from link_scout.crawler.errors import MalformedURL
from link_scout.engine import start_crawl
from link_scout.logger import DEFAULT_FORMAT, init_logging
from link_scout.report.console_report import print_report
from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.argument('urls', nargs=-1)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON settings file.'
)
@click.option('--timeout', type=float, default=None, help='Per-request timeout in seconds.')
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header.')
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Timeout of the whole crawl (seconds)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON report to a file'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the HTML report to a file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with a report.html.j2 Jinja2 template'
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
    help='Log file path (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
def cli(urls, config_path, timeout, user_agent, crawl_timeout, json_output, html_output,
        template_dir, log_level, log_file, log_format):
    """Crawl every page on the host of BASE_URL and count internal links to each."""
    if len(urls) < 1:
        print_error('Error: Too few arguments')
    elif len(urls) > 1:
        print_error('Error: Too many arguments')
    base_url = urls[0]

    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
        overrides = {k: v for k, v in (('timeout', timeout), ('user_agent', user_agent)) if v is not None}
        if overrides:
            cfg = CrawlerConfig.model_validate({**cfg.model_dump(), **overrides})
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Config error: {e}')

    click.echo(f'Crawler starting at: {base_url}')
    try:
        if crawl_timeout:
            visited = asyncio.run(
                asyncio.wait_for(start_crawl(base_url, cfg), timeout=crawl_timeout)
            )
        else:
            visited = asyncio.run(start_crawl(base_url, cfg))
    except MalformedURL as e:
        print_error(f'Error: {e}')
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    report = build_report(base_url, visited)
    print_report(report)

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Failed to save JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Failed to save HTML: {e}')


if __name__ == "__main__":
    cli()
