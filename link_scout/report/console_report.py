# link_scout/report/console_report.py
"""
Plain-text crawl report written to stdout.
"""
from __future__ import annotations

import click

from link_scout.aggregator import CrawlReport

_RULE = "=" * 40


def print_report(report: CrawlReport) -> None:
    """Print one line per page, most referenced first."""
    click.echo(_RULE)
    click.echo(f"REPORT for {report.base_url}")
    click.echo(_RULE)
    for page in report.pages:
        click.echo(f"Found {page['count']} internal links to {page['url']}")
    click.echo(_RULE)
    click.echo(f"{report.total_pages} pages, {report.total_references} references")
