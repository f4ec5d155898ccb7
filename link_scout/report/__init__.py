"""link_scout.report: console, JSON and HTML renderings of a crawl report."""

from link_scout.report.console_report import print_report
from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json

__all__ = ["print_report", "render_json", "render_html"]
