"""wiki_watch.report: JSON and HTML reports used by the CLI."""

from wiki_watch.report.html_report import render_html
from wiki_watch.report.json_report import render_json, report_data

__all__ = ["render_json", "render_html", "report_data"]
