# File: wiki_watch/report/html_report.py
"""wiki_watch.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from wiki_watch.report.json_report import report_data
from wiki_watch.resources.base import WikiResource


def render_html(
    snapshots: Mapping[str, WikiResource],
    template_dir: Union[Path, str],
    output_path: Union[Path, str],
) -> Path:
    """Render the HTML report from a template and save it at the given path.

    Args:
        snapshots: resource title -> snapshot.
        template_dir: directory holding ``report.html.j2``.
        output_path: path of the resulting HTML file.

    Returns:
        Path of the saved HTML file.
    """
    template_dir = Path(template_dir)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("report.html.j2")

    context: dict[str, Any] = {"resources": report_data(snapshots)}

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
