# wiki_watch/report/json_report.py

"""
JSON report generation for WikiWatch.

Serializes the per-resource snapshots (usually the newly added records) to a file.
"""
import json
from pathlib import Path
from typing import Any, Dict, Mapping

from wiki_watch.resources.base import WikiResource


def report_data(snapshots: Mapping[str, WikiResource]) -> Dict[str, Any]:
    """Plain JSON-ready mapping ``title -> snapshot fields``."""
    return {title: snapshot.model_dump(mode="json") for title, snapshot in snapshots.items()}


def render_json(snapshots: Mapping[str, WikiResource], output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *snapshots* as JSON at the given path.

    :param snapshots: resource title -> snapshot
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from wiki_watch.report.json_report import render_json
    report_path = render_json({"Promotional_Codes": added}, 'reports/added.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report_data(snapshots), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
