# File: tests/test_report.py
import json
from pathlib import Path

from wiki_watch.report import render_html, render_json
from wiki_watch.resources import PromotionalCode, PromotionalCodes

TEMPLATES = Path(__file__).resolve().parent.parent / "templates"

SNAPSHOTS = {
    "Promotional_Codes": PromotionalCodes(
        records=(PromotionalCode(code="<b>XSS</b>", server="All", reward="Primogems x5"),)
    )
}


def test_render_json(tmp_path):
    out = render_json(SNAPSHOTS, tmp_path / "reports" / "added.json")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data == {
        "Promotional_Codes": {
            "records": [
                {
                    "code": "<b>XSS</b>",
                    "server": "All",
                    "reward": "Primogems x5",
                    "discovered": None,
                    "expires": None,
                }
            ]
        }
    }


def test_render_html_with_bundled_template(tmp_path):
    out = render_html(SNAPSHOTS, TEMPLATES, tmp_path / "report.html")
    html = out.read_text(encoding="utf-8")
    assert "<h2>Promotional_Codes</h2>" in html
    assert "Primogems x5" in html
    assert "&lt;b&gt;XSS&lt;/b&gt;" in html
    assert "<b>XSS</b>" not in html


def test_render_html_empty_difference(tmp_path):
    out = render_html({"Promotional_Codes": PromotionalCodes()}, TEMPLATES, tmp_path / "empty.html")
    assert "No new records." in out.read_text(encoding="utf-8")
