# File: tests/test_store.py
import pytest

from wiki_watch.errors import WikiError
from wiki_watch.resources import PromotionalCode, PromotionalCodes
from wiki_watch.store import SnapshotStore


def test_get_missing_returns_none(tmp_path):
    assert SnapshotStore(tmp_path).get(PromotionalCodes) is None


def test_set_then_get(tmp_path):
    store = SnapshotStore(tmp_path / "nested" / "store")
    snapshot = PromotionalCodes(records=(PromotionalCode(code="A", server="All"),))
    path = store.set(snapshot)
    assert path == tmp_path / "nested" / "store" / "Promotional_Codes.json"
    assert store.get(PromotionalCodes).records == snapshot.records


def test_set_replaces_previous(tmp_path):
    store = SnapshotStore(tmp_path)
    store.set(PromotionalCodes(records=(PromotionalCode(code="A"),)))
    store.set(PromotionalCodes(records=(PromotionalCode(code="B"),)))
    assert store.get(PromotionalCodes).records == (PromotionalCode(code="B"),)
    assert [p.name for p in tmp_path.iterdir()] == ["Promotional_Codes.json"]


def test_corrupt_snapshot_is_ignored(tmp_path):
    (tmp_path / "Promotional_Codes.json").write_text("{not json", encoding="utf-8")
    assert SnapshotStore(tmp_path).get(PromotionalCodes) is None


def test_set_failure_raises_wiki_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(WikiError):
        SnapshotStore(blocker / "store").set(PromotionalCodes())
