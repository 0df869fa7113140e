"""
Board service tests: id allocation and serialized writers.
"""
from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

# Make the schoolboard package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from schoolboard.core import config as core_config  # noqa: E402
from schoolboard.core.errors import PersistenceWriteError, ValidationError  # noqa: E402
from schoolboard.repositories import json_storage  # noqa: E402
from schoolboard.services import board_service  # noqa: E402
from schoolboard.services.board_service import BoardService  # noqa: E402


@pytest.fixture()
def svc(tmp_path, monkeypatch):
    monkeypatch.setenv("SCHOOLBOARD_DATA_FILE", str(tmp_path / "schoolData.json"))
    core_config.get_settings.cache_clear()
    json_storage.ensure_initialized()
    yield BoardService()
    core_config.get_settings.cache_clear()


def test_ids_strictly_increase_within_same_millisecond(svc, monkeypatch):
    monkeypatch.setattr(board_service, "now_millis", lambda: 1_700_000_000_000)

    ids = [svc.add_holiday({"text": f"h{i}"}).id for i in range(3)]

    assert ids == [1_700_000_000_000, 1_700_000_000_001, 1_700_000_000_002]


def test_concurrent_writers_do_not_lose_posts(svc):
    errors = []

    def worker(n: int) -> None:
        try:
            svc.add_payment_due({"classCode": "222p-1a", "text": f"due {n}"})
        except Exception as exc:  # pragma: no cover - surfaced by the assert below
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    dues = json_storage.load().payment_dues["222p-1a"]
    assert len(dues) == 20
    assert len({p.id for p in dues}) == 20


def test_faculty_post_fills_class_structure(svc):
    post = svc.add_faculty_post(
        {"classCode": "222p-2b", "type": "subject", "text": "Syllabus", "facultyCode": "F3"}
    )

    klass = json_storage.load().faculty_posts["222p-2b"]
    assert klass.subject == [post]
    assert klass.homework == [] and klass.assignment == []


def test_validation_happens_before_any_write(svc, monkeypatch):
    calls = []
    monkeypatch.setattr(json_storage, "save", lambda document: calls.append(document) or True)

    with pytest.raises(ValidationError) as excinfo:
        svc.add_faculty_post({"classCode": "c", "type": "quiz", "text": "t", "facultyCode": "f"})

    assert excinfo.value.http_status == 400
    assert calls == []


def test_save_failure_raises_write_error(svc, monkeypatch):
    monkeypatch.setattr(json_storage, "save", lambda document: False)

    with pytest.raises(PersistenceWriteError) as excinfo:
        svc.add_key_info({"text": "Lost"})

    assert excinfo.value.message == "Failed to save data"
    assert excinfo.value.http_status == 500


@pytest.mark.parametrize("raw_id", ["1000", "1e3", "1000.0", " 1000 ", "0x3E8"])
def test_delete_matches_numeric_spellings_of_id(svc, monkeypatch, raw_id):
    monkeypatch.setattr(board_service, "now_millis", lambda: 1000)
    svc.add_holiday({"text": "Holi"})
    other = svc.add_holiday({"text": "Diwali"})

    svc.delete_post("holiday", raw_id)

    assert [p.id for p in json_storage.load().holidays] == [other.id]


@pytest.mark.parametrize("raw_id", ["1000.5", "abc", "1_000"])
def test_delete_ignores_ids_that_are_not_the_same_number(svc, monkeypatch, raw_id):
    monkeypatch.setattr(board_service, "now_millis", lambda: 1000)
    svc.add_key_info({"text": "PTM"})

    svc.delete_post("keyinfo", raw_id)

    assert len(json_storage.load().key_info) == 1
