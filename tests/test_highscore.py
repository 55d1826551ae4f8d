"""Tests for high score persistence."""

import json

import pytest

from giftfall.storage.highscore import HighScoreStore, MemoryHighScoreStore, parse_score


@pytest.mark.parametrize("raw,expected", [
    (None, 0),
    (42, 42),
    ("130", 130),
    (" 20 ", 20),
    ("abc", 0),
    ("", 0),
    (-5, 0),
    (12.7, 12),
    (float("nan"), 0),
    (True, 0),
    ([1], 0),
])
def test_parse_score(raw, expected):
    assert parse_score(raw) == expected


def test_missing_file_reads_zero(tmp_path):
    store = HighScoreStore(tmp_path / "missing.json")
    assert store.read() == 0


def test_corrupt_file_reads_zero(tmp_path):
    path = tmp_path / "highscore.json"
    path.write_text("{not json", encoding="utf-8")
    assert HighScoreStore(path).read() == 0


def test_non_object_file_reads_zero(tmp_path):
    path = tmp_path / "highscore.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert HighScoreStore(path).read() == 0


def test_write_then_read(tmp_path):
    path = tmp_path / "nested" / "highscore.json"
    store = HighScoreStore(path)
    store.write(90)
    assert HighScoreStore(path).read() == 90
    assert json.loads(path.read_text(encoding="utf-8")) == {"santaHighScore": 90}


def test_write_keeps_other_keys(tmp_path):
    path = tmp_path / "highscore.json"
    path.write_text(json.dumps({"volume": 3, "santaHighScore": 10}), encoding="utf-8")
    HighScoreStore(path).write(40)
    assert json.loads(path.read_text(encoding="utf-8")) == {"volume": 3, "santaHighScore": 40}


def test_custom_key(tmp_path):
    path = tmp_path / "highscore.json"
    HighScoreStore(path, key="best").write(7)
    assert HighScoreStore(path, key="best").read() == 7
    assert HighScoreStore(path).read() == 0


def test_write_failure_is_not_fatal(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = HighScoreStore(blocker / "highscore.json")
    store.write(10)
    assert store.read() == 0


def test_memory_store_records_writes():
    store = MemoryHighScoreStore()
    assert store.read() == 0
    store.write(20)
    store.write(50)
    assert store.read() == 50
    assert store.writes == [20, 50]
