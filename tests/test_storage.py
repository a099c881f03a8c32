import json
import logging

from gridsnake.storage import HighScoreStore


def test_missing_file_reads_as_zero(tmp_path):
    assert HighScoreStore(str(tmp_path / "storage.json")).get() == 0


def test_set_then_get(tmp_path):
    store = HighScoreStore(str(tmp_path / "nested" / "storage.json"))
    store.set(120)
    assert store.get() == 120
    assert HighScoreStore(store.path).get() == 120


def test_value_is_kept_under_fixed_key_and_other_keys_survive(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    HighScoreStore(str(path)).set(40)
    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark", "snakeHighScore": 40}


def test_string_values_are_parsed(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"snakeHighScore": "90"}), encoding="utf-8")
    assert HighScoreStore(str(path)).get() == 90


def test_corrupt_file_reads_as_zero(tmp_path, caplog):
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="gridsnake.storage"):
        assert HighScoreStore(str(path)).get() == 0
    assert "Could not read" in caplog.text


def test_garbage_value_reads_as_zero(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"snakeHighScore": "lots"}), encoding="utf-8")
    assert HighScoreStore(str(path)).get() == 0


def test_unwritable_location_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = HighScoreStore(str(blocker / "storage.json"))
    with caplog.at_level(logging.WARNING, logger="gridsnake.storage"):
        store.set(10)
    assert "Could not save" in caplog.text
    assert store.get() == 0
