import json
import logging

from blocks_hiscore import GameRecord as R
from blocks_hiscore import HighScoreStore, clear, empty_table, insert, qualifying_rank


def test_equal_score_more_lines_beats_existing_entry():
    table = [R(1000, 5), R(500, 3), None]
    assert insert(table, R(500, 10)) == 1
    assert table == [R(1000, 5), R(500, 10), R(500, 3)]


def test_empty_slot_qualifies():
    table = [R(100, 1), None, None]
    assert insert(table, R(50, 0)) == 1
    assert table == [R(100, 1), R(50, 0), None]


def test_insert_at_top_keeps_three_slots():
    table = [R(300, 3), R(200, 2), R(100, 1)]
    assert insert(table, R(400, 0)) == 0
    assert table == [R(400, 0), R(300, 3), R(200, 2)]


def test_not_qualifying():
    table = [R(1000, 9), R(900, 9), R(800, 9)]
    assert qualifying_rank(table, R(700, 50)) is None
    assert qualifying_rank(table, R(800, 9)) is None
    assert insert(table, R(800, 9)) is None
    assert table == [R(1000, 9), R(900, 9), R(800, 9)]


def test_short_table_is_padded():
    table = [R(10, 1)]
    assert insert(table, R(5, 0)) == 1
    assert table == [R(10, 1), R(5, 0), None]


def test_load_missing_file(tmp_path):
    store = HighScoreStore(str(tmp_path / "none.json"))
    assert store.load() == empty_table()


def test_load_corrupt_file_warns(tmp_path, caplog):
    path = tmp_path / "hs.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="blocks_hiscore"):
        assert HighScoreStore(str(path)).load() == empty_table()
    assert "failed to load" in caplog.text


def test_load_wrong_shape(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text(json.dumps({"score": 3}))
    assert HighScoreStore(str(path)).load() == empty_table()


def test_save_and_load(tmp_path):
    store = HighScoreStore(str(tmp_path / "sub" / "hs.json"))
    table = [R(900, 12, "ann"), None, None]
    assert store.save(table)
    raw = json.loads((tmp_path / "sub" / "hs.json").read_text())
    assert raw[1] == {"score": 0, "lines": 0, "isEmpty": True}
    assert store.load() == table


def test_save_failure_is_reported_not_raised(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    store = HighScoreStore(str(blocker / "hs.json"))
    assert store.save(empty_table()) is False


def test_reset_empties_table_and_removes_file(tmp_path):
    path = tmp_path / "hs.json"
    store = HighScoreStore(str(path))
    table = [R(900, 12), R(400, 3), None]
    store.save(table)
    clear(table)
    assert store.reset()
    assert table == empty_table()
    assert not path.exists()
    assert store.load() == empty_table()
    assert store.reset()


def test_reset_failure_is_logged_not_raised(tmp_path, caplog):
    # a directory at the path makes the delete fail
    path = tmp_path / "hs.json"
    path.mkdir()
    with caplog.at_level(logging.WARNING, logger="blocks_hiscore"):
        assert HighScoreStore(str(path)).reset() is False
    assert "failed to reset" in caplog.text
