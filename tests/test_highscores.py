import pytest

from robodefense.highscores import (
    HighScore,
    HighScoreTable,
    parse_scores,
    reason_text,
    serialize_scores,
)


def _entry(name, score):
    return HighScore(name, score, 2, 30.5, "2024-01-01")


def test_serialize_format():
    text = serialize_scores([HighScore("Ann", 500, 3, 12.5, "2024-01-01")])
    assert text == "Ann,500,3,12.5,2024-01-01\n"


def test_round_trip():
    scores = [_entry("a", 10), _entry("b", 20)]
    assert parse_scores(serialize_scores(scores)) == scores


def test_parse_skips_short_lines():
    text = "broken\n" + serialize_scores([_entry("x", 5)])
    assert parse_scores(text) == [_entry("x", 5)]


def test_parse_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_scores("a,notanumber,1,1,2024-01-01\n")


def test_reason_text():
    assert reason_text(0) == "You were defeated!"
    assert reason_text(1) == "Time ran out!"
    assert reason_text(2) == "Core destroyed!"
    assert reason_text(99) == "Unknown reason"


def test_empty_table(tmp_path):
    table = HighScoreTable(tmp_path / "scores.txt")
    assert table.load() == []
    assert table.high_score() == 0
    assert table.rank_of(50) == 1
    assert table.is_new_high_score(1)


def test_save_orders_best_first(tmp_path):
    table = HighScoreTable(tmp_path / "scores.txt")
    for name, score in [("a", 10), ("b", 30), ("c", 20)]:
        table.save(_entry(name, score))
    assert [s.score for s in table.load()] == [30, 20, 10]
    assert table.high_score() == 30
    assert table.lowest_high_score() == 10


def test_save_trims_to_max(tmp_path):
    table = HighScoreTable(tmp_path / "scores.txt", max_scores=2)
    for score in (5, 15, 10):
        table.save(_entry("p", score))
    assert [s.score for s in table.load()] == [15, 10]
    assert not table.is_new_high_score(10)
    assert table.is_new_high_score(11)


def test_rank_and_top(tmp_path):
    table = HighScoreTable(tmp_path / "scores.txt")
    for score in (100, 50):
        table.save(_entry("p", score))
    assert table.rank_of(100) == 1
    assert table.rank_of(60) == 2
    assert table.rank_of(10) == 3
    assert table.is_top_ten(10)
    assert [s.score for s in table.top_scores(1)] == [100]


def test_clear(tmp_path):
    table = HighScoreTable(tmp_path / "scores.txt")
    table.save(_entry("p", 1))
    table.clear()
    assert table.load() == []


def test_export_import(tmp_path):
    source = HighScoreTable(tmp_path / "a.txt")
    source.save(_entry("a", 7))
    source.save(_entry("b", 9))
    export_path = tmp_path / "export.csv"
    source.export(export_path)

    target = HighScoreTable(tmp_path / "b.txt")
    assert target.import_scores(export_path) == 2
    assert target.load() == source.load()


def test_import_skips_malformed(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("bad,x,1,1,d\n" + serialize_scores([_entry("ok", 3)]), encoding="utf-8")
    table = HighScoreTable(tmp_path / "t.txt")
    assert table.import_scores(path) == 1
    assert table.load() == [_entry("ok", 3)]


def test_import_missing_file(tmp_path):
    table = HighScoreTable(tmp_path / "t.txt")
    with pytest.raises(FileNotFoundError):
        table.import_scores(tmp_path / "missing.csv")