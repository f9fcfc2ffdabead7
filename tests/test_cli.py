import io
import sys

import pytest

from probehash.cli import main, read_data_file


def _run(monkeypatch, text, argv=None):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main(argv or [])


def test_read_data_file_basic(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("3\nalice 10\nbob 20\n\ncarol 30\n", encoding="utf-8")
    assert read_data_file(path) == [("alice", 10), ("bob", 20), ("carol", 30)]


def test_read_data_file_uses_last_two_words(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("2\nfirst name 7\n42\n", encoding="utf-8")
    assert read_data_file(path) == [("name", 7), ("", 42)]


def test_read_data_file_reads_leading_integer_of_value(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("1\nkey 12abc\n", encoding="utf-8")
    assert read_data_file(path) == [("key", 12)]


def test_read_data_file_ignores_lines_beyond_count(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("1\nx 1\ny 2\n", encoding="utf-8")
    assert read_data_file(path) == [("x", 1)]


def test_read_data_file_too_few_lines(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("3\nx 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_data_file(path)


def test_read_data_file_bad_value(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("1\nkey value\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_data_file(path)


def test_read_data_file_missing_count(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("key 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_data_file(path)


def test_read_data_file_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_data_file(tmp_path / "nope.txt")


def test_main_insert_search_remove(monkeypatch, capsys):
    script = "1\n8\n2\n1\n2\nab 5\nba 6\n3\nab\n4\nab\n3\nab\n5\n"
    assert _run(monkeypatch, script) == 0
    out = capsys.readouterr().out
    assert "Hash tables created with size 8" in out
    assert "Inserted 2 key-value pairs into both hash tables." in out
    assert out.count("Found key ab with value 5") == 2
    assert "Key ab removed from traditional hash table." in out
    assert "Key ab removed from fibonacci hash table." in out
    assert "Key ab not found in traditional hash table." in out
    assert "Key ab not found in fibonacci hash table." in out
    assert out.rstrip().endswith("Exiting program...")


def test_main_requires_table(monkeypatch, capsys):
    assert _run(monkeypatch, "3\n5\n") == 0
    out = capsys.readouterr().out
    assert "Please create a hash table first!" in out
    assert "Hash table is empty." in out


def test_main_loads_data_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_text("2\nred 1\nblue 2\n", encoding="utf-8")
    script = "1\n4\n2\n2\n3\nblue\n5\n"
    assert _run(monkeypatch, script, ["--data", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Inserted 2 key-value pairs into both hash tables." in out
    assert out.count("Found key blue with value 2") == 2
    assert "red -> 1" in out


def test_main_missing_data_file(monkeypatch, capsys, tmp_path):
    script = "1\n4\n2\n2\n5\n"
    assert _run(monkeypatch, script, ["--data", str(tmp_path / "absent.txt")]) == 0
    out = capsys.readouterr().out
    assert "Error!" in out
    assert "Inserted" not in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    assert _run(monkeypatch, "1\n4\n") == 0
    out = capsys.readouterr().out
    assert "Hash tables created with size 4" in out
    assert "Exiting program..." not in out


def test_main_reports_invalid_input(monkeypatch, capsys):
    assert _run(monkeypatch, "x\n5\n") == 0
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Exiting program..." in out