#!/usr/bin/env python3
"""Tests for the offline tools in tools/."""

import json

import audit_wordcount
import parse_local_toc

TABLE_PAGE = (
    '<html><body><table>'
    '<tr><th>Volume 1</th></tr><tr><th>Book 1</th></tr>'
    '<tr><td>1.00</td><td>Chapter 1</td><td></td></tr>'
    '<tr><td>1.01</td><td>Chapter 2</td><td></td></tr>'
    '</table></body></html>'
)


def test_parse_local_toc(tmp_path, capsys):
    path = tmp_path / "toc.html"
    path.write_text(TABLE_PAGE, encoding="utf-8")
    assert parse_local_toc.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "tabular" in out
    assert "Volume 1: глав=2" in out


def test_parse_local_toc_errors(tmp_path, capsys):
    assert parse_local_toc.main([str(tmp_path / "missing.html")]) == 2
    path = tmp_path / "empty.html"
    path.write_text("<html><body></body></html>", encoding="utf-8")
    assert parse_local_toc.main([str(path)]) == 2
    assert "[ERR] PARSE" in capsys.readouterr().out


def test_audit_compare():
    chapters = {"chapters": [
        {"v": 0, "b": 0, "ws": "1.00", "ab": "Chapter 1", "eb": None},
        {"v": 0, "b": 0, "ws": "1.00", "ab": "Chapter 2", "eb": None},
        {"v": 0, "b": 0, "ws": "1.01", "ab": None, "eb": None},
        {"v": 0, "b": 0, "ws": None, "ab": "Bonus", "eb": None},
    ]}
    missing, orphans = audit_wordcount.compare(chapters, {"1.00": 100, "Side Story": 5})
    assert missing == ["1.01"]
    assert orphans == ["Side Story"]


def test_audit_main(tmp_path, capsys):
    chapters = tmp_path / "chapters.json"
    counts = tmp_path / "wordcount.json"
    chapters.write_text(json.dumps({"chapters": [{"ws": "1.00"}]}), encoding="utf-8")
    counts.write_text(json.dumps({"1.00": 10}), encoding="utf-8")
    assert audit_wordcount.main([str(chapters), str(counts)]) == 0
    assert "Без числа слов: 0" in capsys.readouterr().out
    assert audit_wordcount.main([str(tmp_path / "nope.json"), str(counts)]) == 2
