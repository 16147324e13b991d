#!/usr/bin/env python3
"""Tests for wordcount.py."""

from wordcount import normalize_wordcount, total_words


def test_wrapped_records():
    data = {"chapters": [{"chapter_name": "Ch 1", "wordcount": 1000}]}
    assert normalize_wordcount(data) == {"Ch 1": 1000}


def test_flat_mapping_unchanged():
    assert normalize_wordcount({"Ch 1": 1000}) == {"Ch 1": 1000}


def test_bare_list():
    data = [
        {"chapter_name": "1.00", "wordcount": 12000},
        {"chapter_name": "1.01", "wordcount": "9500"},
    ]
    assert normalize_wordcount(data) == {"1.00": 12000, "1.01": 9500}


def test_skips_incomplete_and_bad_records():
    data = {"chapters": [
        {"chapter_name": "", "wordcount": 10},
        {"chapter_name": "1.02", "wordcount": 0},
        {"chapter_name": "1.03"},
        {"chapter_name": "1.04", "wordcount": "lots"},
        "not a record",
        {"chapter_name": "1.05", "wordcount": 700},
    ]}
    assert normalize_wordcount(data) == {"1.05": 700}


def test_later_duplicates_win():
    data = [
        {"chapter_name": "1.00", "wordcount": 1},
        {"chapter_name": "1.00", "wordcount": 2},
    ]
    assert normalize_wordcount(data) == {"1.00": 2}


def test_empty_chapters_field_falls_back_to_value():
    # пустое поле chapters: берём сам объект как готовый словарь
    assert normalize_wordcount({"chapters": []}) == {"chapters": []}


def test_unexpected_shape():
    assert normalize_wordcount(42) == {}
    assert normalize_wordcount(None) == {}


def test_total_words():
    assert total_words({"a": 10, "b": 5, "c": "x", "d": True}) == 15
    assert total_words({}) == 0


def test_float_and_bool_counts_skipped():
    data = [
        {"chapter_name": "1.00", "wordcount": 1234.9},
        {"chapter_name": "1.01", "wordcount": True},
        {"chapter_name": "1.02", "wordcount": 4321},
    ]
    assert normalize_wordcount(data) == {"1.02": 4321}


def test_int_count_kept_as_is():
    result = normalize_wordcount([{"chapter_name": "1.00", "wordcount": 12345}])
    assert result == {"1.00": 12345}
    assert type(result["1.00"]) is int
