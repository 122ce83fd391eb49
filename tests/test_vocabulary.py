# tests/test_vocabulary.py
import json

import pytest

from vocab_quiz.vocabulary import (
    filter_by_category, get_categories, load_entries, load_sample_entries,
)


def test_load_json_list(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps([
        {"id": "1", "wordSo": "hooyo", "wordEn": "mother", "partOfSpeech": "noun",
         "categoryId": "family", "examples": [{"so": "Hooyo waa halkan.", "en": "Mother is here."}]},
        {"id": "2", "source": "aabe", "target": "father"},
    ]), encoding="utf-8")
    entries = load_entries(path)
    assert len(entries) == 2
    assert entries[0].source == "hooyo"
    assert entries[0].target == "mother"
    assert entries[0].part_of_speech == "noun"
    assert entries[0].category_id == "family"
    assert entries[0].examples[0].target == "Mother is here."
    assert entries[1].part_of_speech is None
    assert entries[1].difficulty is None


def test_load_json_words_key(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"words": [{"wordSo": "biyo", "wordEn": "water"}]}))
    entries = load_entries(path)
    assert entries[0].id == "w1"


def test_load_csv(tmp_path):
    path = tmp_path / "words.csv"
    path.write_text(
        "categoryName,wordSo,wordEn,partOfSpeech,difficulty\n"
        "Food,biyo,water,noun,beginner\n"
        "Food,cun,eat,verb,\n",
        encoding="utf-8",
    )
    entries = load_entries(path)
    assert [e.target for e in entries] == ["water", "eat"]
    assert entries[0].category_id == "Food"
    assert entries[1].difficulty is None


def test_rows_with_missing_terms_skipped(tmp_path, caplog):
    path = tmp_path / "words.csv"
    path.write_text("wordSo,wordEn\nbiyo,water\n,empty\n  ,  \n", encoding="utf-8")
    with caplog.at_level("WARNING"):
        entries = load_entries(path)
    assert len(entries) == 1
    assert "Skipping row 2" in caplog.text


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "words.xml"
    path.write_text("<words/>")
    with pytest.raises(ValueError):
        load_entries(path)


def test_json_object_without_words_key(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"entries": []}))
    with pytest.raises(ValueError, match="words"):
        load_entries(path)


def test_sample_entries_are_usable():
    entries = load_sample_entries()
    assert len(entries) >= 4
    assert all(e.source and e.target for e in entries)
    assert len({e.id for e in entries}) == len(entries)


def test_categories(entries):
    sample = load_sample_entries()
    categories = get_categories(sample)
    assert categories == ["family", "food", "basics"]
    assert all(e.category_id == "food" for e in filter_by_category(sample, "food"))
    assert get_categories(entries) == []
