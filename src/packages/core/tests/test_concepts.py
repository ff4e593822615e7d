"""Tests for concept extraction."""
from study_processing_core.text import STOP_WORDS, extract_concepts


def test_most_frequent_first():
    text = "Photosynthesis converts light. Photosynthesis needs chlorophyll; chlorophyll absorbs light, light!"
    assert extract_concepts(text)[:3] == ["light", "photosynthesis", "chlorophyll"]


def test_short_words_dropped_by_default():
    assert extract_concepts("the cat sat on the cat mat cat") == []


def test_short_words_with_lower_minimum():
    assert extract_concepts("the cat sat on the cat mat cat", min_length=3) == ["cat", "sat", "mat"]


def test_ties_keep_first_occurrence():
    assert extract_concepts("zebra apple mango apple zebra mango") == ["zebra", "apple", "mango"]


def test_excludes_stop_words_and_numbers():
    text = "about which their 2024 12345 year 2024 years"
    assert extract_concepts(text) == ["year", "years"]
    assert "about" in STOP_WORDS


def test_symbols_stripped_and_lowercased():
    assert extract_concepts("Cell-division, CELL division; cell's") == ["celldivision", "cell", "division", "cells"]


def test_at_most_fifteen():
    text = " ".join(f"term{chr(ord('a') + i)}" * 1 for i in range(20))
    concepts = extract_concepts(text)
    assert len(concepts) == 15
    assert extract_concepts(text, limit=5) == concepts[:5]


def test_empty_and_deterministic():
    assert extract_concepts(None) == []
    assert extract_concepts("") == []
    text = "graph nodes edges graph nodes vertex graph"
    assert extract_concepts(text) == extract_concepts(text)
