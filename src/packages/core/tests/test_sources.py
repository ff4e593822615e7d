"""Tests for source loaders."""
import pytest

from study_processing_core.sources import detect_source, get_loader, load_source
from study_processing_core.util import SourceLoadError, UnsupportedSourceError


def test_detect_text(tmp_path):
    p = tmp_path / "notes.md"
    p.write_text("# Notes\n\nSome text")
    assert detect_source(str(p)) == "text"
    assert detect_source(str(tmp_path / "missing.txt")) is None


def test_detect_transcript_json(tmp_path):
    p = tmp_path / "talk.json"
    p.write_text('{"title": "Talk", "chunks": []}')
    assert detect_source(str(p)) == "transcript_json"


def test_detect_transcript_csv(tmp_path):
    p = tmp_path / "captions.csv"
    p.write_text("Timestamp,Content\n00:00,Hello")
    assert detect_source(str(p)) == "transcript_csv"


def test_unrecognized_sources(tmp_path):
    p = tmp_path / "table.csv"
    p.write_text("id,name\n1,foo")
    assert detect_source(str(p)) is None
    binary = tmp_path / "blob.txt"
    binary.write_bytes(b"abc\x00def")
    assert detect_source(str(binary)) is None
    with pytest.raises(UnsupportedSourceError, match="table.csv"):
        load_source(str(p))
    with pytest.raises(UnsupportedSourceError, match="Unknown format"):
        get_loader("pdf")


def test_text_load(tmp_path):
    p = tmp_path / "lecture.txt"
    p.write_bytes("Chapter 1\n\nCafé notes".encode("utf-8") + b"\xff")
    extracted = load_source(str(p))
    assert extracted.source_type == "text"
    assert extracted.title == "lecture"
    assert extracted.text.startswith("Chapter 1\n\nCafé notes")
    assert "�" in extracted.text


def test_transcript_json_load(tmp_path):
    p = tmp_path / "talk.json"
    p.write_text(
        '{"title": "Cells", "chunks": ['
        '{"timestamp": "00:00", "topic": "Intro", "content": "Cells are units."},'
        '{"timestamp": "01:10", "topic": "Membranes", "content": "They hold things in."}]}'
    )
    extracted = load_source(str(p))
    assert extracted.source_type == "video"
    assert extracted.title == "Cells"
    assert len(extracted.segments) == 2
    assert extracted.text == (
        "[00:00] Intro: Cells are units.\n\n[01:10] Membranes: They hold things in."
    )


def test_transcript_json_malformed(tmp_path):
    p = tmp_path / "talk.json"
    p.write_text("{ broken")
    with pytest.raises(SourceLoadError, match="parse error"):
        load_source(str(p), "transcript_json")


def test_transcript_csv_load(tmp_path):
    p = tmp_path / "captions.csv"
    p.write_text(
        "timestamp,topic,text\n"
        "00:00,Intro,Welcome to the course\n"
        "00:30,,\n"
        "01:00,,Today we cover graphs\n"
    )
    extracted = load_source(str(p))
    assert extracted.source_type == "video"
    assert [s.timestamp for s in extracted.segments] == ["00:00", "01:00"]
    assert extracted.segments[0].topic == "Intro"
    assert extracted.text == "[00:00] Intro: Welcome to the course\n\n[01:00] Today we cover graphs"
    assert extracted.metadata["rows"] == 3


def test_transcript_csv_missing_columns(tmp_path):
    p = tmp_path / "captions.csv"
    p.write_text("start,words\n00:00,hi")
    with pytest.raises(SourceLoadError, match="timestamp"):
        load_source(str(p), "transcript_csv")
