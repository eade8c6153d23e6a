"""
Tests for the command line pipeline.
"""

import json

import pytest

import main
from threadexport.exceptions import MissingURLError


def test_mock_export_writes_all_outputs(tmp_path):
    csv_path = tmp_path / "c.csv"
    html_path = tmp_path / "c.html"
    tree_path = tmp_path / "tree.json"
    args = main.parse_arguments([
        "--mock",
        "--csv", str(csv_path),
        "--html", str(html_path),
        "--tree", str(tree_path),
        "--collapse",
    ])

    session = main.run_export(args)

    assert len(session.records) == 7
    assert csv_path.read_text(encoding='utf-8').startswith("Number,Level,Body")
    assert '<table id="output-table"' in html_path.read_text(encoding='utf-8')

    tree = json.loads(tree_path.read_text(encoding='utf-8'))
    assert tree["id"] == "root"
    assert [c["id"] for c in tree["children"]] == ["1", "2", "3"]
    assert tree["collapsed"] == ["1", "1.2", "2"]


def test_sort_flags_toggle():
    args = main.parse_arguments([
        "--mock", "--no-csv",
        "--sort", "level", "--sort", "level",
    ])

    session = main.run_export(args)

    assert [r.numbering for r in session.records] == ["1.2.1", "1.1", "1.2", "2.1", "1", "2", "3"]


def test_preferences_from_flags():
    args = main.parse_arguments(["--mock", "--compact", "--date-format", "utc", "--remove-newlines"])
    prefs = main.build_preferences(args)

    assert prefs.compact_mode
    assert prefs.remove_newlines
    assert prefs.date_format == "utc"


def test_input_file(tmp_path):
    payload = [
        {"kind": "Listing", "data": {"children": [{"kind": "t3", "data": {"title": "Saved"}}]}},
        {"kind": "Listing", "data": {"children": [{"kind": "t1", "data": {"body": "only one"}}]}},
    ]
    thread = tmp_path / "thread.json"
    thread.write_text(json.dumps(payload), encoding='utf-8')
    args = main.parse_arguments(["--input", str(thread), "--csv", str(tmp_path / "out.csv")])

    session = main.run_export(args)

    assert session.post.title == "Saved"
    assert [r.numbering for r in session.records] == ["1"]


def test_missing_url():
    args = main.parse_arguments(["--no-csv"])
    with pytest.raises(MissingURLError):
        main.run_export(args)


def test_thread_without_comments_still_writes_html_and_tree(tmp_path):
    payload = [
        {"kind": "Listing", "data": {"children": [{"kind": "t3", "data": {"title": "Quiet thread"}}]}},
        {"kind": "Listing", "data": {"children": []}},
    ]
    thread = tmp_path / "thread.json"
    thread.write_text(json.dumps(payload), encoding='utf-8')
    csv_path = tmp_path / "out.csv"
    html_path = tmp_path / "out.html"
    tree_path = tmp_path / "tree.json"
    args = main.parse_arguments([
        "--input", str(thread),
        "--csv", str(csv_path),
        "--html", str(html_path),
        "--tree", str(tree_path),
    ])

    session = main.run_export(args)

    assert session.records == []
    assert not csv_path.exists()
    assert "Quiet thread" in html_path.read_text(encoding='utf-8')
    tree = json.loads(tree_path.read_text(encoding='utf-8'))
    assert tree["name"] == "Quiet thread"
    assert tree["children"] == []
