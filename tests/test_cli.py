"""
Tests for the command line entry point.
"""

import json

import pytest

import main


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep the CLI log file out of the working directory."""
    monkeypatch.setattr(main, "setup_logging", lambda verbose=False: None)


@pytest.fixture
def prayers_dir(tmp_path):
    directory = tmp_path / "prayers"
    directory.mkdir()
    (directory / "good.json").write_text(json.dumps({
        "schemaVersion": 1,
        "id": "good",
        "title": "Good",
        "blocks": [{"type": "heading", "content": "Good"}, {"type": "prose", "content": "Amen."}],
    }), encoding="utf-8")
    (directory / "bad.json").write_text(json.dumps({
        "schemaVersion": 1,
        "id": "Bad_Id",
        "title": "Bad",
        "blocks": [{"type": "stanza", "content": ""}],
    }), encoding="utf-8")
    (directory / "old_vespers.json").write_text(json.dumps([
        "Vespers",
        {"type": "verse", "text": "Let my prayer rise"},
    ]), encoding="utf-8")
    return directory


def test_tree_prints_rendered_tree(capsys):
    assert main.main(["tree", "--depth", "1"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "malankara/"
    assert "  qurbana/" in out


def test_tree_export_json(tmp_path):
    output = tmp_path / "out" / "tree.json"
    assert main.main(["tree", "--output", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["route"] == "malankara"
    assert data["minVersionCode"] == 34


def test_tree_hides_editor_only(capsys):
    assert main.main(["tree", "--no-editor-only"]) == 0
    assert "drafts" not in capsys.readouterr().out


def test_tree_search_without_match(capsys):
    assert main.main(["tree", "--search", "zzz-no-match"]) == 0
    assert "No routes or filenames match" in capsys.readouterr().out


def test_tree_missing_config_fails(tmp_path):
    assert main.main(["tree", "--config", str(tmp_path / "missing.json")]) == 1


def test_tree_unknown_pattern_fails(tmp_path):
    path = tmp_path / "tree.config.json"
    path.write_text(json.dumps({"route": "x", "pattern": {"type": "weeks"}}), encoding="utf-8")
    assert main.main(["tree", "--config", str(path)]) == 1


def test_validate_reports_errors(prayers_dir, capsys):
    code = main.main(["validate", str(prayers_dir / "good.json"), str(prayers_dir / "bad.json")])
    out = capsys.readouterr().out

    assert code == 1
    assert "good.json: OK" in out
    assert "bad.json: 2 error(s)" in out
    assert "[document] Prayer ID must be camelCase" in out
    assert "[block 0] Stanza block requires content" in out


def test_validate_all_good(prayers_dir):
    assert main.main(["validate", str(prayers_dir / "good.json")]) == 0


def test_validate_missing_file(prayers_dir):
    assert main.main(["validate", str(prayers_dir / "missing.json")]) == 1


def test_normalize_legacy(prayers_dir, tmp_path, capsys):
    output_dir = tmp_path / "converted"
    assert main.main(["normalize", str(prayers_dir / "old_vespers.json"), "--output-dir", str(output_dir)]) == 0

    data = json.loads((output_dir / "oldVespers.json").read_text(encoding="utf-8"))
    assert data["title"] == "Vespers"
    assert data["blocks"] == [{"type": "stanza", "content": "Let my prayer rise"}]


def test_validate_continues_past_undecodable_file(prayers_dir, capsys):
    (prayers_dir / "latin1.json").write_bytes(b'{"id": "\xff"}')
    code = main.main(["validate", str(prayers_dir / "latin1.json"), str(prayers_dir / "good.json")])

    assert code == 1
    assert "good.json: OK" in capsys.readouterr().out


def test_draft_defaults_when_none_saved(tmp_path, capsys):
    assert main.main(["draft", "--dir", str(tmp_path / "drafts")]) == 0
    assert "draft 'testPrayer': OK" in capsys.readouterr().out


def test_draft_from_prayer_is_validated(prayers_dir, tmp_path, capsys):
    drafts = tmp_path / "drafts"
    assert main.main(["draft", "--dir", str(drafts), "--from", str(prayers_dir / "bad.json")]) == 1

    out = capsys.readouterr().out
    assert "draft 'Bad_Id': 2 error(s)" in out
    assert (drafts / "prayer-editor-draft.json").is_file()

    # The saved draft is picked up on the next run
    assert main.main(["draft", "--dir", str(drafts)]) == 1


def test_draft_clear(prayers_dir, tmp_path):
    drafts = tmp_path / "drafts"
    assert main.main(["draft", "--dir", str(drafts), "--from", str(prayers_dir / "good.json")]) == 0
    assert main.main(["draft", "--dir", str(drafts), "--clear"]) == 0
    assert not (drafts / "prayer-editor-draft.json").exists()


def test_draft_from_missing_prayer_fails(prayers_dir, tmp_path):
    assert main.main(["draft", "--dir", str(tmp_path), "--from", str(prayers_dir / "missing.json")]) == 1
