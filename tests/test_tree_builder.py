"""
Tests for navigation tree construction and configuration loading.
"""

import json

import pytest

from liturgica.exceptions import ConfigError, ConfigNotFoundError, ConfigParseError
from liturgica.models import TreeNodeConfig
from liturgica.tree import builder
from liturgica.tree import (
    MIN_VERSION_CODE,
    build_navigation_tree,
    build_tree,
    load_tree_config,
)


def make_config(data):
    return TreeNodeConfig.model_validate(data)


@pytest.fixture
def sample_config():
    return make_config({
        "route": "malankara",
        "children": [
            {
                "route": "qurbana",
                "children": [
                    {"route": "qurbana_preparation"},
                    {"route": "qurbanaSongs_yeldho"},
                ],
            },
            {
                "route": "sheema",
                "editorOnly": True,
                "pattern": {"type": "hours", "exclude": ["none"], "routeFormat": "sheema_{item}"},
            },
            {"route": "about"},
        ],
    })


def all_nodes(node):
    return list(node.walk())


def test_leaf_container_duality(sample_config):
    tree = build_tree(sample_config)
    for node in all_nodes(tree):
        assert (node.filename is None) == (len(node.children) > 0)


def test_root_route_is_not_part_of_paths(sample_config):
    tree = build_tree(sample_config)

    assert tree.filename is None
    assert tree.parent is None
    assert tree.find("qurbana_preparation").filename == "qurbana/preparation.json"
    assert tree.find("about").filename == "about.json"


def test_feast_songs_filename(sample_config):
    tree = build_tree(sample_config)
    assert tree.find("qurbanaSongs_yeldho").filename == "qurbana/yeldho/yeldhoSongs.json"


def test_pattern_children_and_paths(sample_config):
    tree = build_tree(sample_config)
    sheema = tree.find("sheema")

    assert [c.route for c in sheema.children] == [
        "sheema_vespers", "sheema_compline", "sheema_matins",
        "sheema_prime", "sheema_terce", "sheema_sext",
    ]
    assert sheema.children[0].filename == "sheema/vespers.json"
    assert all(c.parent == "sheema" for c in sheema.children)


def test_constant_presentation_fields(sample_config):
    for node in all_nodes(build_tree(sample_config)):
        assert node.last_modified is None
        assert node.min_version_code == MIN_VERSION_CODE == 34


def test_explicit_children_come_before_pattern_children():
    tree = build_tree(make_config({
        "route": "days",
        "children": [{"route": "sunday"}],
        "pattern": {"type": "days", "exclude": ["tuesday", "wednesday", "thursday", "friday", "saturday"]},
    }))
    assert [c.route for c in tree.children] == ["sunday", "monday"]


def test_editor_only_inheritance():
    tree = build_tree(make_config({
        "route": "malankara",
        "children": [
            {"route": "plain", "children": [{"route": "plain_leaf"}]},
            {
                "route": "drafts",
                "editorOnly": True,
                "children": [
                    {"route": "drafts_inherit"},
                    {"route": "drafts_public", "editorOnly": False, "children": [{"route": "deep"}]},
                ],
            },
        ],
    }))

    assert tree.editor_only is False
    assert tree.find("plain_leaf").editor_only is False
    assert tree.find("drafts").editor_only is True
    assert tree.find("drafts_inherit").editor_only is True
    assert tree.find("drafts_public").editor_only is False
    assert tree.find("deep").editor_only is False


def test_inherited_editor_only_argument():
    tree = build_tree(make_config({"route": "leaf"}), parent_editor_only=True)
    assert tree.editor_only is True


def test_file_extension_inherits_to_children_and_pattern_children():
    tree = build_tree(make_config({
        "route": "resources",
        "fileExtension": ".md",
        "children": [
            {"route": "intro"},
            {"route": "data", "fileExtension": ".csv"},
        ],
        "pattern": {"type": "list", "items": ["glossary"]},
    }))

    assert tree.find("intro").filename == "resources/intro.md"
    assert tree.find("data").filename == "resources/data.csv"
    assert tree.find("glossary").filename == "resources/glossary.md"


def test_file_extension_inherits_through_containers():
    tree = build_tree(make_config({
        "route": "notes",
        "fileExtension": ".txt",
        "children": [{"route": "section", "children": [{"route": "page"}]}],
    }))
    assert tree.find("page").filename == "notes/section/page.txt"


def test_default_extension_is_not_stamped():
    config = make_config({"route": "a", "children": [{"route": "b"}]})
    tree = build_tree(config)

    assert tree.find("b").filename == "a/b.json"
    assert config.children[0].file_extension is None


def test_root_leaf_gets_own_filename():
    tree = build_tree(make_config({"route": "malankara"}))
    assert tree.filename == "malankara.json"
    assert tree.children == []


def test_empty_pattern_makes_leaf():
    tree = build_tree(make_config({"route": "empty", "pattern": {"type": "list", "items": []}}))
    assert tree.filename == "empty.json"


def test_explicit_ancestors_and_parent():
    tree = build_tree(make_config({"route": "qurbana_preparation"}), parent_route="qurbana", ancestors=["qurbana"])
    assert tree.parent == "qurbana"
    assert tree.filename == "qurbana/preparation.json"


def test_unknown_pattern_type_aborts_build():
    config = make_config({
        "route": "malankara",
        "children": [{"route": "x", "pattern": {"type": "months"}}],
    })
    with pytest.raises(ConfigError, match="months"):
        build_tree(config)


def test_build_is_idempotent_and_does_not_mutate_input(sample_config):
    before = sample_config.model_dump()
    first = build_tree(sample_config)
    second = build_tree(sample_config)

    assert first.to_dict() == second.to_dict()
    assert sample_config.model_dump() == before


def test_load_tree_config_from_file(tmp_path):
    path = tmp_path / "tree.config.json"
    path.write_text(json.dumps({"route": "malankara", "children": [{"route": "about"}]}))

    config = load_tree_config(path)
    assert config.route == "malankara"
    assert config.children[0].route == "about"


def test_load_tree_config_missing_file(tmp_path):
    with pytest.raises(ConfigNotFoundError, match="not found"):
        load_tree_config(tmp_path / "missing.json")


def test_load_tree_config_invalid_json(tmp_path):
    path = tmp_path / "tree.config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigParseError, match="Invalid JSON"):
        load_tree_config(path)


def test_load_tree_config_wrong_shape(tmp_path):
    path = tmp_path / "tree.config.json"
    path.write_text(json.dumps({"children": []}))
    with pytest.raises(ConfigParseError):
        load_tree_config(path)


def test_load_tree_config_not_utf8(tmp_path):
    path = tmp_path / "tree.config.json"
    path.write_bytes(b'{"route": "\xff\xfe"}')
    with pytest.raises(ConfigParseError, match="not valid UTF-8"):
        load_tree_config(path)


def test_load_tree_config_read_failure(tmp_path, monkeypatch):
    path = tmp_path / "tree.config.json"
    path.write_text(json.dumps({"route": "x"}))

    def failing_open(*args, **kwargs):
        raise PermissionError("permission denied")

    monkeypatch.setattr(builder, "open", failing_open, raising=False)
    with pytest.raises(ConfigParseError, match="Could not read tree config"):
        load_tree_config(path)


def test_config_errors_share_a_base():
    assert issubclass(ConfigNotFoundError, ConfigError)
    assert issubclass(ConfigParseError, ConfigError)


def test_bundled_navigation_tree():
    tree = build_navigation_tree()

    assert tree.route == "malankara"
    assert tree.find("qurbanaSongs_yeldho").filename == "qurbana/songs/yeldho/yeldhoSongs.json"
    assert tree.find("dailyPrayers_sheema_vespers").filename == "dailyPrayers/sheema/vespers.json"
    assert tree.find("dailyPrayers_weekdays_saturday") is None
    assert tree.find("dailyPrayers_weekdays_monday").filename == "dailyPrayers/weekdays/monday.json"
    assert tree.find("glossary").filename == "resources/glossary.md"
    assert tree.find("drafts_scratch").editor_only is True
    assert tree.find("drafts_review").editor_only is False
