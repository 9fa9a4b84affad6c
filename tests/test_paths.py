from liturgica.tree import clean_path_parts, derive_path


def test_prefix_stripping():
    assert clean_path_parts(["qurbana", "qurbana_preparation"]) == ["qurbana", "preparation"]


def test_first_part_is_never_stripped():
    assert clean_path_parts(["qurbana_preparation"]) == ["qurbana_preparation"]


def test_non_matching_parts_kept():
    assert clean_path_parts(["qurbana", "sheema_vespers"]) == ["qurbana", "sheema_vespers"]


def test_stripping_compares_against_original_previous_part():
    parts = ["qurbana", "qurbana_songs", "qurbana_songs_extra"]
    assert clean_path_parts(parts) == ["qurbana", "songs", "extra"]


def test_parts_without_underscore_are_not_stripped():
    assert clean_path_parts(["a", "abc"]) == ["a", "abc"]


def test_derive_path_joins_and_appends_extension():
    assert derive_path(["qurbana", "qurbana_preparation"], ".json") == "qurbana/preparation.json"
    assert derive_path(["resources", "glossary"], ".md") == "resources/glossary.md"


def test_feast_songs_nesting():
    assert derive_path(["qurbana", "qurbanaSongs_yeldho"], ".json") == "qurbana/yeldho/yeldhoSongs.json"


def test_feast_songs_nesting_under_stripped_parent():
    parts = ["qurbana", "qurbana_songs", "qurbanaSongs_denha"]
    assert derive_path(parts, ".json") == "qurbana/songs/denha/denhaSongs.json"


def test_single_part_path():
    assert derive_path(["malankara"], ".json") == "malankara.json"
