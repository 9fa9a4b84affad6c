"""
Storage path derivation for content nodes.

Filenames are derived purely from route tokens. Nothing here touches the
filesystem or checks that the resulting paths are unique.
"""

from typing import List, Sequence

FEAST_SONGS_MARKER = "qurbanaSongs_"
PATH_SEPARATOR = "/"


def clean_path_parts(path_parts: Sequence[str]) -> List[str]:
    """
    Drop a parent's route prefix from child route tokens.

    "qurbana_preparation" under "qurbana" becomes "preparation". The first
    part is never stripped, and each part is compared against the original
    (unstripped) part before it.
    """
    cleaned = []
    for i, part in enumerate(path_parts):
        if i > 0 and "_" in part:
            prefix = path_parts[i - 1] + "_"
            if part.startswith(prefix):
                cleaned.append(part[len(prefix):])
                continue
        cleaned.append(part)
    return cleaned


def derive_path(path_parts: Sequence[str], file_extension: str) -> str:
    """
    Derive the storage filename for a content node.

    Args:
        path_parts: Ancestor route tokens followed by the node's own route
        file_extension: Extension appended to the final component

    Returns:
        A '/' separated relative path such as "qurbana/preparation.json"
    """
    cleaned = clean_path_parts(path_parts)

    # Feast songs live in their own folder: <feast>/<feast>Songs
    route = path_parts[-1]
    if FEAST_SONGS_MARKER in route:
        feast_name = route.split(FEAST_SONGS_MARKER)[1]
        cleaned[-1] = f"{feast_name}{PATH_SEPARATOR}{feast_name}Songs"

    return PATH_SEPARATOR.join(cleaned) + file_extension
