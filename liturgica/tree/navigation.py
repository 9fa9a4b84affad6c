"""
Read-only helpers over a built navigation tree.

These back the navigator and picker views: filtering by search text,
hiding editor-only branches, and a plain text rendering.
"""

from typing import List, Optional

from ..models import TreeNode


def matches_search(node: TreeNode, query: str) -> bool:
    """Case-insensitive match of the query against route or filename."""
    if not query:
        return True
    needle = query.lower()
    if needle in node.route.lower():
        return True
    return node.filename is not None and needle in node.filename.lower()


def search_tree(node: TreeNode, query: str) -> Optional[TreeNode]:
    """
    Return a pruned copy of the tree keeping matches and their ancestors.

    Returns None when nothing in the subtree matches. Containers whose
    children were all pruned keep an empty children list, so they stay
    containers (filename None).
    """
    if not query:
        return node.model_copy(deep=True)

    children = [c for c in (search_tree(child, query) for child in node.children) if c is not None]
    if not children and not matches_search(node, query):
        return None

    return node.model_copy(update={"children": children})


def visible_tree(node: TreeNode, include_editor_only: bool = False) -> Optional[TreeNode]:
    """
    Return a copy of the tree without editor-only nodes.

    Returns None if the node itself is editor-only and those are excluded.
    """
    if node.editor_only and not include_editor_only:
        return None

    children = [c for c in (visible_tree(child, include_editor_only) for child in node.children) if c is not None]
    return node.model_copy(update={"children": children})


def collect_routes(node: TreeNode) -> List[str]:
    """All routes in the tree, depth first."""
    return [n.route for n in node.walk()]


def render_tree(node: TreeNode, max_depth: Optional[int] = None, indent: str = "  ") -> str:
    """
    Render the tree as indented text, one node per line.

    Content nodes show "route -> filename"; containers show "route/".
    """
    lines: List[str] = []

    def _render(current: TreeNode, depth: int) -> None:
        if max_depth is not None and depth > max_depth:
            return
        prefix = indent * depth
        if current.is_leaf:
            lines.append(f"{prefix}{current.route} -> {current.filename}")
        else:
            lines.append(f"{prefix}{current.route}/")
        for child in current.children:
            _render(child, depth + 1)

    _render(node, 0)
    return "\n".join(lines)
