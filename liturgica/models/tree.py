"""
Tree data models for Liturgica.

TreeNodeConfig and PatternConfig describe the user-authored navigation
configuration. TreeNode is the constructed navigation tree handed to the
navigator and picker views.
"""

from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PatternConfig(BaseModel):
    """
    A macro that generates a batch of sibling nodes from a compact rule.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str = Field(
        ...,
        description="Pattern kind: 'list', 'hours' or 'days'"
    )

    items: Optional[List[str]] = Field(
        default=None,
        description="Explicit item values, used when type is 'list'"
    )

    exclude: Optional[List[str]] = Field(
        default=None,
        description="Canonical values to skip, used when type is 'hours' or 'days'"
    )

    route_format: str = Field(
        default="{item}",
        alias="routeFormat",
        description="Route template; '{item}' is replaced by each item value"
    )


class TreeNodeConfig(BaseModel):
    """
    One node of the navigation configuration.

    A node either lists its children, generates them from a pattern, or
    both. A node that ends up with no children is a content file.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    route: str = Field(
        ...,
        description="Route token, used both as display label and path component"
    )

    children: Optional[List['TreeNodeConfig']] = Field(
        default=None,
        description="Explicitly listed child nodes"
    )

    pattern: Optional[PatternConfig] = Field(
        default=None,
        description="Pattern generating additional children after the explicit ones"
    )

    always_include: Optional[bool] = Field(
        default=None,
        alias="alwaysInclude",
        description="Reserved flag, carried but not interpreted"
    )

    file_extension: Optional[str] = Field(
        default=None,
        alias="fileExtension",
        description="Extension for derived filenames, '.json' when unset"
    )

    editor_only: Optional[bool] = Field(
        default=None,
        alias="editorOnly",
        description="True/False when set explicitly, None to inherit from the parent"
    )


TreeNodeConfig.model_rebuild()


class TreeNode(BaseModel):
    """
    A node of the constructed navigation tree.

    Containers own their children and have no filename; leaves have a
    derived filename and no children.
    """

    model_config = ConfigDict(populate_by_name=True)

    route: str
    parent: Optional[str] = None
    filename: Optional[str] = None
    last_modified: Optional[int] = Field(default=None, alias="lastModified")
    min_version_code: int = Field(default=34, alias="minVersionCode")
    children: List['TreeNode'] = Field(default_factory=list)
    editor_only: bool = Field(default=False, alias="editorOnly")

    @property
    def is_leaf(self) -> bool:
        return self.filename is not None

    @property
    def is_container(self) -> bool:
        return self.filename is None

    def walk(self) -> Iterator['TreeNode']:
        """Yield this node and all descendants, depth first, in order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def leaves(self) -> List['TreeNode']:
        """Return all content (file) nodes under this node, in order."""
        return [node for node in self.walk() if node.is_leaf]

    def find(self, route: str) -> Optional['TreeNode']:
        """Return the first node with the given route, or None."""
        for node in self.walk():
            if node.route == route:
                return node
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the navigation views."""
        return self.model_dump(by_alias=True)


TreeNode.model_rebuild()
