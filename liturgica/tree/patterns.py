"""
Pattern expansion for the navigation tree.

A pattern generates sibling node configurations from a compact rule
instead of listing every child by hand.
"""

from typing import List

from ..exceptions import ConfigError
from ..models import PatternConfig, TreeNodeConfig


# Canonical hours of prayer, in liturgical order
HOURS = (
    "vespers",
    "compline",
    "matins",
    "prime",
    "terce",
    "sext",
    "none",
)

DAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

ITEM_PLACEHOLDER = "{item}"


def pattern_items(pattern: PatternConfig) -> List[str]:
    """
    Resolve the item values a pattern expands over.

    Raises:
        ConfigError: If the pattern type is not one of list, hours or days
    """
    exclude = set(pattern.exclude or [])

    if pattern.type == "hours":
        return [hour for hour in HOURS if hour not in exclude]
    if pattern.type == "days":
        return [day for day in DAYS if day not in exclude]
    if pattern.type == "list":
        return list(pattern.items or [])

    raise ConfigError(f"Unknown pattern type: {pattern.type}")


def expand_pattern(pattern: PatternConfig) -> List[TreeNodeConfig]:
    """
    Generate child node configurations from a pattern.

    Args:
        pattern: The pattern to expand

    Returns:
        One child configuration per item, in item order

    Raises:
        ConfigError: If the pattern type is unknown
    """
    return [
        TreeNodeConfig(route=pattern.route_format.replace(ITEM_PLACEHOLDER, item, 1))
        for item in pattern_items(pattern)
    ]
