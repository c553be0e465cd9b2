from __future__ import annotations

from enum import Enum

from currentcost.core.tree import Tree


class DeviceType(str, Enum):
    """Device generations that emit structurally different messages."""
    CLASSIC = "classic"
    ENVY = "envy"


def classify(tree: Tree) -> DeviceType:
    """
    Pick the decoding path for a parsed message.

    Classic monitors nest their identity under ``<src><name>...</name></src>``;
    every other shape, including a missing ``src``, is treated as Envy.
    """
    src = tree.get("src")
    if isinstance(src, dict) and "name" in src:
        return DeviceType.CLASSIC
    return DeviceType.ENVY
