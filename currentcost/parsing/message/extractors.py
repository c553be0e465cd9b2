from __future__ import annotations

from typing import Any, Optional

from currentcost.core.tree import Tree
from currentcost.parsing.message.model import CHANNELS, Channel


def scalar(tree: Any, key: str) -> Optional[str]:
    """Return ``tree[key]`` when it is a plain text value, else ``None``."""
    if not isinstance(tree, dict):
        return None
    value = tree.get(key)
    return value if isinstance(value, str) else None


def extract_channels(tree: Tree) -> dict[int, Channel]:
    # Each ``<chN>`` holds a single ``<unit>value</unit>`` pair; units are kept
    # as sent and resolved against channel 1 by the model.
    channels: dict[int, Channel] = {}
    for number in CHANNELS:
        reading = tree.get(f"ch{number}")
        if not isinstance(reading, dict) or not reading:
            continue
        unit_name, raw_value = next(iter(reading.items()))
        channels[number] = Channel(unit_name=unit_name, raw_value=raw_value if isinstance(raw_value, str) else "")
    return channels


def contains_key(node: Any, key: str) -> bool:
    if isinstance(node, dict):
        return key in node or any(contains_key(child, key) for child in node.values())
    if isinstance(node, list):
        return any(contains_key(child, key) for child in node)
    return False
