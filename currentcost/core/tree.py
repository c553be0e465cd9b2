"""
Generic XML-to-tree folding for Current Cost messages.

The device emits small XML fragments such as ``<msg><src>CC128-v0.11</src>...</msg>``.
This module turns one fragment into plain Python containers:

- the root element is stripped, the result is a dict of its children;
- a leaf element becomes its stripped text;
- an element with children (or attributes) becomes a dict;
- a tag repeated among siblings becomes a list, a single tag never does.

Repeated siblings are only detected structurally, so consumers that need to keep
the multiplicity of heterogeneous blocks must not rely on this tree for it.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Union

Tree = dict[str, Any]
Node = Union[str, Tree, list]


class MalformedMessage(ValueError):
    """Raised when a message is not well-formed XML."""


def parse_tree(text: str) -> Tree:
    """
    Parse a message fragment into a nested dict tree.

    Args:
        text: The raw message, usually ``<msg>...</msg>``.

    Returns:
        The children of the root element as a dict.

    Raises:
        MalformedMessage: If ``text`` is empty, not a string or not well-formed XML.
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedMessage("message is empty")
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as exc:
        raise MalformedMessage(f"message is not valid XML - {exc}") from exc

    node = _fold(root)
    if isinstance(node, dict):
        return node
    # A bare ``<msg>text</msg>`` has no fields to decode.
    return {"content": node} if node else {}


def _fold(element: ET.Element) -> Node:
    children = list(element)
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text

    folded: Tree = dict(element.attrib)
    for child in children:
        value = _fold(child)
        if child.tag not in folded:
            folded[child.tag] = value
        elif isinstance(folded[child.tag], list):
            folded[child.tag].append(value)
        else:
            folded[child.tag] = [folded[child.tag], value]

    mixed = text + "".join((child.tail or "").strip() for child in children)
    if mixed:
        folded["content"] = mixed
    return folded
