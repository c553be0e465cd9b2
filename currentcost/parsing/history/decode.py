"""
History reconstruction for both device generations.

Classic monitors send one ``<hist>`` block for their single sensor, grouped by
span (``<hrs>``, ``<days>``, ``<mths>``, ``<yrs>``), so the parsed tree is enough.

Envy monitors send one ``<data>`` block per sensor inside ``<hist>``. Folding those
repeated blocks through the generic tree loses their multiplicity, so the Envy
path works on the raw message text instead of the decoded tree.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Optional, Union

from currentcost.core.numbers import to_float
from currentcost.core.tree import Tree

# span -> age -> value
HistoryRecord = dict[str, dict[int, float]]
# sensor -> record
HistoryTable = dict[int, HistoryRecord]

# Span prefix letter -> span name.
SPANS: dict[str, str] = {
    "h": "hours",
    "d": "days",
    "m": "months",
    "y": "years",
}

# Classic span group tags, in the order the device sends them.
CLASSIC_GROUPS: tuple[str, ...] = ("hrs", "days", "mths", "yrs")

CLASSIC_SENSOR = 0

_AGE_KEY = re.compile(r"^([a-z])(\d+)$")
_DATA_BOUNDARY = re.compile(r"</data>\s*<data>")
_SENSOR = re.compile(r"<sensor>\s*(\d+)\s*</sensor>")
_AGE_TAGS: dict[str, re.Pattern[str]] = {
    letter: re.compile(rf"<{letter}(\d+)>([^<]+)</{letter}\1>") for letter in SPANS
}

log = logging.getLogger(__name__)


def classic_history(tree: Tree, logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None) -> HistoryTable:
    """
    Build the history table of a Classic message from its parsed tree.

    Args:
        tree: The parsed message (root children).
        logger: Where to report skipped entries.

    Returns:
        ``{0: {span: {age: value}}}``, or ``{}`` when there is no ``hist`` block.
    """
    logger = logger or log
    hist = tree.get("hist")
    if not isinstance(hist, dict):
        return {}

    record: HistoryRecord = {}
    for group in CLASSIC_GROUPS:
        entries = hist.get(group)
        if not isinstance(entries, dict):
            continue
        for key, raw in entries.items():
            match = _AGE_KEY.match(key)
            if not match or match.group(1) not in SPANS:
                logger.debug("Skipping history key", extra={"details": {"group": group, "key": key}})
                continue
            value = _history_value(raw)
            if value is None:
                logger.debug("Skipping non-numeric history value", extra={"details": {"key": key, "value": raw}})
                continue
            record.setdefault(SPANS[match.group(1)], {})[int(match.group(2))] = value

    return {CLASSIC_SENSOR: record}


def envy_history(text: str, logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None) -> HistoryTable:
    """
    Build the history table of an Envy message from its raw text.

    The text is cut at every boundary between consecutive ``<data>`` blocks, giving
    one chunk per sensor. Each chunk must name its ``<sensor>``; chunks that do not
    are skipped. Age tags (``<h250>7.608</h250>``, ``<d01>...</d01>``, ...) are then
    collected per span letter, however many times the same letter repeats.

    Args:
        text: The raw message text, not the parsed tree.
        logger: Where to report skipped blocks.

    Returns:
        ``{sensor: {span: {age: value}}}``; ``{}`` when no ``<data>`` block exists.
    """
    logger = logger or log
    table: HistoryTable = {}
    for chunk in _data_blocks(text):
        match = _SENSOR.search(chunk)
        if not match:
            logger.debug("Skipping history block without sensor", extra={"details": {"block": chunk[:40]}})
            continue
        table[int(match.group(1))] = _parse_ages(chunk)
    return table


def _data_blocks(text: str) -> list[str]:
    start = text.find("<data>")
    if start < 0:
        return []
    chunks = _DATA_BOUNDARY.split(text[start + len("<data>"):])
    last = chunks[-1]
    end = last.rfind("</data>")
    if end >= 0:
        chunks[-1] = last[:end]
    return chunks


def _parse_ages(chunk: str) -> HistoryRecord:
    record: HistoryRecord = {}
    for letter, span in SPANS.items():
        for age, raw in _AGE_TAGS[letter].findall(chunk):
            value = to_float(raw)
            if value is None:
                continue
            record.setdefault(span, {})[int(age)] = value
    return record


def _history_value(raw: Any) -> Optional[float]:
    # A repeated age key folds into a list; the last occurrence wins.
    if isinstance(raw, list) and raw:
        raw = raw[-1]
    return to_float(raw)
