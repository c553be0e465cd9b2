"""
Decoder for Envy (CC128) messages.

Example::

    <msg><src>CC128-v0.11</src><dsb>00089</dsb><time>13:02:39</time>
    <tmpr>18.7</tmpr><sensor>1</sensor><id>01234</id><type>1</type>
    <ch1><watts>00345</watts></ch1>...</msg>
"""
from __future__ import annotations

from currentcost.core.numbers import optional_int, to_float, to_int
from currentcost.core.tree import Tree
from currentcost.logging import MessageLogAdapter
from currentcost.parsing.history.decode import envy_history
from currentcost.parsing.message.extractors import contains_key, extract_channels, scalar
from currentcost.parsing.message.model import EnvyMessage, TimeOfDay


def split_device(src: str) -> tuple[str, str]:
    """Split ``"CC128-v0.11"`` into ``("CC128", "v0.11")``; no hyphen means no version."""
    name, _, version = src.partition("-")
    return name, version


def parse_time(value: str | None) -> TimeOfDay:
    parts = (value or "").split(":", 2)
    parts += [""] * (3 - len(parts))
    return TimeOfDay(hour=to_int(parts[0]), minute=to_int(parts[1]), second=to_int(parts[2]))


def decode_envy(text: str, tree: Tree, logger: MessageLogAdapter) -> EnvyMessage:
    src = scalar(tree, "src")
    if src is None:
        logger.debug("Envy message has no scalar src", extra={"details": {"src": tree.get("src")}})
    device_name, device_version = split_device(src or "")
    has_history = contains_key(tree, "hist")

    return EnvyMessage(
        message=text,
        device_name=device_name,
        device_version=device_version,
        days_since_boot=to_int(scalar(tree, "dsb")),
        time_of_day=parse_time(scalar(tree, "time")),
        temperature=to_float(scalar(tree, "tmpr")),
        sensor=optional_int(scalar(tree, "sensor")),
        reading_id=scalar(tree, "id"),
        reading_type=optional_int(scalar(tree, "type")),
        channels=extract_channels(tree),
        history_present=has_history,
        # The parsed tree folds the per-sensor <data> blocks, so history is
        # rebuilt from the raw text.
        history_table=envy_history(text, logger) if has_history else {},
    )
