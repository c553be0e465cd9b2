"""
Decoder for Classic (CC02) messages.

Example::

    <msg><date><dsb>00001</dsb><hr>12</hr><min>32</min><sec>01</sec></date>
    <src><name>CC02</name><id>12345</id><type>1</type><sver>1.06</sver></src>
    <ch1><watts>07806</watts></ch1>...<tmpr>21.1</tmpr></msg>
"""
from __future__ import annotations

from currentcost.core.numbers import optional_int, to_float, to_int
from currentcost.core.tree import Tree
from currentcost.logging import MessageLogAdapter
from currentcost.parsing.history.decode import CLASSIC_SENSOR, classic_history
from currentcost.parsing.message.extractors import extract_channels, scalar
from currentcost.parsing.message.model import ClassicMessage, TimeOfDay


def decode_classic(text: str, tree: Tree, logger: MessageLogAdapter) -> ClassicMessage:
    src = tree.get("src") or {}
    date = tree.get("date")
    if not isinstance(date, dict):
        logger.debug("Classic message has no date block", extra={"details": {"date": date}})
        date = {}

    device_id = scalar(src, "id")
    sensor_type = optional_int(scalar(src, "type"))
    channels = extract_channels(tree)
    has_history = isinstance(tree.get("hist"), dict)

    # A Classic monitor has a single sensor; its identity lives in ``src``.
    return ClassicMessage(
        message=text,
        device_name=scalar(src, "name") or "",
        device_version=scalar(src, "sver") or "",
        device_id=device_id,
        sensor_type=sensor_type,
        days_since_boot=to_int(date.get("dsb")),
        time_of_day=TimeOfDay(
            hour=to_int(date.get("hr")),
            minute=to_int(date.get("min")),
            second=to_int(date.get("sec")),
        ),
        temperature=to_float(scalar(tree, "tmpr")),
        sensor=CLASSIC_SENSOR if channels else None,
        reading_id=device_id if channels else None,
        reading_type=sensor_type if channels else None,
        channels=channels,
        history_present=has_history,
        history_table=classic_history(tree, logger) if has_history else {},
    )
