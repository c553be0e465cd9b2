"""
This package contains all modules related to decoding messages received from
Current Cost energy monitors.

Sub-packages handle specific concerns:

- ``message``: Classification and decoding of Classic and Envy messages.
- ``history``: Reconstruction of the historical usage tables.
"""
from currentcost.parsing.history import HistoryRecord, HistoryTable, classic_history, envy_history
from currentcost.parsing.message import ClassicMessage, DeviceType, EnvyMessage, Message, classify, decode

__all__ = [
    "HistoryRecord",
    "HistoryTable",
    "classic_history",
    "envy_history",
    "ClassicMessage",
    "DeviceType",
    "EnvyMessage",
    "Message",
    "classify",
    "decode",
]
