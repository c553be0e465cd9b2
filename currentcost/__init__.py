from currentcost.config import DecoderSettings, get_settings
from currentcost.core.tree import MalformedMessage
from currentcost.parsing import (
    ClassicMessage,
    DeviceType,
    EnvyMessage,
    HistoryTable,
    Message,
    classify,
    decode,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ClassicMessage",
    "DecoderSettings",
    "DeviceType",
    "EnvyMessage",
    "HistoryTable",
    "MalformedMessage",
    "Message",
    "classify",
    "decode",
    "get_settings",
]

try:
    __version__ = version("currentcost")
except PackageNotFoundError:
    __version__ = "0.0.0"
