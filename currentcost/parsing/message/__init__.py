from currentcost.parsing.message.classify import DeviceType, classify
from currentcost.parsing.message.decode import decode
from currentcost.parsing.message.model import Channel, ClassicMessage, EnvyMessage, Message, TimeOfDay

__all__ = ["DeviceType", "classify", "decode", "Channel", "ClassicMessage", "EnvyMessage", "Message", "TimeOfDay"]
