from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from currentcost.core.tree import Tree, parse_tree
from currentcost.logging import MessageLogAdapter
from currentcost.parsing.message.classic import decode_classic
from currentcost.parsing.message.classify import DeviceType, classify
from currentcost.parsing.message.envy import decode_envy
from currentcost.parsing.message.model import ClassicMessage, EnvyMessage

log = logging.getLogger(__name__)

DECODERS: dict[DeviceType, Callable[[str, Tree, MessageLogAdapter], Union[ClassicMessage, EnvyMessage]]] = {
    DeviceType.CLASSIC: decode_classic,
    DeviceType.ENVY: decode_envy,
}


def decode(text: str, logger: Optional[logging.Logger] = None) -> Union[ClassicMessage, EnvyMessage]:
    """
    Decode one Current Cost message.

    Args:
        text: A single ``<msg>...</msg>`` fragment.
        logger: Receives decoding diagnostics; defaults to this module's logger.

    Returns:
        A ``ClassicMessage`` or an ``EnvyMessage``.

    Raises:
        MalformedMessage: If ``text`` is not well-formed XML.
    """
    tree = parse_tree(text)
    device_type = classify(tree)
    adapter = MessageLogAdapter(logger or log, {"device_type": device_type.value})
    adapter.debug("Classified message")
    return DECODERS[device_type](text, tree, adapter)
