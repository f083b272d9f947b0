"""
Tarantool Protocol Dissector Library

A Python library for passive inspection of Tarantool binary protocol (IPROTO)
traffic. Byte spans delivered by a capture or transport layer are decoded into
annotated descriptions of greetings, requests and responses.

Version: 1.0.0
"""

from .dissector import StreamDissector, TarantoolDissector
from .exceptions import (
    DissectorError,
    ProtocolError,
    ValueDecodeError,
)
from .models import (
    Annotation,
    CommandDescriptor,
    DissectionResult,
    FrameDecision,
    GreetingInfo,
    PacketHeader,
    PacketKind,
)
from .registry import lookup_command

__version__ = "1.0.0"
__all__ = [
    "TarantoolDissector",
    "StreamDissector",
    "DissectorError",
    "ProtocolError",
    "ValueDecodeError",
    "Annotation",
    "CommandDescriptor",
    "DissectionResult",
    "FrameDecision",
    "GreetingInfo",
    "PacketHeader",
    "PacketKind",
    "lookup_command"
]
