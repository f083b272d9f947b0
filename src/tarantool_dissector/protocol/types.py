"""
Tarantool Protocol Types and Enums

Command codes and mapping keys of the Tarantool binary protocol.
"""

from enum import IntEnum


class CommandCode(IntEnum):
    """IPROTO request and response codes."""
    OK = 0x00        # Response only
    SELECT = 0x01
    INSERT = 0x02
    REPLACE = 0x03
    UPDATE = 0x04
    DELETE = 0x05
    CALL = 0x06
    AUTH = 0x07
    EVAL = 0x08
    UPSERT = 0x09

    # Admin commands
    PING = 0x40


class HeaderKey(IntEnum):
    """Keys of the packet header mapping."""
    TYPE = 0x00      # Command code
    SYNC = 0x01      # Request/response correlation id


class BodyKey(IntEnum):
    """Keys of the packet body mapping."""
    SPACE_ID = 0x10
    INDEX_ID = 0x11
    LIMIT = 0x12
    OFFSET = 0x13
    ITERATOR = 0x14
    KEY = 0x20
    TUPLE = 0x21
    FUNCTION_NAME = 0x22
    USER_NAME = 0x23
    EXPRESSION = 0x27
    DATA = 0x30
    ERROR = 0x31
