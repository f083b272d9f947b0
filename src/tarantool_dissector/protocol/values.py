"""
MessagePack Value Decoding

Thin adapter over the msgpack library. Every IPROTO length prefix, header and
body is a self-contained MessagePack value; callers need the decoded value and
the number of bytes it occupied so they can locate the next one.
"""

import logging
from typing import Any

import msgpack
from msgpack.exceptions import OutOfData, UnpackException

from ..exceptions import ProtocolError, ValueDecodeError
from .constants import LENGTH_PREFIX_SIZE

logger = logging.getLogger(__name__)


def decode_value(data: bytes, offset: int = 0) -> tuple[Any, int]:
    """
    Decode one MessagePack value.

    Args:
        data: Buffer holding the encoded value
        offset: Position of the value within data

    Returns:
        Tuple of (decoded value, bytes consumed)

    Raises:
        ValueDecodeError: If the value is invalid or extends past the buffer
    """
    # Integer map keys are the norm in IPROTO, so strict_map_key is disabled.
    # Arrays decode as tuples so that they stay hashable when used as map keys.
    unpacker = msgpack.Unpacker(raw=False, use_list=False, strict_map_key=False,
                                unicode_errors='replace')
    unpacker.feed(bytes(data[offset:]))
    try:
        value = unpacker.unpack()
    except OutOfData as e:
        raise ValueDecodeError(f"Truncated MessagePack value at offset {offset}", offset) from e
    except (UnpackException, ValueError, TypeError) as e:
        raise ValueDecodeError(f"Invalid MessagePack value at offset {offset}: {e}", offset) from e
    return value, unpacker.tell()


def decode_length_prefix(data: bytes) -> int:
    """
    Decode the packet length prefix.

    Args:
        data: Buffer starting with at least LENGTH_PREFIX_SIZE bytes

    Returns:
        Declared length of header and body, excluding the prefix

    Raises:
        ProtocolError: If the prefix is not a MessagePack unsigned integer
            filling exactly LENGTH_PREFIX_SIZE bytes
    """
    if len(data) < LENGTH_PREFIX_SIZE:
        raise ValueError(f"Length prefix too short: got {len(data)} bytes, need {LENGTH_PREFIX_SIZE}")

    try:
        length, consumed = decode_value(data[:LENGTH_PREFIX_SIZE])
    except ValueDecodeError as e:
        raise ProtocolError(f"Unsupported or unsynchronized stream: {e}", 0) from e

    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ProtocolError(
            f"Unsupported or unsynchronized stream: length prefix decodes to {length!r}", 0)

    if consumed != LENGTH_PREFIX_SIZE:
        raise ProtocolError(
            f"Unsupported or unsynchronized stream: length prefix occupies {consumed} of {LENGTH_PREFIX_SIZE} bytes", 0)

    logger.debug(f"Length prefix declares {length} bytes")
    return length
