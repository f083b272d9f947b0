"""
Tarantool packet framing.

This module decides whether a complete packet is available and decodes
the header and body values of a complete packet.
"""

import logging
from typing import Any

from .base import BaseParser
from ..exceptions import ProtocolError, ValueDecodeError
from ..models import FrameDecision, PacketHeader
from ..protocol.constants import LENGTH_PREFIX_SIZE
from ..protocol.types import HeaderKey
from ..protocol.values import decode_length_prefix, decode_value

logger = logging.getLogger(__name__)


class FrameParser(BaseParser):
    """Parser for the IPROTO length-prefixed packet frame."""

    @classmethod
    def read_frame(cls, data: bytes) -> FrameDecision:
        """
        Determine whether data starts with a complete packet.

        Args:
            data: bytes available at the current stream position

        Returns:
            FrameDecision with the total packet length, or the number of
            additional bytes required

        Raises:
            ProtocolError: If the length prefix cannot be decoded

        Reference: Tarantool binary protocol, "Packet structure"
        """
        available = len(data)
        if available < LENGTH_PREFIX_SIZE:
            return FrameDecision.need_more(LENGTH_PREFIX_SIZE - available)

        required = LENGTH_PREFIX_SIZE + decode_length_prefix(data)
        if available < required:
            logger.debug(f"Reassembly required: have {available} of {required} bytes")
            return FrameDecision.need_more(required - available)

        return FrameDecision.complete_frame(required)

    @classmethod
    def decode_packet(cls, frame: bytes) -> tuple[PacketHeader, int, Any, int]:
        """
        Decode the header and body of a complete packet.

        Args:
            frame: exactly one packet, length prefix included

        Returns:
            Tuple of (header, header size, body value, body size)

        Raises:
            ProtocolError: If either value is undecodable or the header is malformed
        """
        header_data, header_size = cls._decode_in_frame(frame, LENGTH_PREFIX_SIZE, "header")
        header = cls.parse_header(header_data)

        body_offset = LENGTH_PREFIX_SIZE + header_size
        if body_offset >= len(frame):
            return header, header_size, {}, 0

        body, body_size = cls._decode_in_frame(frame, body_offset, "body")
        trailing = len(frame) - body_offset - body_size
        if trailing:
            logger.debug(f"Ignoring {trailing} trailing bytes after packet body")

        return header, header_size, body, body_size

    @classmethod
    def parse_header(cls, header_data: Any) -> PacketHeader:
        """
        Build a PacketHeader from a decoded header mapping.

        Raises:
            ProtocolError: If the mapping lacks an integer command code
        """
        if not isinstance(header_data, dict):
            raise ProtocolError(
                f"Packet header is not a mapping: {type(header_data).__name__}", LENGTH_PREFIX_SIZE)

        code = header_data.get(HeaderKey.TYPE)
        if isinstance(code, bool) or not isinstance(code, int):
            raise ProtocolError(f"Packet header has no valid command code: {code!r}", LENGTH_PREFIX_SIZE)

        return PacketHeader(code=code, sync=header_data.get(HeaderKey.SYNC))

    @staticmethod
    def _decode_in_frame(frame: bytes, offset: int, name: str) -> tuple[Any, int]:
        try:
            return decode_value(frame, offset)
        except ValueDecodeError as e:
            raise ProtocolError(f"Cannot decode packet {name}: {e}", offset) from e
